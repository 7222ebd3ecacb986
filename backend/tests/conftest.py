"""
Pytest fixtures and configuration for the order mail tests

Orders are built in memory; no database or mail server is needed.

Author: TM3
Date: 2025-10-17
"""
import pytest
from datetime import datetime
from decimal import Decimal

from order_mail.domain.order import (
    Order, OrderPosition, PositionType, TradeItem,
    DeliveryAddress, Country, PlatformAccount, Reseller,
)


@pytest.fixture
def make_position():
    """
    Factory for order positions

    Usage: make_position("1111111111111", "10.00")
    """
    def _make(gtin13="1111111111111", price="10.00", name="Barra Keto Cacao",
              position_type=PositionType.ARTICLE):
        return OrderPosition(
            gtin13=gtin13,
            name=name,
            price_gross=Decimal(price),
            position_type=position_type,
        )
    return _make


@pytest.fixture
def delivery_address():
    """Provides a fully populated delivery address"""
    return DeliveryAddress(
        first_name="Maria",
        last_name="Muster",
        address1="Hauptstrasse 1",
        address2="Hinterhaus",
        address3="c/o Lager",
        zip="10115",
        city="Berlin",
        state="Berlin",
        company="Muster GmbH",
        country=Country(id=49, name="Germany"),
    )


@pytest.fixture
def platform_account():
    """Provides a platform account with reseller"""
    return PlatformAccount(id=7, account_name="shop-de", reseller=Reseller(id=3))


@pytest.fixture
def make_order(delivery_address, platform_account):
    """
    Factory for orders

    Usage: make_order([position, ...])
    """
    def _make(positions=None, order_id=1001):
        return Order(
            id=order_id,
            platform_order_id="302-1234567-7654321",
            order_date=datetime(2025, 10, 17, 12, 30),
            platform_account=platform_account,
            delivery_address=delivery_address,
            positions=positions or [],
        )
    return _make


@pytest.fixture
def make_trade_items():
    """Wraps order positions into trade items"""
    def _make(positions):
        return [TradeItem(order_position=p) for p in positions]
    return _make
