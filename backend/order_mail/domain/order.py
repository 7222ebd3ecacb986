"""
Order Domain Models

Read-only snapshot of an order as handed over by the shop backend
(ORM rows or plain objects, validated with from_attributes=True).
Mail models are built from these; nothing here is persisted.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List
from datetime import datetime
from decimal import Decimal
from enum import Enum


class PositionType(str, Enum):
    """Order position types known to the shop backend"""
    ARTICLE = "ARTICLE"
    SHIPPING = "SHIPPING"
    PAYMENT = "PAYMENT"
    DISCOUNT = "DISCOUNT"


class Country(BaseModel):
    """Country (lightweight, only what the mails show)"""

    id: Optional[int] = Field(None, description="Country ID")
    name: Optional[str] = Field(None, description="Country name")

    model_config = ConfigDict(from_attributes=True)


class DeliveryAddress(BaseModel):
    """
    Delivery address of an order

    All fields are optional: marketplaces deliver very uneven address data
    and the mails print whatever is there.
    """

    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    address1: Optional[str] = Field(None, description="Address line 1")
    address2: Optional[str] = Field(None, description="Address line 2")
    address3: Optional[str] = Field(None, description="Address line 3")
    zip: Optional[str] = Field(None, description="Postal code")
    city: Optional[str] = Field(None, description="City")
    state: Optional[str] = Field(None, description="State / region")
    company: Optional[str] = Field(None, description="Company name")
    country: Optional[Country] = Field(None, description="Country")

    model_config = ConfigDict(from_attributes=True)

    @property
    def country_name(self) -> Optional[str]:
        """Country name or None when no country is attached"""
        return self.country.name if self.country else None


class Reseller(BaseModel):
    """Reseller owning a platform account"""

    id: int = Field(..., description="Reseller ID")

    model_config = ConfigDict(from_attributes=True)


class PlatformAccount(BaseModel):
    """Marketplace account the order was placed on"""

    id: int = Field(..., description="Platform account ID")
    account_name: Optional[str] = Field(None, description="Account name")
    reseller: Reseller = Field(..., description="Reseller")

    model_config = ConfigDict(from_attributes=True)


class OrderPosition(BaseModel):
    """
    Order position - a single line of an order

    Fields:
        gtin13: Product identifier (GTIN-13)
        name: Product name at order time
        price_gross: Price including tax
        position_type: ARTICLE, SHIPPING, ...
    """

    gtin13: Optional[str] = Field(None, description="GTIN-13 product code")
    name: Optional[str] = Field(None, description="Product name")
    price_gross: Decimal = Field(..., description="Gross price (incl. tax)")
    position_type: PositionType = Field(..., description="Position type")

    model_config = ConfigDict(from_attributes=True)

    @property
    def is_article(self) -> bool:
        return self.position_type == PositionType.ARTICLE

    @property
    def is_shipping(self) -> bool:
        return self.position_type == PositionType.SHIPPING


class Order(BaseModel):
    """
    Order domain model

    Fields:
        id: Internal order ID
        platform_order_id: Order ID on the marketplace
        order_date: When the order was placed
        platform_account: Account (and reseller) the order belongs to
        delivery_address: Where the order is shipped
        positions: Order positions in order of entry
    """

    id: int = Field(..., description="Internal order ID")
    platform_order_id: Optional[str] = Field(None, description="Marketplace order ID")
    order_date: Optional[datetime] = Field(None, description="Order date")
    platform_account: PlatformAccount = Field(..., description="Platform account")
    delivery_address: DeliveryAddress = Field(..., description="Delivery address")
    positions: List[OrderPosition] = Field(default_factory=list, description="Order positions")

    model_config = ConfigDict(from_attributes=True)

    @property
    def platform_account_id(self) -> int:
        return self.platform_account.id

    @property
    def reseller_id(self) -> int:
        return self.platform_account.reseller.id


class TradeItem(BaseModel):
    """Shipped trade item, pointing at the order position it fulfils"""

    order_position: OrderPosition = Field(..., description="Fulfilled order position")

    model_config = ConfigDict(from_attributes=True)
