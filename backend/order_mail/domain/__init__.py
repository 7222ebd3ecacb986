"""
Domain Layer - Business Entities

Pydantic models for the order snapshot consumed by the mail generators,
the fee split and the mail view models themselves.

Author: TM3
Date: 2025-10-17
"""
from order_mail.domain.order import (
    Order, OrderPosition, PositionType, TradeItem,
    DeliveryAddress, Country, PlatformAccount, Reseller,
)
from order_mail.domain.fee import Fee
from order_mail.domain.mail import (
    PositionSentModel, FeedbackPosition, CustomerFeedbackSentModel,
    OrderSentInput, OrderSentResult,
    CustomerFeedbackSentInput, CustomerFeedbackSentResult,
)

__all__ = [
    'Order', 'OrderPosition', 'PositionType', 'TradeItem',
    'DeliveryAddress', 'Country', 'PlatformAccount', 'Reseller',
    'Fee',
    'PositionSentModel', 'FeedbackPosition', 'CustomerFeedbackSentModel',
    'OrderSentInput', 'OrderSentResult',
    'CustomerFeedbackSentInput', 'CustomerFeedbackSentResult',
]
