"""
Mail Domain Models

View models handed to the mail templates, plus the typed inputs and
outputs of each mail model generator.

Templates still address the models through a flat mapping, so every
result exposes to_model_map() with the key names the templates use.

Author: TM3
Date: 2025-10-17
"""
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional, List, Dict, Any
from datetime import datetime
from decimal import Decimal

from order_mail.domain.order import Order, OrderPosition, TradeItem


class PositionSentModel(BaseModel):
    """A shipped position as shown in the "order sent" mail"""

    gtin13: Optional[str] = Field(None, description="GTIN-13 product code")
    name: Optional[str] = Field(None, description="Product name")
    single_price: Optional[Decimal] = Field(None, description="Gross price per unit")
    quantity: int = Field(1, description="Quantity", ge=0)

    @classmethod
    def from_order_position(cls, position: OrderPosition, quantity: int = 1) -> "PositionSentModel":
        """Fill a model from an order position"""
        return cls(
            gtin13=position.gtin13,
            name=position.name,
            single_price=position.price_gross,
            quantity=quantity,
        )


class FeedbackPosition(BaseModel):
    """
    Article position of the feedback mail, merged by GTIN

    Fields:
        gtin13: GTIN-13 product code (unique within one summary)
        name: Product name of the first occurrence
        quantity: Number of merged order positions
        single_price: Gross price of the first occurrence
        total_per_item_price: single_price * quantity
    """

    gtin13: Optional[str] = Field(None, description="GTIN-13 product code")
    name: Optional[str] = Field(None, description="Product name")
    quantity: int = Field(1, description="Merged quantity", ge=1)
    single_price: Decimal = Field(..., description="Gross price per unit")
    total_per_item_price: Decimal = Field(..., description="Line total")


class CustomerFeedbackSentModel(BaseModel):
    """
    Customer feedback request model

    Snapshot of the delivery address and the order header, the merged
    article positions and the running totals.
    """

    # Delivery address (copied one-to-one)
    first_name: Optional[str] = Field(None, description="First name")
    last_name: Optional[str] = Field(None, description="Last name")
    address1: Optional[str] = Field(None, description="Address line 1")
    address2: Optional[str] = Field(None, description="Address line 2")
    address3: Optional[str] = Field(None, description="Address line 3")
    zip: Optional[str] = Field(None, description="Postal code")
    city: Optional[str] = Field(None, description="City")
    state: Optional[str] = Field(None, description="State / region")
    country_name: Optional[str] = Field(None, description="Country name")
    company: Optional[str] = Field(None, description="Company name")

    # Order header
    order_id: int = Field(..., description="Internal order ID")
    platform_order_id: Optional[str] = Field(None, description="Marketplace order ID")
    order_date: Optional[datetime] = Field(None, description="Order date")
    platform_account_name: Optional[str] = Field(None, description="Platform account name")

    # Positions and totals
    positions: List[FeedbackPosition] = Field(default_factory=list, description="Merged article positions")
    total_costs: Decimal = Field(Decimal('0'), description="Running total of article prices")
    shipping_costs: Decimal = Field(Decimal('0'), description="Sum of shipping positions")

    def find_position(self, gtin13: Optional[str]) -> Optional[FeedbackPosition]:
        """First position with the given GTIN, in insertion order"""
        for position in self.positions:
            if position.gtin13 == gtin13:
                return position
        return None


# ============================================================================
# Generator inputs
# ============================================================================

class OrderSentInput(BaseModel):
    """Input of the "order sent" mail model"""

    order: Optional[Order] = Field(None, description="Order that was shipped")
    trade_items: Optional[List[TradeItem]] = Field(None, description="Shipped trade items")

    model_config = ConfigDict(from_attributes=True)


class CustomerFeedbackSentInput(BaseModel):
    """Input of the "customer feedback sent" mail model"""

    customer_feedback: Optional[Order] = Field(None, description="Order to ask feedback for")

    model_config = ConfigDict(from_attributes=True)


# ============================================================================
# Generator outputs
# ============================================================================

class OrderSentResult(BaseModel):
    """Output of the "order sent" mail model"""

    order: Optional[PositionSentModel] = Field(None, description="Representative position (first trade item)")
    positions: List[PositionSentModel] = Field(default_factory=list, description="One entry per trade item")
    platform_account_id: int = Field(..., description="Platform account ID")
    reseller_id: int = Field(..., description="Reseller ID")

    def to_model_map(self) -> Dict[str, Any]:
        """Flat template mapping"""
        return {
            "order": self.order,
            "positions": self.positions,
            "platformAccountId": self.platform_account_id,
            "resellerId": self.reseller_id,
        }


class CustomerFeedbackSentResult(BaseModel):
    """Output of the "customer feedback sent" mail model"""

    customer_feedback: CustomerFeedbackSentModel = Field(..., description="Feedback summary")
    platform_account_id: int = Field(..., description="Platform account ID")
    reseller_id: int = Field(..., description="Reseller ID")

    def to_model_map(self) -> Dict[str, Any]:
        """Flat template mapping"""
        return {
            "customerFeedback": self.customer_feedback,
            "platformAccountId": self.platform_account_id,
            "resellerId": self.reseller_id,
        }
