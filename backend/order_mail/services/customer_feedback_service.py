"""
Customer Feedback Service
Builds the model of the "customer feedback sent" mail: delivery address
snapshot, article positions merged by GTIN and the order totals

Author: TM3
Date: 2025-10-17
"""
import logging
from decimal import Decimal
from typing import Optional

from order_mail.core.exceptions import InvalidArgument
from order_mail.domain.mail import (
    CustomerFeedbackSentInput,
    CustomerFeedbackSentModel,
    CustomerFeedbackSentResult,
    FeedbackPosition,
)
from order_mail.domain.order import Order, OrderPosition


def create_customer_feedback_model(order: Order) -> CustomerFeedbackSentModel:
    """Snapshot of delivery address and order header, with empty totals"""
    address = order.delivery_address
    return CustomerFeedbackSentModel(
        first_name=address.first_name,
        last_name=address.last_name,
        address1=address.address1,
        address2=address.address2,
        address3=address.address3,
        zip=address.zip,
        city=address.city,
        state=address.state,
        country_name=address.country_name,
        company=address.company,
        order_id=order.id,
        platform_order_id=order.platform_order_id,
        order_date=order.order_date,
        platform_account_name=order.platform_account.account_name,
        positions=[],
        total_costs=Decimal('0'),
        shipping_costs=Decimal('0'),
    )


def add_article_position(model: CustomerFeedbackSentModel, position: OrderPosition) -> None:
    """
    Merge one ARTICLE position into the model

    Existing GTIN: quantity + 1 and the line total is recomputed as
    single_price * quantity. New GTIN: appended with quantity 1.
    Either way total_costs grows by one single price.
    """
    existing = model.find_position(position.gtin13)

    if existing is None:
        new_position = FeedbackPosition(
            gtin13=position.gtin13,
            name=position.name,
            quantity=1,
            single_price=position.price_gross,
            total_per_item_price=position.price_gross,
        )
        model.positions.append(new_position)
        model.total_costs += new_position.single_price
        return

    existing.quantity += 1
    existing.total_per_item_price = existing.single_price * existing.quantity
    model.total_costs += existing.single_price


def aggregate_order(order: Order, logger: Optional[logging.Logger] = None) -> CustomerFeedbackSentModel:
    """
    Build the feedback summary of an order

    SHIPPING positions add their gross price to shipping_costs,
    ARTICLE positions are merged by GTIN, anything else is skipped.
    """
    logger = logger or logging.getLogger(__name__)

    if order is None:
        raise InvalidArgument("customerFeedback is missing")

    model = create_customer_feedback_model(order)

    for position in order.positions:
        if position.is_article:
            add_article_position(model, position)
        elif position.is_shipping:
            model.shipping_costs += position.price_gross
        else:
            logger.debug(
                f"Order {order.id}: skipping {position.position_type.value} position {position.gtin13}"
            )

    return model


class CustomerFeedbackService:
    """
    Service for the "customer feedback sent" mail model

    Usage:
        result = CustomerFeedbackService().generate(CustomerFeedbackSentInput(customer_feedback=order))
        template_model = result.to_model_map()
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, data: CustomerFeedbackSentInput) -> CustomerFeedbackSentResult:
        """
        Generate the mail model

        Raises:
            InvalidArgument: order missing
        """
        if data is None or data.customer_feedback is None:
            raise InvalidArgument("customerFeedback is missing")

        order = data.customer_feedback
        summary = aggregate_order(order, logger=self.logger)

        self.logger.info(
            f"Customer feedback model for order {order.id}: "
            f"{len(summary.positions)} articles, total {summary.total_costs}, "
            f"shipping {summary.shipping_costs}"
        )

        return CustomerFeedbackSentResult(
            customer_feedback=summary,
            platform_account_id=order.platform_account_id,
            reseller_id=order.reseller_id,
        )
