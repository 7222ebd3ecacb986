"""
Order Sent Service
Builds the model of the "order sent" mail from the shipped trade items

Author: TM3
Date: 2025-10-17
"""
import logging
from typing import List, Optional, Tuple

from order_mail.core.exceptions import InvalidArgument
from order_mail.domain.mail import OrderSentInput, OrderSentResult, PositionSentModel
from order_mail.domain.order import TradeItem


def aggregate_trade_items(
    trade_items: List[TradeItem],
    logger: Optional[logging.Logger] = None,
) -> Tuple[Optional[PositionSentModel], List[PositionSentModel]]:
    """
    Turn trade items into mail positions

    Every trade item becomes its own position with quantity 1, in input
    order. Identical GTINs are NOT merged here (unlike the feedback mail).

    Returns:
        (representative, positions): representative is filled from the
        first trade item, or None when there are no trade items
    """
    logger = logger or logging.getLogger(__name__)

    if trade_items is None:
        raise InvalidArgument("Parameters are missing.")

    if not trade_items:
        logger.warning("No trade items provided to create order model")
        return None, []

    representative = PositionSentModel.from_order_position(trade_items[0].order_position)
    positions = [
        PositionSentModel.from_order_position(item.order_position, quantity=1)
        for item in trade_items
    ]
    return representative, positions


class OrderSentService:
    """
    Service for the "order sent" mail model

    Usage:
        result = OrderSentService().generate(OrderSentInput(order=order, trade_items=items))
        template_model = result.to_model_map()
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def generate(self, data: OrderSentInput) -> OrderSentResult:
        """
        Generate the mail model

        Raises:
            InvalidArgument: order or trade items missing
        """
        if data is None or data.order is None or data.trade_items is None:
            raise InvalidArgument("Parameters are missing.")

        order = data.order
        representative, positions = aggregate_trade_items(data.trade_items, logger=self.logger)

        self.logger.info(
            f"Order sent model for order {order.id}: {len(positions)} positions"
        )

        return OrderSentResult(
            order=representative,
            positions=positions,
            platform_account_id=order.platform_account_id,
            reseller_id=order.reseller_id,
        )
