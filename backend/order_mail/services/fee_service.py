"""
Fee Service - Proportional fee allocation
Splits a total fee (e.g. payment processing) between shipping and article
by their share of the price, then breaks both parts down per unit

Author: TM3
Date: 2025-10-17
"""
import logging
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, localcontext
from typing import Optional, Union

from order_mail.core.config import get_settings
from order_mail.core.exceptions import InvalidArgument
from order_mail.domain.fee import Fee

Number = Union[Decimal, int, str, float]

# Base working precision; widened per call for large or tiny operands
WORKING_PRECISION = 50


def to_decimal(value: Optional[Number], label: str) -> Decimal:
    """
    Coerce a money/quantity input to Decimal

    Floats go through str() so the binary representation never leaks
    into the result (0.1 -> Decimal('0.1')).

    Raises:
        InvalidArgument: value is None or not a number
    """
    if value is None:
        raise InvalidArgument(f"{label} cannot be null")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except InvalidOperation as e:
            raise InvalidArgument(f"{label} is not a number: {value!r}") from e
    if not result.is_finite():
        raise InvalidArgument(f"{label} must be finite: {value!r}")
    return result


class FeeService:
    """
    Service for splitting fees between shipping and article

    Example:
        ship 5.00, article 15.00, fee 2.00, quantity 2
        ship share = 5 / 20 = 0.25000
        ship fee   = 2.00 * 0.25 = 0.50   -> 0.25 per unit
        article    = 2.00 - 0.50 = 1.50   -> 0.75 per unit
    """

    def __init__(self, ratio_scale: Optional[int] = None, fee_scale: Optional[int] = None,
                 logger: Optional[logging.Logger] = None):
        settings = get_settings()
        self.ratio_scale = settings.FEE_RATIO_SCALE if ratio_scale is None else ratio_scale
        self.fee_scale = settings.FEE_SCALE if fee_scale is None else fee_scale
        self.logger = logger or logging.getLogger(__name__)

        self._ratio_quantum = Decimal(1).scaleb(-self.ratio_scale)
        self._fee_quantum = Decimal(1).scaleb(-self.fee_scale)

    def _precision_for(self, *values: Decimal) -> int:
        """
        Context precision large enough for every intermediate result

        Each operand can add its own digits plus its distance from the
        decimal point to a product or quotient, and both quantize steps
        add their scale on top.
        """
        spread = sum(abs(v.adjusted()) + len(v.as_tuple().digits) for v in values)
        return WORKING_PRECISION + spread + self.ratio_scale + self.fee_scale

    def calculate_ship_and_article_fee_per_unit(
        self,
        price_ship: Optional[Number],
        price_article: Optional[Number],
        fee_total: Optional[Number],
        quantity: Optional[Number],
    ) -> Fee:
        """
        Calculate the shipping and article fee per unit

        Args:
            price_ship: Shipping price
            price_article: Article price
            fee_total: Total fee to split
            quantity: Number of units the fee is spread over

        Returns:
            Fee with ship_fee and article_fee per unit (scale 2, half-up)

        Raises:
            InvalidArgument: any input missing, quantity <= 0,
                or price_ship + price_article < 0
        """
        price_ship = to_decimal(price_ship, "Shipping price")
        price_article = to_decimal(price_article, "Article price")
        fee_total = to_decimal(fee_total, "Total fee")
        quantity = to_decimal(quantity, "Quantity")

        if quantity <= 0:
            raise InvalidArgument(f"Quantity must be positive, got [{quantity}]")

        with localcontext() as ctx:
            ctx.prec = self._precision_for(price_ship, price_article, fee_total, quantity)

            price_sum = price_ship + price_article
            if price_sum < 0:
                raise InvalidArgument(f"Price sum [{price_sum}] cannot be negative")

            if price_sum == 0:
                # No price base: nothing to split proportionally
                self.logger.debug("Price sum is zero, fee split is zero")
                zero = Decimal('0').quantize(self._fee_quantum)
                return Fee(ship_fee=zero, article_fee=zero)

            try:
                ship_share = (price_ship / price_sum).quantize(self._ratio_quantum, rounding=ROUND_HALF_UP)

                # Article part is the remainder so both parts add up to fee_total
                ship_fee = fee_total * ship_share
                article_fee = fee_total - ship_fee

                ship_fee_per_unit = (ship_fee / quantity).quantize(self._fee_quantum, rounding=ROUND_HALF_UP)
                article_fee_per_unit = (article_fee / quantity).quantize(self._fee_quantum, rounding=ROUND_HALF_UP)
            except InvalidOperation as e:
                # Only reachable past the decimal exponent limits
                raise InvalidArgument(
                    f"Fee split out of range: fee [{fee_total}], quantity [{quantity}]"
                ) from e

        self.logger.debug(
            f"Fee split: ship share {ship_share}, fee {fee_total} over {quantity} units "
            f"-> ship {ship_fee_per_unit}, article {article_fee_per_unit}"
        )

        return Fee(ship_fee=ship_fee_per_unit, article_fee=article_fee_per_unit)


def allocate(price_ship: Optional[Number], price_article: Optional[Number],
             fee_total: Optional[Number], quantity: Optional[Number]) -> Fee:
    """Shortcut for FeeService().calculate_ship_and_article_fee_per_unit"""
    return FeeService().calculate_ship_and_article_fee_per_unit(
        price_ship, price_article, fee_total, quantity
    )
