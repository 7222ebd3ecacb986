"""
Unit tests for FeeService

Expected values are calculated by hand in each test.

Author: TM3
Date: 2025-10-17
"""
import logging
import pytest
from decimal import Decimal

from order_mail.core.exceptions import InvalidArgument
from order_mail.domain.fee import Fee
from order_mail.services.fee_service import FeeService, allocate, to_decimal


class TestFeeAllocation:
    """Proportional split of the fee"""

    def test_split_by_price_share(self):
        """Ship 5 of 20 carries 25% of the fee"""
        # ship share = 0.25000, ship fee = 0.50, article fee = 1.50, 2 units
        fee = allocate(Decimal('5.00'), Decimal('15.00'), Decimal('2.00'), 2)

        assert fee.ship_fee == Decimal('0.25')
        assert fee.article_fee == Decimal('0.75')

    def test_per_unit_values_have_two_decimals(self):
        """Results are quantized to cents"""
        # 4.99 / 24.99 = 0.1996798... -> 0.19968
        fee = allocate(Decimal('4.99'), Decimal('20.00'), Decimal('1.00'), 1)

        assert fee.ship_fee == Decimal('0.20')
        assert fee.article_fee == Decimal('0.80')
        assert fee.ship_fee.as_tuple().exponent == -2
        assert fee.article_fee.as_tuple().exponent == -2

    def test_ship_share_rounds_half_up_at_five_digits(self):
        """1 / 64 = 0.015625 becomes 0.01563, not 0.01562"""
        fee = allocate(1, 63, 100000, 1)

        assert fee.ship_fee == Decimal('1563.00')
        assert fee.article_fee == Decimal('98437.00')

    def test_per_unit_rounds_half_up(self):
        """0.05 over 2 units is 0.025 per unit, rounded up to 0.03"""
        fee = allocate(0, 10, Decimal('0.05'), 2)

        assert fee.ship_fee == Decimal('0.00')
        assert fee.article_fee == Decimal('0.03')

    def test_article_fee_is_remainder_of_total(self):
        """Article part is fee_total minus ship part"""
        # share = 0.33333, ship = 0.099999 -> 0.10, article = 0.200001 -> 0.20
        fee = allocate(Decimal('0.1'), Decimal('0.2'), Decimal('0.3'), 1)

        assert fee.ship_fee == Decimal('0.10')
        assert fee.article_fee == Decimal('0.20')

    def test_only_shipping_price(self):
        """Without an article price the whole fee goes to shipping"""
        fee = allocate(10, 0, 3, 1)

        assert fee.ship_fee == Decimal('3.00')
        assert fee.article_fee == Decimal('0.00')

    def test_float_inputs_do_not_leak_binary_noise(self):
        """Floats are read through their string form"""
        fee = allocate(0.1, 0.2, 0.3, 1)

        assert fee == allocate(Decimal('0.1'), Decimal('0.2'), Decimal('0.3'), 1)

    @pytest.mark.parametrize("fee_total", [Decimal('0'), Decimal('7.50'), Decimal('123.45')])
    @pytest.mark.parametrize("quantity", [1, 3])
    def test_zero_price_sum_gives_zero_fee(self, fee_total, quantity):
        """No price base, no split"""
        fee = allocate(0, 0, fee_total, quantity)

        assert fee == Fee(ship_fee=Decimal('0'), article_fee=Decimal('0'))
        assert fee.ship_fee.as_tuple().exponent == -2
        assert fee.article_fee.as_tuple().exponent == -2

    def test_very_large_fee_is_split_exactly(self):
        """Per-unit results wider than the base precision still fit"""
        fee = allocate(Decimal('1'), Decimal('1'), Decimal('1E+60'), 1)

        assert fee.ship_fee == Decimal('5E+59')
        assert fee.article_fee == Decimal('5E+59')
        assert fee.ship_fee.as_tuple().exponent == -2

    def test_very_small_quantity_is_split_exactly(self):
        fee = allocate(1, 1, 10, Decimal('1E-50'))

        assert fee.ship_fee == Decimal('5E+50')
        assert fee.article_fee == Decimal('5E+50')
        assert fee.article_fee.as_tuple().exponent == -2

    @pytest.mark.parametrize("price_ship,price_article", [
        (Decimal('0'), Decimal('19.99')),
        (Decimal('4.99'), Decimal('19.99')),
        (Decimal('5.95'), Decimal('129.00')),
        (Decimal('12.00'), Decimal('0.01')),
        (Decimal('1'), Decimal('2')),
    ])
    @pytest.mark.parametrize("fee_total", [Decimal('0.35'), Decimal('1.00'), Decimal('17.89')])
    @pytest.mark.parametrize("quantity", [1, 3, 7])
    def test_parts_add_up_to_total_within_rounding(self, price_ship, price_article, fee_total, quantity):
        """Per-unit parts times quantity stay within one cent per unit of the total"""
        fee = allocate(price_ship, price_article, fee_total, quantity)

        allocated = fee.ship_fee * quantity + fee.article_fee * quantity
        assert abs(allocated - fee_total) <= Decimal('0.01') * quantity
        assert fee.ship_fee >= 0
        assert fee.article_fee >= 0


class TestFeeValidation:
    """Inputs that abort the calculation"""

    def test_negative_price_sum_raises(self):
        with pytest.raises(InvalidArgument, match="cannot be negative"):
            allocate(-5, 2, 1, 1)

    def test_negative_single_price_with_positive_sum_is_allowed(self):
        """Only the sum is checked"""
        # share = -5 / 5 = -1, ship = -1.00, article = 2.00
        fee = allocate(-5, 10, 1, 1)

        assert fee.ship_fee == Decimal('-1.00')
        assert fee.article_fee == Decimal('2.00')

    @pytest.mark.parametrize("quantity", [0, -1, Decimal('0.00')])
    def test_non_positive_quantity_raises(self, quantity):
        with pytest.raises(InvalidArgument, match="Quantity must be positive"):
            allocate(5, 15, 2, quantity)

    def test_zero_quantity_raises_even_with_zero_prices(self):
        with pytest.raises(InvalidArgument):
            allocate(0, 0, 2, 0)

    @pytest.mark.parametrize("args,label", [
        ((None, 15, 2, 1), "Shipping price"),
        ((5, None, 2, 1), "Article price"),
        ((5, 15, None, 1), "Total fee"),
        ((5, 15, 2, None), "Quantity"),
    ])
    def test_missing_input_raises(self, args, label):
        with pytest.raises(InvalidArgument, match=f"{label} cannot be null"):
            allocate(*args)

    def test_invalid_argument_is_value_error(self):
        """Callers catching ValueError keep working"""
        with pytest.raises(ValueError):
            allocate(None, 1, 1, 1)

    @pytest.mark.parametrize("value", ["abc", "NaN", "Infinity", True])
    def test_non_numeric_input_raises(self, value):
        with pytest.raises(InvalidArgument):
            to_decimal(value, "Shipping price")


class TestFeeService:
    """Configuration of the service"""

    def test_custom_fee_scale(self):
        """Per-unit scale can be configured"""
        service = FeeService(fee_scale=3)

        fee = service.calculate_ship_and_article_fee_per_unit(5, 15, 2, 3)

        # ship 0.50 / 3 = 0.1666.. -> 0.167, article 1.50 / 3 = 0.500
        assert fee.ship_fee == Decimal('0.167')
        assert fee.article_fee == Decimal('0.500')

    def test_defaults_come_from_settings(self):
        service = FeeService()

        assert service.ratio_scale == 5
        assert service.fee_scale == 2

    def test_injected_logger_is_used(self, caplog):
        log = logging.getLogger("tests.fee")
        service = FeeService(logger=log)

        with caplog.at_level(logging.DEBUG, logger="tests.fee"):
            service.calculate_ship_and_article_fee_per_unit(0, 0, 1, 1)

        assert any(r.name == "tests.fee" for r in caplog.records)

    def test_fee_to_dict(self):
        fee = allocate(Decimal('5.00'), Decimal('15.00'), Decimal('2.00'), 2)

        assert fee.to_dict() == {'ship_fee': 0.25, 'article_fee': 0.75, 'total_per_unit': 1.0}
