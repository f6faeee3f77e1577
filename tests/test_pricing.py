"""
Unit tests for the revenue and bonus strategies.
"""

from decimal import Decimal

import pytest

from sales_report.models import LineItem, SellerAccumulator
from sales_report.pricing import calculate_bonus_by_profit, calculate_simple_revenue, round_money


def item(price, qty, discount=0):
    return LineItem(sku="SKU_001", quantity=qty, sale_price=Decimal(str(price)),
                    discount=Decimal(str(discount)))


def seller(profit):
    return SellerAccumulator(id="seller_1", name="Test Seller", profit=Decimal(str(profit)))


class TestSimpleRevenue:
    def test_no_discount_is_gross(self):
        assert calculate_simple_revenue(item(100, 3)) == Decimal("300")

    def test_full_discount_is_zero(self):
        assert calculate_simple_revenue(item(100, 3, 100)) == Decimal("0")

    def test_partial_discount(self):
        # 250 * 2 * 0.9
        assert calculate_simple_revenue(item("250.00", 2, 10)) == Decimal("450")

    def test_linear_in_quantity(self):
        one = calculate_simple_revenue(item("19.99", 1, 15))
        assert calculate_simple_revenue(item("19.99", 7, 15)) == one * 7

    def test_product_argument_is_ignored(self):
        assert calculate_simple_revenue(item(10, 2), object()) == Decimal("20")


class TestBonusByProfit:
    @pytest.mark.parametrize("index, expected", [
        (0, Decimal("150")),
        (1, Decimal("100")),
        (2, Decimal("100")),
        (3, Decimal("50")),
        (4, Decimal("0")),
    ])
    def test_rank_rules_with_five_sellers(self, index, expected):
        assert calculate_bonus_by_profit(index, 5, seller(1000)) == expected

    @pytest.mark.parametrize("index", [0, 1, 2, 3, 4])
    @pytest.mark.parametrize("profit", [0, -250])
    def test_non_positive_profit_overrides_rank(self, index, profit):
        assert calculate_bonus_by_profit(index, 5, seller(profit)) == Decimal("0")

    def test_second_of_two_uses_runner_up_rate(self):
        """With two sellers, last place is also rank 1 and the 10 % rule wins."""
        assert calculate_bonus_by_profit(1, 2, seller(500)) == Decimal("50")

    def test_third_of_three_uses_runner_up_rate(self):
        assert calculate_bonus_by_profit(2, 3, seller(500)) == Decimal("50")

    def test_single_seller_gets_first_place(self):
        assert calculate_bonus_by_profit(0, 1, seller(200)) == Decimal("30")

    def test_last_of_four_gets_nothing(self):
        assert calculate_bonus_by_profit(3, 4, seller(1000)) == Decimal("0")


class TestRoundMoney:
    def test_rounds_half_up(self):
        assert round_money(Decimal("2.675")) == Decimal("2.68")
        assert round_money(Decimal("0.125")) == Decimal("0.13")

    def test_does_not_truncate(self):
        assert round_money(Decimal("10.999")) == Decimal("11.00")

    def test_accepts_floats(self):
        assert round_money(0.1 + 0.2) == Decimal("0.30")

    def test_always_two_places(self):
        assert round_money(Decimal("5")).as_tuple().exponent == -2
