from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Protocol

from sales_report.models import LineItem, Product

TWO_DP = Decimal("0.01")
_ZERO = Decimal("0")
_HUNDRED = Decimal("100")

# rank position → share of profit paid as bonus
FIRST_PLACE_RATE = Decimal("0.15")
RUNNER_UP_RATE = Decimal("0.10")   # 2nd and 3rd place
DEFAULT_RATE = Decimal("0.05")


class HasProfit(Protocol):
    profit: Decimal


def round_money(amount) -> Decimal:
    """Round half-up to 2 dp (not banker's rounding, not truncation)."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(TWO_DP, rounding=ROUND_HALF_UP)


def calculate_simple_revenue(purchase: LineItem, _product: Optional[Product] = None) -> Decimal:
    """Net revenue for one line item: price * qty, less the percentage discount."""
    discount_factor = 1 - Decimal(purchase.discount) / _HUNDRED
    return Decimal(purchase.sale_price) * purchase.quantity * discount_factor


def calculate_bonus_by_profit(index: int, total: int, seller: HasProfit) -> Decimal:
    """Bonus for the seller at zero-based rank ``index`` out of ``total``.

    Rules are checked in a fixed order: non-positive profit, first place,
    second/third place, last place, everyone else. With three or fewer
    sellers the last seller is caught by the 2nd/3rd place rule first.
    """
    profit = Decimal(seller.profit)
    if profit <= 0:
        return _ZERO
    if index == 0:
        return profit * FIRST_PLACE_RATE
    if index in (1, 2):
        return profit * RUNNER_UP_RATE
    if index == total - 1:
        return _ZERO
    return profit * DEFAULT_RATE
