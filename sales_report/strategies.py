from collections.abc import Mapping
from decimal import Decimal
from typing import Any, NamedTuple, Protocol

from sales_report.exceptions import MissingStrategyFunctions
from sales_report.models import LineItem, SellerStats

_HUNDRED = Decimal("100")

# Bonus share of profit by rank tier
TOP_SELLER_RATE = Decimal("0.15")
RUNNER_UP_RATE = Decimal("0.10")
LAST_PLACE_RATE = Decimal("0")
DEFAULT_RATE = Decimal("0.05")


class RevenueCalculator(Protocol):
    def __call__(self, item: LineItem) -> Decimal: ...


class BonusCalculator(Protocol):
    def __call__(self, index: int, total: int, seller: SellerStats) -> Decimal: ...


class ReportOptions(NamedTuple):
    calculate_revenue: RevenueCalculator
    calculate_bonus: BonusCalculator


def calculate_simple_revenue(item: LineItem) -> Decimal:
    """Revenue of one line item after its percentage discount.

    The discount is not range-checked; values outside 0–100 flow through
    the arithmetic as given.
    """
    remaining_share = 1 - item.discount / _HUNDRED
    return item.sale_price * item.quantity * remaining_share


def calculate_bonus_by_profit(index: int, total: int, seller: SellerStats) -> Decimal:
    """Bonus for the seller at zero-based ``index`` among ``total`` ranked sellers.

    Tiers are checked in order, so when there are three sellers or fewer
    the last one still gets the top-three rate.
    """
    if index == 0:
        rate = TOP_SELLER_RATE
    elif index in (1, 2):
        rate = RUNNER_UP_RATE
    elif index == total - 1:
        rate = LAST_PLACE_RATE
    else:
        rate = DEFAULT_RATE
    return rate * seller.profit


DEFAULT_OPTIONS = ReportOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)


def resolve_options(options: Any) -> ReportOptions:
    """Pull both calculators out of ``options`` (object or mapping)."""
    if options is None:
        raise MissingStrategyFunctions("No calculation functions were provided")

    if isinstance(options, Mapping):
        revenue_fn = options.get("calculate_revenue")
        bonus_fn = options.get("calculate_bonus")
    else:
        revenue_fn = getattr(options, "calculate_revenue", None)
        bonus_fn = getattr(options, "calculate_bonus", None)

    missing = [
        name
        for name, fn in (("calculate_revenue", revenue_fn), ("calculate_bonus", bonus_fn))
        if not callable(fn)
    ]
    if missing:
        raise MissingStrategyFunctions(
            f"Missing or non-callable calculation functions: {', '.join(missing)}"
        )
    return ReportOptions(calculate_revenue=revenue_fn, calculate_bonus=bonus_fn)
