"""
Tests for the revenue and bonus calculators and option resolution.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from sales_report.exceptions import MissingStrategyFunctions
from sales_report.models import LineItem, SellerStats
from sales_report.strategies import (
    DEFAULT_OPTIONS,
    ReportOptions,
    calculate_bonus_by_profit,
    calculate_simple_revenue,
    resolve_options,
)


def line(quantity=1, sale_price="100", discount="0"):
    return LineItem(sku="X", quantity=quantity,
                    sale_price=Decimal(sale_price), discount=Decimal(discount))


def stats(profit):
    return SellerStats(id="S", first_name="F", last_name="L", profit=Decimal(profit))


class TestSimpleRevenue:
    def test_no_discount(self):
        assert calculate_simple_revenue(line(quantity=3, sale_price="20")) == Decimal("60")

    def test_discount_applied(self):
        assert calculate_simple_revenue(line(quantity=2, discount="10")) == Decimal("180")

    def test_full_discount(self):
        assert calculate_simple_revenue(line(discount="100")) == Decimal("0")

    def test_out_of_range_discount_passes_through(self):
        assert calculate_simple_revenue(line(discount="150")) == Decimal("-50")


class TestBonusByProfit:
    @pytest.mark.parametrize(
        "index, total, expected",
        [
            (0, 10, Decimal("150")),
            (1, 10, Decimal("100")),
            (2, 10, Decimal("100")),
            (3, 10, Decimal("50")),
            (8, 10, Decimal("50")),
            (9, 10, Decimal("0")),
        ],
    )
    def test_tiers(self, index, total, expected):
        assert calculate_bonus_by_profit(index, total, stats("1000")) == expected

    @pytest.mark.parametrize(
        "index, total, expected",
        [
            (0, 1, Decimal("150")),
            (1, 2, Decimal("100")),
            (2, 3, Decimal("100")),
        ],
    )
    def test_top_tiers_win_over_last_place(self, index, total, expected):
        assert calculate_bonus_by_profit(index, total, stats("1000")) == expected

    def test_negative_profit_scales(self):
        assert calculate_bonus_by_profit(0, 5, stats("-100")) == Decimal("-15")


class TestResolveOptions:
    def test_named_tuple(self):
        assert resolve_options(DEFAULT_OPTIONS) == DEFAULT_OPTIONS

    def test_mapping(self):
        resolved = resolve_options({
            "calculate_revenue": calculate_simple_revenue,
            "calculate_bonus": calculate_bonus_by_profit,
        })
        assert isinstance(resolved, ReportOptions)
        assert resolved.calculate_bonus is calculate_bonus_by_profit

    def test_attribute_object(self):
        resolved = resolve_options(SimpleNamespace(
            calculate_revenue=calculate_simple_revenue,
            calculate_bonus=calculate_bonus_by_profit,
        ))
        assert resolved.calculate_revenue is calculate_simple_revenue

    def test_none_raises(self):
        with pytest.raises(MissingStrategyFunctions):
            resolve_options(None)

    def test_non_callable_raises(self):
        with pytest.raises(MissingStrategyFunctions, match="calculate_revenue"):
            resolve_options({"calculate_revenue": 42, "calculate_bonus": calculate_bonus_by_profit})

    def test_both_missing_listed(self):
        with pytest.raises(MissingStrategyFunctions, match="calculate_revenue, calculate_bonus"):
            resolve_options(SimpleNamespace())
