import logging
from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError

from sales_report.exceptions import InvalidInputData, UnknownReference
from sales_report.models import (
    Product,
    SalesDataset,
    SellerReport,
    SellerStats,
    TopProduct,
)
from sales_report.strategies import ReportOptions, resolve_options

logger = logging.getLogger(__name__)

TOP_PRODUCTS_LIMIT = 10

_COLLECTIONS = ("sellers", "purchase_records", "products")
_TWO_DP = Decimal("0.01")


def _money(amount: Decimal) -> Decimal:
    # + 0 turns -0.00 into 0.00
    return amount.quantize(_TWO_DP, rounding=ROUND_HALF_UP) + 0


def _as_decimal(value: Any) -> Decimal:
    # calculators may hand back int or float
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _load_dataset(data: Any) -> SalesDataset:
    if data is None:
        raise InvalidInputData("No input data")

    if isinstance(data, Mapping):
        for key in _COLLECTIONS:
            value = data.get(key)
            if not isinstance(value, Sequence) or isinstance(value, (str, bytes)):
                raise InvalidInputData(f"'{key}' must be a list")
            if not value:
                raise InvalidInputData(f"'{key}' must not be empty")

    try:
        dataset = SalesDataset.model_validate(data)
    except ValidationError as exc:
        raise InvalidInputData(f"Invalid input data: {exc.error_count()} validation error(s)") from exc

    # model_validate hands back existing instances untouched
    for key in _COLLECTIONS:
        if not getattr(dataset, key):
            raise InvalidInputData(f"'{key}' must not be empty")
    return dataset


def _top_products(products_sold: dict[str, int], limit: int) -> list[TopProduct]:
    # sorted() is stable, so ties keep first-sale order
    ranked = sorted(products_sold.items(), key=lambda entry: entry[1], reverse=True)
    return [TopProduct(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def analyze_sales_data(
    data: Any,
    options: Any,
    top_products_limit: int = TOP_PRODUCTS_LIMIT,
) -> list[SellerReport]:
    """Build the ranked per-seller report.

    ``data`` is a ``SalesDataset`` or a mapping with the same three
    collections; ``options`` supplies ``calculate_revenue`` and
    ``calculate_bonus``. Rows come back ordered by profit, highest first.
    """
    dataset = _load_dataset(data)
    strategies: ReportOptions = resolve_options(options)

    # ── 1. Index sellers and products ─────────────────────────────────────────
    seller_stats = [SellerStats.from_seller(s) for s in dataset.sellers]
    seller_index: dict[str, SellerStats] = {s.id: s for s in seller_stats}
    product_index: dict[str, Product] = {p.sku: p for p in dataset.products}
    logger.debug(
        "Indexed %d sellers and %d products", len(seller_index), len(product_index)
    )

    # ── 2. Accumulate revenue, profit and quantities ──────────────────────────
    for position, record in enumerate(dataset.purchase_records):
        receipt = record.receipt_id or f"#{position}"
        seller = seller_index.get(record.seller_id)
        if seller is None:
            logger.warning("Purchase record %s cites unknown seller %s",
                           receipt, record.seller_id)
            raise UnknownReference("seller", record.seller_id)

        seller.sales_count += 1
        seller.revenue += record.total_amount

        for item in record.items:
            product = product_index.get(item.sku)
            if product is None:
                logger.warning("Purchase record %s cites unknown product %s",
                               receipt, item.sku)
                raise UnknownReference("product", item.sku)

            cost = product.purchase_price * item.quantity
            revenue = _as_decimal(strategies.calculate_revenue(item))
            seller.profit += revenue - cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity

    # ── 3. Rank by profit and assign bonuses ──────────────────────────────────
    ranked = sorted(seller_stats, key=lambda s: s.profit, reverse=True)
    total = len(ranked)

    for index, seller in enumerate(ranked):
        seller.bonus = _as_decimal(strategies.calculate_bonus(index, total, seller))
        seller.top_products = _top_products(seller.products_sold, top_products_limit)

    logger.info(
        "Built seller report: %d sellers, %d purchase records",
        total, len(dataset.purchase_records),
    )

    # ── 4. Assemble report rows ───────────────────────────────────────────────
    return [
        SellerReport(
            seller_id=seller.id,
            name=f"{seller.first_name} {seller.last_name}",
            revenue=_money(seller.revenue),
            profit=_money(seller.profit),
            sales_count=seller.sales_count,
            top_products=seller.top_products,
            bonus=_money(seller.bonus),
        )
        for seller in ranked
    ]
