"""
Deterministic demo-data generator.

Produces:
  - 6 sellers
  - 40 products  (purchase price 40–70 % of the catalogue price)
  - 300 purchase records over 2023, 1–5 line items each
    - ~60 % of line items carry no discount, the rest 1–20 %
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from sales_report.models import LineItem, Product, PurchaseRecord, Seller
from sales_report.store import DataStore

SEED = 42
START = date(2023, 1, 1)
DAYS = 365
RECORD_COUNT = 300
PRODUCT_COUNT = 40

_SELLERS = [
    ("seller_1", "Alexey", "Petrov", "Senior Seller"),
    ("seller_2", "Ivan", "Smirnov", "Seller"),
    ("seller_3", "Maria", "Ivanova", "Senior Seller"),
    ("seller_4", "Svetlana", "Kuznetsova", "Seller"),
    ("seller_5", "Dmitry", "Sokolov", "Junior Seller"),
    ("seller_6", "Anna", "Orlova", "Junior Seller"),
]

_CATEGORIES = ["Electronics", "Home", "Garden", "Toys", "Books"]


def _money(value: float) -> Decimal:
    return Decimal(str(round(value, 2)))


def seed(store: DataStore, rng_seed: int = SEED) -> None:
    rng = random.Random(rng_seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    for seller_id, first_name, last_name, position in _SELLERS:
        store.add_seller(Seller(
            id=seller_id,
            first_name=first_name,
            last_name=last_name,
            start_date=str(START - timedelta(days=rng.randint(100, 2000))),
            position=position,
        ))

    # ── products ─────────────────────────────────────────────────────────────
    for n in range(1, PRODUCT_COUNT + 1):
        sale_price = rng.uniform(5, 500)
        store.add_product(Product(
            sku=f"SKU_{n:03d}",
            name=f"Product {n}",
            category=rng.choice(_CATEGORIES),
            sale_price=_money(sale_price),
            purchase_price=_money(sale_price * rng.uniform(0.4, 0.7)),
        ))

    # ── purchase records ─────────────────────────────────────────────────────
    seller_ids = [s[0] for s in _SELLERS]
    skus = list(store.products)

    for n in range(1, RECORD_COUNT + 1):
        items: list[LineItem] = []
        for sku in rng.sample(skus, rng.randint(1, 5)):
            product = store.get_product(sku)
            assert product is not None
            discount = 0 if rng.random() < 0.6 else rng.randint(1, 20)
            items.append(LineItem(
                sku=sku,
                quantity=rng.randint(1, 10),
                sale_price=product.sale_price,
                discount=Decimal(discount),
            ))

        gross = sum((i.sale_price * i.quantity for i in items), Decimal("0"))
        net = sum(
            (i.sale_price * i.quantity * (1 - i.discount / 100) for i in items),
            Decimal("0"),
        )
        store.add_purchase_record(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            seller_id=rng.choice(seller_ids),
            customer_id=f"customer_{rng.randint(1, 150):03d}",
            date=str(START + timedelta(days=rng.randint(0, DAYS - 1))),
            total_amount=net.quantize(Decimal("0.01")),
            total_discount=(gross - net).quantize(Decimal("0.01")),
            items=items,
        ))
