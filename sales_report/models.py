from pydantic import BaseModel, Field
from decimal import Decimal
from typing import Optional


class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str
    start_date: Optional[str] = None
    position: Optional[str] = None


class Product(BaseModel):
    sku: str
    purchase_price: Decimal  # cost per unit
    sale_price: Optional[Decimal] = None  # catalogue price, informational only
    name: Optional[str] = None
    category: Optional[str] = None


class LineItem(BaseModel):
    sku: str
    quantity: int
    sale_price: Decimal
    discount: Decimal = Decimal("0")  # percent, 0–100


class PurchaseRecord(BaseModel):
    receipt_id: Optional[str] = None
    seller_id: str
    customer_id: Optional[str] = None
    date: Optional[str] = None
    total_amount: Decimal
    total_discount: Optional[Decimal] = None
    items: list[LineItem]


class SalesDataset(BaseModel):
    sellers: list[Seller] = Field(min_length=1)
    products: list[Product] = Field(min_length=1)
    purchase_records: list[PurchaseRecord] = Field(min_length=1)


# ── Working record ───────────────────────────────────────────────────────────

class SellerStats(BaseModel):
    """Per-run accumulator for one seller; built fresh on every call."""

    id: str
    first_name: str
    last_name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # insertion order = first sale of each SKU
    products_sold: dict[str, int] = Field(default_factory=dict)
    bonus: Decimal = Decimal("0")
    top_products: list["TopProduct"] = Field(default_factory=list)

    @classmethod
    def from_seller(cls, seller: Seller) -> "SellerStats":
        return cls(id=seller.id, first_name=seller.first_name, last_name=seller.last_name)


# ── Response models ──────────────────────────────────────────────────────────

class TopProduct(BaseModel):
    sku: str
    quantity: int


class SellerReport(BaseModel):
    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[TopProduct]
    bonus: Decimal


SellerStats.model_rebuild()
