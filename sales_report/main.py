import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from sales_report.config import settings
from sales_report.engine import analyze_sales_data
from sales_report.exceptions import SalesReportError
from sales_report.models import SalesDataset
from sales_report.seed_data import seed
from sales_report.store import store
from sales_report.strategies import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if settings.seed_on_startup:
        store.clear()
        seed(store, settings.seed)
        logger.info("Seeded demo data: %d sellers, %d purchase records",
                    len(store.sellers), len(store.purchase_records))
    yield


app = FastAPI(
    title="Sales Report Service",
    version="1.0.0",
    description="Per-seller revenue, profit and bonus report",
    lifespan=lifespan,
)


def _build_report(dataset: SalesDataset) -> list[dict]:
    try:
        rows = analyze_sales_data(dataset, DEFAULT_OPTIONS, settings.top_products_limit)
    except SalesReportError as exc:
        raise HTTPException(400, str(exc))
    return [row.model_dump(mode="json") for row in rows]


# ── Sellers ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List all sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in store.list_sellers()]}


# ── Reports ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/reports/sellers", summary="Seller report for the stored dataset")
def get_report():
    return {"sellers": _build_report(store.dataset())}


@app.get(
    "/api/v1/reports/sellers/{seller_id}",
    summary="One seller's row and rank in the stored dataset report",
)
def get_seller_report(seller_id: str):
    if store.get_seller(seller_id) is None:
        raise HTTPException(404, f"Seller '{seller_id}' not found")
    for rank, row in enumerate(_build_report(store.dataset())):
        if row["seller_id"] == seller_id:
            return {"rank": rank, **row}
    raise HTTPException(404, f"Seller '{seller_id}' not found")


@app.post("/api/v1/reports/sellers", summary="Seller report for a submitted dataset")
def post_report(dataset: SalesDataset):
    return {"sellers": _build_report(dataset)}


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed():
    store.clear()
    seed(store, settings.seed)
    return {
        "status": "seeded",
        "sellers": len(store.sellers),
        "products": len(store.products),
        "purchase_records": len(store.purchase_records),
    }
