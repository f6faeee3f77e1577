from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException

from sales_report.config import DEFAULT_OPTIONS, configure_logging, get_settings
from sales_report.engine import analyze_sales_data
from sales_report.models import Dataset

# demo dataset, populated on startup
_state: dict[str, Dataset] = {}


def _demo_dataset() -> Dataset:
    dataset = _state.get("dataset")
    if dataset is None:
        raise HTTPException(503, "Demo dataset has not been seeded")
    return dataset


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Auto-seed on startup so the service is immediately usable
    from scripts.seed_data import seed
    configure_logging()
    _state["dataset"] = seed(get_settings().demo_seed)
    yield


app = FastAPI(
    title="Sales Performance Report Service",
    version="1.0.0",
    description="Per-seller revenue, profit and bonus reporting",
    lifespan=lifespan,
)


# ── Reports ──────────────────────────────────────────────────────────────────

@app.post("/api/v1/reports/sales", summary="Build a report for a supplied dataset")
def build_report(dataset: Dataset):
    try:
        reports = analyze_sales_data(dataset, DEFAULT_OPTIONS, get_settings().top_products)
    except ValueError as exc:
        raise HTTPException(400, str(exc))
    return {"reports": [r.model_dump() for r in reports]}


@app.get("/api/v1/reports/demo", summary="Report over the seeded demo dataset")
def demo_report():
    reports = analyze_sales_data(_demo_dataset(), DEFAULT_OPTIONS, get_settings().top_products)
    return {"reports": [r.model_dump() for r in reports]}


# ── Sellers ──────────────────────────────────────────────────────────────────

@app.get("/api/v1/sellers", summary="List demo sellers")
def list_sellers():
    return {"sellers": [s.model_dump() for s in _demo_dataset().sellers]}


@app.get("/api/v1/sellers/{seller_id}/report", summary="One seller's report row")
def get_seller_report(seller_id: str):
    reports = analyze_sales_data(_demo_dataset(), DEFAULT_OPTIONS, get_settings().top_products)
    for rank, report in enumerate(reports, start=1):
        if report.seller_id == seller_id:
            return {"rank": rank, "total": len(reports), **report.model_dump()}
    raise HTTPException(404, f"Seller '{seller_id}' not found")


# ── Admin ─────────────────────────────────────────────────────────────────────

@app.post("/api/v1/admin/seed", summary="Re-seed demo data")
def reseed(seed: int | None = None):
    from scripts.seed_data import seed as build
    dataset = build(get_settings().demo_seed if seed is None else seed)
    _state["dataset"] = dataset
    return {
        "status": "seeded",
        "sellers": len(dataset.sellers),
        "products": len(dataset.products),
        "purchase_records": len(dataset.purchase_records),
    }
