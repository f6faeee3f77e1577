import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Union

from pydantic import ValidationError

from sales_report.config import (
    DEFAULT_TOP_PRODUCTS,
    AnalysisOptions,
    log_lookup_miss,
    validate_top_n,
)
from sales_report.errors import InvalidConfiguration, InvalidInput, LookupMiss
from sales_report.index import CatalogIndex, build_index, require_collection
from sales_report.models import (
    Dataset,
    ProductSale,
    PurchaseRecord,
    SellerAccumulator,
    SellerReport,
)
from sales_report.pricing import round_money

logger = logging.getLogger(__name__)

_COLLECTIONS = ("sellers", "products", "purchase_records")


def _as_decimal(value: Any) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


# ── Validation ───────────────────────────────────────────────────────────────

def _validate_dataset(data: Union[Dataset, Mapping, None]) -> Dataset:
    """Check the receipts and parse raw mappings.

    Sellers and products are checked by ``build_index``.
    """
    if data is None:
        raise InvalidInput("Dataset is missing")

    if isinstance(data, Dataset):
        require_collection("purchase_records", data.purchase_records)
        return data

    if not isinstance(data, Mapping):
        raise InvalidInput(f"Dataset must be a mapping, got {type(data).__name__}")
    require_collection("purchase_records", data.get("purchase_records"))
    try:
        return Dataset.model_validate({name: data.get(name) for name in _COLLECTIONS})
    except ValidationError as exc:
        raise InvalidInput(f"Dataset records are malformed: {exc}") from exc


def _validate_options(options: Union[AnalysisOptions, Mapping, Any, None]) -> AnalysisOptions:
    if options is None:
        raise InvalidConfiguration("Options are missing")
    if isinstance(options, AnalysisOptions):
        candidate = options
    elif isinstance(options, Mapping):
        candidate = AnalysisOptions(
            calculate_revenue=options.get("calculate_revenue"),
            calculate_bonus=options.get("calculate_bonus"),
            on_lookup_miss=options.get("on_lookup_miss") or log_lookup_miss,
        )
    else:
        # any object carrying the strategies as attributes
        candidate = AnalysisOptions(
            calculate_revenue=getattr(options, "calculate_revenue", None),
            calculate_bonus=getattr(options, "calculate_bonus", None),
            on_lookup_miss=getattr(options, "on_lookup_miss", None) or log_lookup_miss,
        )

    for name in ("calculate_revenue", "calculate_bonus", "on_lookup_miss"):
        if not callable(getattr(candidate, name)):
            raise InvalidConfiguration(f"'{name}' must be callable")
    return candidate


# ── Aggregation ──────────────────────────────────────────────────────────────

def _aggregate(records: list[PurchaseRecord], index: CatalogIndex, options: AnalysisOptions) -> int:
    """Fold every receipt into its seller's accumulator. Returns the miss count."""
    misses = 0
    for record in records:
        seller = index.get_seller(record.seller_id)
        if seller is None:
            misses += 1
            options.on_lookup_miss(LookupMiss("seller", record.seller_id, record.receipt_id))
            continue

        # receipt-level revenue comes from the stated total, not the items
        seller.sales_count += 1
        seller.revenue += record.total_amount

        for item in record.items:
            product = index.get_product(item.sku)
            if product is None:
                misses += 1
                options.on_lookup_miss(LookupMiss("product", item.sku, record.receipt_id))
                continue

            cost = product.purchase_price * item.quantity
            revenue = _as_decimal(options.calculate_revenue(item, product))
            seller.profit += revenue - cost
            seller.products_sold[item.sku] = seller.products_sold.get(item.sku, 0) + item.quantity
    return misses


# ── Ranking & reporting ──────────────────────────────────────────────────────

def top_products(seller: SellerAccumulator, limit: int = DEFAULT_TOP_PRODUCTS) -> list[ProductSale]:
    ranked = sorted(seller.products_sold.items(), key=lambda kv: kv[1], reverse=True)
    return [ProductSale(sku=sku, quantity=qty) for sku, qty in ranked[:limit]]


def rank_sellers(
    accumulators: list[SellerAccumulator],
    options: AnalysisOptions,
    top_n: int = DEFAULT_TOP_PRODUCTS,
) -> list[SellerReport]:
    top_n = validate_top_n(top_n)
    # sorted() is stable: equal profits keep roster order
    ranked = sorted(accumulators, key=lambda s: s.profit, reverse=True)
    total = len(ranked)

    reports: list[SellerReport] = []
    for position, seller in enumerate(ranked):
        bonus = _as_decimal(options.calculate_bonus(position, total, seller))
        reports.append(
            SellerReport(
                seller_id=seller.id,
                name=seller.name,
                revenue=round_money(seller.revenue),
                profit=round_money(seller.profit),
                sales_count=seller.sales_count,
                top_products=top_products(seller, top_n),
                bonus=round_money(bonus),
            )
        )
    return reports


def analyze_sales_data(
    data: Union[Dataset, Mapping, None],
    options: Union[AnalysisOptions, Mapping, Any, None],
    top_n: int = DEFAULT_TOP_PRODUCTS,
) -> list[SellerReport]:
    """Build the per-seller performance report, ordered by profit descending."""
    dataset = _validate_dataset(data)
    index = build_index(dataset.sellers, dataset.products)
    opts = _validate_options(options)

    misses = _aggregate(dataset.purchase_records, index, opts)
    reports = rank_sellers(index.accumulators, opts, top_n)

    logger.info(
        "Sales report built: %d sellers, %d receipts, %d unresolved references",
        len(reports), len(dataset.purchase_records), misses,
    )
    return reports
