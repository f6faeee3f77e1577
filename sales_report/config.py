import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Optional

from sales_report.errors import InvalidConfiguration, LookupMiss
from sales_report.pricing import calculate_bonus_by_profit, calculate_simple_revenue

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_TOP_PRODUCTS = 10
MAX_TOP_PRODUCTS = 10


def validate_top_n(top_n) -> int:
    if isinstance(top_n, bool) or not isinstance(top_n, int):
        raise InvalidConfiguration(f"top_n must be an integer, got {type(top_n).__name__}")
    if not 1 <= top_n <= MAX_TOP_PRODUCTS:
        raise InvalidConfiguration(f"top_n must be between 1 and {MAX_TOP_PRODUCTS}, got {top_n}")
    return top_n


def log_lookup_miss(miss: LookupMiss) -> None:
    logger.warning(miss.describe())


@dataclass(frozen=True)
class AnalysisOptions:
    """Pluggable strategies for one report run.

    calculate_revenue(item, product) -> revenue for a line item
    calculate_bonus(index, total, seller) -> bonus for a ranked seller
    on_lookup_miss(miss) -> receives unresolved seller/SKU references
    """

    calculate_revenue: Callable
    calculate_bonus: Callable
    on_lookup_miss: Callable[[LookupMiss], None] = log_lookup_miss


DEFAULT_OPTIONS = AnalysisOptions(
    calculate_revenue=calculate_simple_revenue,
    calculate_bonus=calculate_bonus_by_profit,
)


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    top_products: int = DEFAULT_TOP_PRODUCTS
    demo_seed: int = 42


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        log_level=os.getenv("SALES_REPORT_LOG_LEVEL", "INFO").upper(),
        top_products=validate_top_n(_env_int("SALES_REPORT_TOP_PRODUCTS", DEFAULT_TOP_PRODUCTS)),
        demo_seed=_env_int("SALES_REPORT_SEED", 42),
    )


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, (level or get_settings().log_level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
