from dataclasses import dataclass
from typing import Optional


class SalesReportError(Exception):
    """Base class for fatal report errors."""


class InvalidInput(SalesReportError, ValueError):
    """Dataset missing, or one of its collections absent or empty."""


class InvalidConfiguration(SalesReportError, ValueError):
    """Options missing, or a strategy is not callable."""


@dataclass(frozen=True)
class LookupMiss:
    """A receipt referenced a seller or SKU that is not in the index.

    Non-fatal: the record (or line item) is skipped and the run continues.
    """

    kind: str  # "seller" | "product"
    key: str
    receipt_id: Optional[str] = None

    def describe(self) -> str:
        label = "Seller id" if self.kind == "seller" else "Product sku"
        where = f" (receipt {self.receipt_id})" if self.receipt_id else ""
        return f"{label} '{self.key}' not found{where}"
