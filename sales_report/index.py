from collections.abc import Sequence
from typing import Optional

from sales_report.errors import InvalidInput
from sales_report.models import Product, Seller, SellerAccumulator


def require_collection(name: str, items) -> None:
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise InvalidInput(f"'{name}' must be a list, got {type(items).__name__}")
    if len(items) == 0:
        raise InvalidInput(f"'{name}' must not be empty")


class CatalogIndex:
    """O(1) lookup of seller accumulators by id and products by SKU."""

    def __init__(self, sellers: list[SellerAccumulator], products: dict[str, Product]) -> None:
        # roster order is kept for ranking ties
        self.accumulators = sellers
        self._sellers: dict[str, SellerAccumulator] = {}
        for acc in sellers:
            self._sellers[acc.id] = acc  # duplicates: last write wins
        self._products = products

    def get_seller(self, seller_id: str) -> Optional[SellerAccumulator]:
        return self._sellers.get(seller_id)

    def get_product(self, sku: str) -> Optional[Product]:
        return self._products.get(sku)


def build_index(sellers: Sequence[Seller], products: Sequence[Product]) -> CatalogIndex:
    require_collection("sellers", sellers)
    require_collection("products", products)

    accumulators = [SellerAccumulator.for_seller(s) for s in sellers]
    product_index: dict[str, Product] = {}
    for product in products:
        product_index[product.sku] = product
    return CatalogIndex(accumulators, product_index)
