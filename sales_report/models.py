from pydantic import BaseModel, ConfigDict, Field
from decimal import Decimal
from typing import Optional


class Seller(BaseModel):
    id: str
    first_name: str
    last_name: str
    position: Optional[str] = None
    start_date: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Product(BaseModel):
    sku: str
    purchase_price: Decimal  # cost basis per unit
    name: Optional[str] = None
    category: Optional[str] = None
    sale_price: Optional[Decimal] = None  # catalog list price, informational


class LineItem(BaseModel):
    sku: str
    quantity: int = Field(ge=0)
    sale_price: Decimal
    discount: Decimal = Field(default=Decimal("0"), ge=0, le=100)  # percent


class PurchaseRecord(BaseModel):
    receipt_id: Optional[str] = None
    seller_id: str
    customer_id: Optional[str] = None
    date: Optional[str] = None
    total_amount: Decimal
    total_discount: Optional[Decimal] = None
    items: list[LineItem] = []


class Dataset(BaseModel):
    sellers: list[Seller] = []
    products: list[Product] = []
    purchase_records: list[PurchaseRecord] = []


# ── Aggregation state ────────────────────────────────────────────────────────

class SellerAccumulator(BaseModel):
    id: str
    name: str
    revenue: Decimal = Decimal("0")
    profit: Decimal = Decimal("0")
    sales_count: int = 0
    # sku -> quantity, in first-sold order
    products_sold: dict[str, int] = {}

    @classmethod
    def for_seller(cls, seller: Seller) -> "SellerAccumulator":
        return cls(id=seller.id, name=seller.full_name)


# ── Response models ──────────────────────────────────────────────────────────

class ProductSale(BaseModel):
    model_config = ConfigDict(frozen=True)

    sku: str
    quantity: int


class SellerReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    seller_id: str
    name: str
    revenue: Decimal
    profit: Decimal
    sales_count: int
    top_products: list[ProductSale]
    bonus: Decimal
