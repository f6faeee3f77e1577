"""
Deterministic demo-dataset generator.

Produces:
  - 5 sellers
  - 20 catalog products (cost 30-70 % of list price)
  - 200 receipts spread over Jan 2026, 1-4 line items each
    - discounts of 0 / 5 / 10 / 20 %
    - total_amount = rounded sum of discounted line revenue
"""

import random
from datetime import date, timedelta
from decimal import Decimal

from sales_report.models import Dataset, LineItem, Product, PurchaseRecord, Seller
from sales_report.pricing import calculate_simple_revenue, round_money

SEED = 42
START = date(2026, 1, 1)
DAYS = 31

CATEGORIES = ["Electronics", "Home", "Books", "Toys", "Garden"]
DISCOUNTS = [0, 0, 0, 5, 10, 20]


def seed(seed: int = SEED) -> Dataset:
    rng = random.Random(seed)

    # ── sellers ──────────────────────────────────────────────────────────────
    names = [
        ("Alexey", "Petrov", "Senior Seller"),
        ("Ivan", "Smirnov", "Seller"),
        ("Maria", "Volkova", "Seller"),
        ("Olga", "Kuznetsova", "Junior Seller"),
        ("Dmitry", "Sokolov", "Junior Seller"),
    ]
    sellers = [
        Seller(
            id=f"seller_{i}",
            first_name=first,
            last_name=last,
            position=position,
            start_date=str(START - timedelta(days=rng.randint(90, 900))),
        )
        for i, (first, last, position) in enumerate(names, start=1)
    ]

    # ── products ─────────────────────────────────────────────────────────────
    products = []
    for i in range(1, 21):
        list_price = Decimal(str(round(rng.uniform(10, 500), 2)))
        cost_ratio = Decimal(str(round(rng.uniform(0.3, 0.7), 2)))
        products.append(Product(
            sku=f"SKU_{i:03d}",
            name=f"Product {i}",
            category=rng.choice(CATEGORIES),
            sale_price=list_price,
            purchase_price=round_money(list_price * cost_ratio),
        ))

    # ── receipts ─────────────────────────────────────────────────────────────
    records = []
    for n in range(1, 201):
        items = []
        for product in rng.sample(products, rng.randint(1, 4)):
            items.append(LineItem(
                sku=product.sku,
                quantity=rng.randint(1, 5),
                sale_price=product.sale_price,
                discount=Decimal(rng.choice(DISCOUNTS)),
            ))
        gross = sum((i.sale_price * i.quantity for i in items), Decimal("0"))
        net = sum((calculate_simple_revenue(i) for i in items), Decimal("0"))
        records.append(PurchaseRecord(
            receipt_id=f"receipt_{n:04d}",
            seller_id=rng.choice(sellers).id,
            customer_id=f"customer_{rng.randint(1, 80):03d}",
            date=str(START + timedelta(days=rng.randrange(DAYS))),
            total_amount=round_money(net),
            total_discount=round_money(gross - net),
            items=items,
        ))

    return Dataset(sellers=sellers, products=products, purchase_records=records)
