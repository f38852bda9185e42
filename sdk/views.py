# sdk/views.py
from dataclasses import dataclass
from typing import Iterable, List

from .models import Product

ALL_CATEGORIES = "All"
LOW_STOCK_THRESHOLD = 10
MEDIUM_STOCK_MAX = 30
FULL_STOCK_BAR = 50


@dataclass(frozen=True)
class StockStatus:
    level: str
    label: str
    color: str


LOW = StockStatus("low", "LOW STOCK", "red")
MEDIUM = StockStatus("medium", "MEDIUM", "yellow")
IN_STOCK = StockStatus("in stock", "IN STOCK", "green")


@dataclass(frozen=True)
class DashboardMetrics:
    total_products: int
    low_stock: int
    categories: int


def stock_status(quantity: int) -> StockStatus:
    if quantity < LOW_STOCK_THRESHOLD:
        return LOW
    if quantity <= MEDIUM_STOCK_MAX:
        return MEDIUM
    return IN_STOCK


def stock_fill(quantity: int) -> float:
    """Fraction of the stock bar to fill, clamped to [0, 1]."""
    return max(0.0, min(quantity / FULL_STOCK_BAR, 1.0))


def distinct_categories(products: Iterable[Product]) -> List[str]:
    # first-seen order
    return list(dict.fromkeys(p.category for p in products))


def category_options(products: Iterable[Product]) -> List[str]:
    return [ALL_CATEGORIES] + distinct_categories(products)


def matches_category(product: Product, category: str) -> bool:
    return category == ALL_CATEGORIES or product.category == category


def matches_search(product: Product, term: str) -> bool:
    term = term.lower()
    return term in (product.name or "").lower() or term in (product.description or "").lower()


def filter_by_category(products: Iterable[Product], category: str) -> List[Product]:
    return [p for p in products if matches_category(p, category)]


def filter_by_search(products: Iterable[Product], term: str) -> List[Product]:
    return [p for p in products if matches_search(p, term)]


def visible_products(products: Iterable[Product], category: str, term: str) -> List[Product]:
    return [p for p in products if matches_category(p, category) and matches_search(p, term)]


def compute_metrics(products: List[Product]) -> DashboardMetrics:
    return DashboardMetrics(
        total_products=len(products),
        low_stock=sum(1 for p in products if p.quantity < LOW_STOCK_THRESHOLD),
        categories=len(set(p.category for p in products)),
    )
