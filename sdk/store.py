# sdk/store.py
import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Set, Tuple, Union

from .models import Product
from . import views

logger = logging.getLogger(__name__)

ProductId = Union[int, str]


@dataclass(frozen=True)
class ViewState:
    categories: Tuple[str, ...]
    visible: Tuple[Product, ...]
    metrics: views.DashboardMetrics
    selected_category: str
    search_term: str
    editing: Optional[Product]
    deleting: FrozenSet[ProductId]


class InventoryStore:
    """Single owner of the client-side inventory state.

    All writes go through the named operations below. Derived values
    (category options, visible list, metrics) are recomputed on every read.
    """

    def __init__(self, products: Optional[List[Product]] = None):
        self._products: List[Product] = list(products or [])
        self._selected_category = views.ALL_CATEGORIES
        self._search_term = ""
        self._editing: Optional[Product] = None
        self._deleting: Set[ProductId] = set()

    # ---------------------------
    # Read access
    # ---------------------------
    @property
    def products(self) -> Tuple[Product, ...]:
        return tuple(self._products)

    @property
    def selected_category(self) -> str:
        return self._selected_category

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def editing(self) -> Optional[Product]:
        return self._editing

    @property
    def deleting(self) -> FrozenSet[ProductId]:
        return frozenset(self._deleting)

    def get(self, product_id: ProductId) -> Optional[Product]:
        for p in self._products:
            if p.id == product_id:
                return p
        return None

    def is_deleting(self, product_id: ProductId) -> bool:
        return product_id in self._deleting

    # ---------------------------
    # Derived view
    # ---------------------------
    @property
    def categories(self) -> List[str]:
        return views.category_options(self._products)

    @property
    def visible(self) -> List[Product]:
        return views.visible_products(self._products, self._selected_category, self._search_term)

    @property
    def metrics(self) -> views.DashboardMetrics:
        return views.compute_metrics(self._products)

    def snapshot(self) -> ViewState:
        return ViewState(
            categories=tuple(self.categories),
            visible=tuple(self.visible),
            metrics=self.metrics,
            selected_category=self._selected_category,
            search_term=self._search_term,
            editing=self._editing,
            deleting=self.deleting,
        )

    # ---------------------------
    # Mutations
    # ---------------------------
    def replace_all(self, products: List[Product]):
        self._products = list(products)
        logger.debug("collection loaded: %d products", len(self._products))

    def prepend(self, product: Product):
        self._products.insert(0, product)

    def replace(self, product: Product):
        self._products = [product if p.id == product.id else p for p in self._products]
        self._editing = None

    def discard(self, product_id: ProductId):
        self._products = [p for p in self._products if p.id != product_id]
        if self._editing is not None and self._editing.id == product_id:
            self._editing = None

    def set_filter(self, category: str):
        self._selected_category = category or views.ALL_CATEGORIES

    def set_search(self, term: str):
        self._search_term = term or ""

    def set_editing(self, product: Optional[Product]):
        self._editing = product

    def begin_delete(self, product_id: ProductId) -> bool:
        """Mark a delete in flight; False when one is already running."""
        if product_id in self._deleting:
            return False
        self._deleting.add(product_id)
        return True

    def end_delete(self, product_id: ProductId):
        self._deleting.discard(product_id)
