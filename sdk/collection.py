# sdk/collection.py
import logging
from typing import Callable, Optional

from .editor import RecordEditor
from .errors import RemoteStoreError
from .models import Product
from .notices import NoticeBoard
from .store import InventoryStore, ViewState

logger = logging.getLogger(__name__)


class CollectionView:
    """Product list backed by the remote store.

    Owns the delete flow and the edit selection, and merges results reported
    by its RecordEditor into the store.
    """

    def __init__(self, store: InventoryStore, client, notices: Optional[NoticeBoard] = None):
        self.store = store
        self.client = client
        self.notices = notices if notices is not None else NoticeBoard()
        self.editor = RecordEditor(client, self.notices, self.handle_created, self.handle_updated)

    async def fetch_all(self):
        try:
            products = await self.client.list_products()
        except RemoteStoreError as e:
            logger.error("Failed to fetch products: %s", e)
            self.store.replace_all([])
            self.notices.error("Failed to fetch products")
            return
        self.store.replace_all(products)

    # ---------------------------
    # Editor callbacks
    # ---------------------------
    def handle_created(self, product: Product):
        self.store.prepend(product)

    def handle_updated(self, product: Product):
        self.store.replace(product)
        self.editor.reset()

    # ---------------------------
    # Actions
    # ---------------------------
    def edit(self, product: Product):
        if self.is_busy(product):
            return
        self.store.set_editing(product)
        self.editor.load(product)

    def cancel_edit(self):
        self.store.set_editing(None)
        self.editor.reset()

    def set_filter(self, category: str):
        self.store.set_filter(category)

    def set_search(self, term: str):
        self.store.set_search(term)

    async def delete(self, product: Product, confirm: Callable[[Product], bool]) -> bool:
        if not confirm(product):
            return False
        if not self.store.begin_delete(product.id):
            logger.debug("delete of %s already in flight", product.id)
            return False
        try:
            await self.client.delete_product(product.id)
        except RemoteStoreError as e:
            logger.error("Delete failed: %s", e)
            self.notices.error("Failed to delete product")
            return False
        finally:
            self.store.end_delete(product.id)

        editing = self.store.editing
        self.store.discard(product.id)
        if editing is not None and editing.id == product.id:
            self.editor.reset()
        self.notices.success("Product deleted successfully!")
        return True

    # ---------------------------
    # Presentation helpers
    # ---------------------------
    def is_busy(self, product: Product) -> bool:
        return self.store.is_deleting(product.id)

    def delete_label(self, product: Product) -> str:
        return "Deleting..." if self.is_busy(product) else "Delete"

    def snapshot(self) -> ViewState:
        return self.store.snapshot()
