# sdk/editor.py
import logging
from typing import Callable, Optional

from pydantic import ValidationError

from .errors import DraftValidationError, RemoteStoreError
from .models import DRAFT_FIELDS, Product, ProductDraft, ProductIn
from .notices import NoticeBoard

logger = logging.getLogger(__name__)

CREATE = "create"
EDIT = "edit"


def validate_draft(draft: ProductDraft) -> ProductIn:
    """Coerce a draft into a submission payload.

    Name and category must be non-empty, price a positive number and
    quantity a non-negative integer. Raises DraftValidationError otherwise.
    """
    try:
        return ProductIn.model_validate(draft.model_dump())
    except ValidationError as e:
        fields = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        raise DraftValidationError(fields) from e


class RecordEditor:
    """Create/edit form state for a single product."""

    def __init__(
        self,
        client,
        notices: NoticeBoard,
        on_created: Callable[[Product], None],
        on_updated: Callable[[Product], None],
    ):
        self.client = client
        self.notices = notices
        self.on_created = on_created
        self.on_updated = on_updated
        self.target: Optional[Product] = None
        self.draft = ProductDraft()
        self.saving = False

    @property
    def mode(self) -> str:
        return EDIT if self.target is not None else CREATE

    @property
    def title(self) -> str:
        return "Edit Product" if self.target is not None else "Add New Product"

    @property
    def submit_label(self) -> str:
        if self.saving:
            return "Saving..."
        return "Update Product" if self.target is not None else "Add Product"

    def load(self, product: Optional[Product]):
        self.target = product
        self.draft = ProductDraft.from_product(product) if product is not None else ProductDraft()

    def reset(self):
        self.load(None)

    def set_field(self, name: str, value: str):
        if name not in DRAFT_FIELDS:
            raise KeyError(name)
        self.draft = self.draft.model_copy(update={name: value})

    async def submit(self) -> Optional[Product]:
        if self.saving:
            logger.debug("submit ignored: save already in flight")
            return None

        try:
            payload = validate_draft(self.draft)
        except DraftValidationError as e:
            logger.info("draft rejected, invalid fields: %s", ", ".join(e.fields))
            self.notices.error(e.message)
            return None

        target = self.target
        self.saving = True
        try:
            if target is not None:
                saved = await self.client.update_product(target.id, payload)
            else:
                saved = await self.client.create_product(payload)
        except RemoteStoreError as e:
            logger.error("Save failed: %s", e)
            self.notices.error("Failed to save product")
            return None
        finally:
            self.saving = False

        if target is not None:
            self.on_updated(saved)
            self.notices.success("Product updated successfully!")
        else:
            self.on_created(saved)
            self.notices.success("Product added successfully!")
        self.reset()
        return saved
