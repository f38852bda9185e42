# sdk/models.py
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationInfo, field_validator

PLACEHOLDER_IMAGE = "/placeholder.png"
DRAFT_FIELDS = ("name", "description", "price", "quantity", "category")


class Product(BaseModel):
    """A product as returned by the remote store.

    Parsed leniently: the client trusts whatever the store sends back, so
    missing fields fall back to empty values and unknown fields are kept.
    """
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    id: Optional[Union[int, str]] = Field(None, validation_alias=AliasChoices("id", "_id"))
    name: str = ""
    description: Optional[str] = ""
    price: float = 0.0
    quantity: int = 0
    category: str = ""
    image: Optional[str] = None

    @field_validator("name", "description", "price", "quantity", "category", mode="before")
    @classmethod
    def _null_as_default(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def image_or_placeholder(self) -> str:
        return self.image or PLACEHOLDER_IMAGE


class ProductIn(BaseModel):
    """Payload sent on create and update (full replace)."""
    model_config = ConfigDict(str_strip_whitespace=True, allow_inf_nan=False)

    name: str = Field(min_length=1)
    description: str = ""
    price: float = Field(gt=0)
    quantity: int = Field(ge=0)
    category: str = Field(min_length=1)


class ProductDraft(BaseModel):
    """The editor's field values, held as typed text until submission."""
    name: str = ""
    description: str = ""
    price: str = ""
    quantity: str = ""
    category: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductDraft":
        return cls(
            name=product.name or "",
            description=product.description or "",
            price=_as_text(product.price),
            quantity=_as_text(product.quantity),
            category=product.category or "",
        )

    def is_empty(self) -> bool:
        return self == ProductDraft()


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
