from pydantic import BaseModel, Field
from typing import Optional, Dict, Any

class ProductIn(BaseModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = ""
    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=0)
    category: str = Field(..., min_length=1)
    image: Optional[str] = None

def _make_product_dict(product_id: str, p: ProductIn) -> Dict[str, Any]:
    return {
        "id": product_id,
        "name": p.name,
        "description": p.description or "",
        "price": p.price,
        "quantity": p.quantity,
        "category": p.category,
        "image": p.image,
    }
