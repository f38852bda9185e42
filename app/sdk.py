import uuid
from typing import List, Dict, Any
from fastapi import HTTPException

from .core import ProductIn, _make_product_dict
from .database import PRODUCTS

# Endpoint logic for the product resource, shared by app.main routes.

def _get_or_404(product_id: str) -> Dict[str, Any]:
    p = PRODUCTS.get(product_id)
    if not p:
        raise HTTPException(status_code=404, detail="product not found")
    return p

async def list_products_logic() -> List[Dict[str, Any]]:
    return list(PRODUCTS.values())

async def get_product_logic(product_id: str):
    return _get_or_404(product_id)

async def create_product_logic(payload: ProductIn):
    pid = uuid.uuid4().hex
    PRODUCTS[pid] = _make_product_dict(pid, payload)
    return PRODUCTS[pid]

async def update_product_logic(product_id: str, payload: ProductIn):
    _get_or_404(product_id)
    # full replace, id is immutable
    PRODUCTS[product_id] = _make_product_dict(product_id, payload)
    return PRODUCTS[product_id]

async def delete_product_logic(product_id: str):
    _get_or_404(product_id)
    del PRODUCTS[product_id]
    return {"message": "Product deleted", "id": product_id}

async def reset_logic():
    PRODUCTS.clear()
    return {"status": "reset"}
