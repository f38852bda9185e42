# app/main.py
from typing import List
from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from .core import ProductIn
from .database import PRODUCTS
from .models import Product
from .sdk import (
    list_products_logic, get_product_logic, create_product_logic,
    update_product_logic, delete_product_logic, reset_logic,
)

app = FastAPI(title="inventory-store (in-memory stand-in)")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

router = APIRouter(prefix="/api")

# ---------------------------
# Product endpoints
# ---------------------------
@router.get("/products", response_model=List[Product])
async def list_products():
    return await list_products_logic()

@router.get("/products/{product_id}", response_model=Product)
async def get_product(product_id: str):
    return await get_product_logic(product_id)

@router.post("/products", status_code=201, response_model=Product)
async def create_product(payload: ProductIn):
    return await create_product_logic(payload)

@router.put("/products/{product_id}", response_model=Product)
async def update_product(product_id: str, payload: ProductIn):
    return await update_product_logic(product_id, payload)

@router.delete("/products/{product_id}")
async def delete_product(product_id: str):
    return await delete_product_logic(product_id)

app.include_router(router)

# ---------------------------
# Utility: reset (for tests/demo)
# ---------------------------
@app.post("/reset")
async def reset_all():
    return await reset_logic()


if __name__ == "__main__":
    import uvicorn
    from sdk.config import settings

    uvicorn.run(app, host=settings.server_host, port=settings.server_port)
