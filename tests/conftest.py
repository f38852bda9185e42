# tests/conftest.py
import asyncio
import itertools
from typing import Any, Dict, List, Optional

import pytest

from sdk.errors import RemoteStoreError
from sdk.models import Product, ProductIn


class FakeClient:
    """In-memory stand-in for AsyncInventoryClient that records every call."""

    def __init__(self, products: Optional[List[Product]] = None):
        self.products: Dict[Any, Product] = {p.id: p for p in (products or [])}
        self.calls: List[tuple] = []
        self.fail: set = set()
        self.gate: Optional[asyncio.Event] = None
        self._ids = itertools.count(100)

    async def _enter(self, action: str, *args):
        self.calls.append((action, *args))
        if self.gate is not None:
            await self.gate.wait()
        if action in self.fail:
            raise RemoteStoreError(action, "simulated network error")

    async def list_products(self) -> List[Product]:
        await self._enter("list")
        return list(self.products.values())

    async def create_product(self, payload: ProductIn) -> Product:
        await self._enter("create", payload)
        p = Product(id=next(self._ids), **payload.model_dump())
        self.products[p.id] = p
        return p

    async def update_product(self, product_id, payload: ProductIn) -> Product:
        await self._enter("update", product_id, payload)
        p = Product(id=product_id, **payload.model_dump())
        self.products[product_id] = p
        return p

    async def delete_product(self, product_id):
        await self._enter("delete", product_id)
        self.products.pop(product_id, None)
        return {"message": "Product deleted"}


@pytest.fixture
def sample_products():
    return [
        Product(id=1, name="Widget", description="Small widget", price=3.0, quantity=5, category="Tools"),
        Product(id=2, name="Gadget", description="Shiny gadget", price=12.0, quantity=40, category="Tools"),
        Product(id=3, name="Bracket", description="Wall mount for a widget", price=7.5, quantity=20, category="Hardware"),
    ]


@pytest.fixture
def fake_client(sample_products):
    return FakeClient(sample_products)
