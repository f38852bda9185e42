# tests/test_client.py
import asyncio

import httpx
import pytest
import requests
from fastapi.testclient import TestClient

from app.main import app
from sdk.collection import CollectionView
from sdk.errors import RemoteStoreError
from sdk.models import Product, ProductIn
from sdk.notices import NoticeBoard
from sdk.pyinventory import AsyncInventoryClient, InventoryClient
from sdk.store import InventoryStore

BASE_URL = "http://testserver/api"
BOLT = ProductIn(name="Bolt", price=2.5, quantity=100, category="Hardware")


def asgi_client():
    return AsyncInventoryClient(base_url=BASE_URL, transport=httpx.ASGITransport(app=app))


@pytest.fixture(autouse=True)
def clean_store():
    TestClient(app).post("/reset")


def test_product_accepts_document_style_id():
    p = Product.model_validate({"_id": "abc123", "name": "Nut", "price": 1, "quantity": 3, "category": "Hardware", "createdAt": "2024-01-01"})
    assert p.id == "abc123"
    assert p.image_or_placeholder == "/placeholder.png"


def test_async_client_round_trip_against_store():
    async def scenario():
        async with asgi_client() as client:
            created = await client.create_product(BOLT)
            updated = await client.update_product(created.id, BOLT.model_copy(update={"quantity": 90}))
            listed = await client.list_products()
            await client.delete_product(created.id)
            remaining = await client.list_products()
            return created, updated, listed, remaining

    created, updated, listed, remaining = asyncio.run(scenario())
    assert created.id
    assert updated.id == created.id
    assert updated.quantity == 90
    assert listed == [updated]
    assert remaining == []


def test_async_client_maps_http_errors():
    async def scenario():
        async with asgi_client() as client:
            await client.delete_product("missing")

    with pytest.raises(RemoteStoreError) as exc:
        asyncio.run(scenario())
    assert exc.value.status_code == 404
    assert exc.value.action == "delete product"


def test_async_client_maps_transport_errors():
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    async def scenario():
        async with AsyncInventoryClient(base_url=BASE_URL, transport=httpx.MockTransport(boom)) as client:
            await client.list_products()

    with pytest.raises(RemoteStoreError) as exc:
        asyncio.run(scenario())
    assert exc.value.status_code is None


def test_async_client_rejects_non_list_collection():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"items": []}))

    async def scenario():
        async with AsyncInventoryClient(base_url=BASE_URL, transport=transport) as client:
            await client.list_products()

    with pytest.raises(RemoteStoreError):
        asyncio.run(scenario())


def test_create_scenario_end_to_end():
    async def scenario():
        async with asgi_client() as client:
            view = CollectionView(InventoryStore(), client, NoticeBoard())
            await view.fetch_all()
            for name, value in dict(name="Bolt", category="Hardware", price="2.5", quantity="100").items():
                view.editor.set_field(name, value)
            saved = await view.editor.submit()
            return view, saved

    view, saved = asyncio.run(scenario())
    assert len(view.store.products) == 1
    p = view.store.products[0]
    assert p == saved
    assert p.id
    assert (p.name, p.category, p.price, p.quantity) == ("Bolt", "Hardware", 2.5, 100)
    assert view.editor.draft.is_empty()


def test_delete_network_failure_scenario():
    products = [{"id": 1, "name": "Widget", "category": "Tools", "quantity": 5},
                {"id": 2, "name": "Gadget", "category": "Tools", "quantity": 40}]

    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, json=products)
        raise httpx.ConnectError("network down", request=request)

    async def scenario():
        async with AsyncInventoryClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
            view = CollectionView(InventoryStore(), client, NoticeBoard())
            await view.fetch_all()
            ok = await view.delete(view.store.get(2), lambda p: True)
            return view, ok

    view, ok = asyncio.run(scenario())
    assert ok is False
    assert view.store.get(2) is not None
    assert not view.store.is_deleting(2)
    assert view.notices.last.message == "Failed to delete product"


def test_sync_client_against_store():
    c = InventoryClient(base_url=BASE_URL, session=TestClient(app))
    created = c.create_product(BOLT)
    assert [p.id for p in c.list_products()] == [created.id]
    assert c.update_product(created.id, BOLT.model_copy(update={"price": 3.0})).price == 3.0
    assert c.delete_product(created.id)["id"] == created.id


class _StubSession:
    def __init__(self, exc=None, status=None):
        self.exc = exc
        self.status = status

    def request(self, method, url, **kwargs):
        if self.exc is not None:
            raise self.exc
        r = requests.Response()
        r.status_code = self.status
        r.url = url
        r.reason = "Server Error" if self.status >= 400 else "No Content"
        r._content = b""
        return r


def test_sync_client_maps_errors():
    down = InventoryClient(base_url=BASE_URL, session=_StubSession(exc=requests.ConnectionError("down")))
    with pytest.raises(RemoteStoreError):
        down.list_products()

    broken = InventoryClient(base_url=BASE_URL, session=_StubSession(status=500))
    with pytest.raises(RemoteStoreError) as exc:
        broken.delete_product(1)
    assert exc.value.status_code == 500


def test_sync_client_accepts_empty_delete_reply():
    c = InventoryClient(base_url=BASE_URL, session=_StubSession(status=204))
    assert c.delete_product(1) is None


def test_delete_answered_with_no_content_removes_record():
    products = [{"id": 1, "name": "Widget", "category": "Tools", "quantity": 5},
                {"id": 2, "name": "Gadget", "category": "Tools", "quantity": 40}]

    def handler(request):
        if request.method == "GET":
            return httpx.Response(200, json=products)
        return httpx.Response(204)

    async def scenario():
        async with AsyncInventoryClient(base_url=BASE_URL, transport=httpx.MockTransport(handler)) as client:
            view = CollectionView(InventoryStore(), client, NoticeBoard())
            await view.fetch_all()
            ok = await view.delete(view.store.get(2), lambda p: True)
            return view, ok

    view, ok = asyncio.run(scenario())
    assert ok is True
    assert [p.id for p in view.store.products] == [1]
    assert view.notices.last.message == "Product deleted successfully!"


def test_fetch_tolerates_null_fields():
    products = [{"id": 1, "name": "Widget", "category": "Tools", "price": 3.0, "quantity": 5},
                {"id": 2, "name": None, "description": None, "category": None, "price": None, "quantity": None},
                {"id": 3, "name": "Bracket", "category": "Hardware", "price": 7.5, "quantity": 20}]
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json=products))

    async def scenario():
        async with AsyncInventoryClient(base_url=BASE_URL, transport=transport) as client:
            view = CollectionView(InventoryStore(), client, NoticeBoard())
            await view.fetch_all()
            return view

    view = asyncio.run(scenario())
    assert [p.id for p in view.store.products] == [1, 2, 3]
    blank = view.store.get(2)
    assert (blank.name, blank.description, blank.category, blank.price, blank.quantity) == ("", "", "", 0.0, 0)
    assert view.notices.notices == []
    assert view.snapshot().metrics.low_stock == 2
