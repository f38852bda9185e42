# sdk/pyinventory.py
import logging
from typing import Any, List, Optional, Union

import httpx
import requests
from pydantic import ValidationError

from .config import settings
from .errors import RemoteStoreError
from .models import Product, ProductIn

logger = logging.getLogger(__name__)

ProductId = Union[int, str]


def _parse_product(action: str, data: Any) -> Product:
    try:
        return Product.model_validate(data)
    except ValidationError as e:
        raise RemoteStoreError(action, f"unexpected response body: {e}") from e


def _parse_products(action: str, data: Any) -> List[Product]:
    if not isinstance(data, list):
        raise RemoteStoreError(action, "expected a list of products")
    return [_parse_product(action, item) for item in data]


def _payload(payload: ProductIn) -> dict:
    return payload.model_dump()


class InventoryClient:
    """Blocking client for scripts and demos."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None, session=None):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.session = session or requests.Session()

    def _request(self, action: str, method: str, path: str, **kwargs) -> Any:
        try:
            r = self.session.request(method, f"{self.base_url}{path}", timeout=self.timeout, **kwargs)
            r.raise_for_status()
            # 204 No Content and other empty 2xx bodies
            if not r.content:
                return None
            return r.json()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            raise RemoteStoreError(action, str(e), status_code=status) from e
        except (requests.RequestException, ValueError) as e:
            raise RemoteStoreError(action, str(e)) from e

    def list_products(self) -> List[Product]:
        return _parse_products("fetch products", self._request("fetch products", "GET", "/products"))

    def create_product(self, payload: ProductIn) -> Product:
        data = self._request("create product", "POST", "/products", json=_payload(payload))
        return _parse_product("create product", data)

    def update_product(self, product_id: ProductId, payload: ProductIn) -> Product:
        data = self._request("update product", "PUT", f"/products/{product_id}", json=_payload(payload))
        return _parse_product("update product", data)

    def delete_product(self, product_id: ProductId) -> Any:
        return self._request("delete product", "DELETE", f"/products/{product_id}")


class AsyncInventoryClient:
    """Client used by the editor and the collection view.

    One request per call, no retries. Any transport failure or non-2xx answer
    surfaces as RemoteStoreError.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=transport)

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()

    async def aclose(self):
        await self._client.aclose()

    async def _request(self, action: str, method: str, path: str, **kwargs) -> Any:
        # relative to base_url, so keep the leading slash off
        try:
            r = await self._client.request(method, path.lstrip("/"), **kwargs)
            r.raise_for_status()
            # 204 No Content and other empty 2xx bodies
            if not r.content:
                return None
            return r.json()
        except httpx.HTTPStatusError as e:
            raise RemoteStoreError(action, e.response.text, status_code=e.response.status_code) from e
        except (httpx.HTTPError, ValueError) as e:
            raise RemoteStoreError(action, str(e) or type(e).__name__) from e

    async def list_products(self) -> List[Product]:
        data = await self._request("fetch products", "GET", "/products")
        return _parse_products("fetch products", data)

    async def create_product(self, payload: ProductIn) -> Product:
        data = await self._request("create product", "POST", "/products", json=_payload(payload))
        return _parse_product("create product", data)

    async def update_product(self, product_id: ProductId, payload: ProductIn) -> Product:
        data = await self._request("update product", "PUT", f"/products/{product_id}", json=_payload(payload))
        return _parse_product("update product", data)

    async def delete_product(self, product_id: ProductId) -> Any:
        return await self._request("delete product", "DELETE", f"/products/{product_id}")
