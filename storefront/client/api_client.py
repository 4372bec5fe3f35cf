# storefront/client/api_client.py
from typing import Any

import requests
from requests import RequestException

from storefront.utils.logging import get_logger
from storefront.utils.settings import API_BASE_URL, API_TIMEOUT_SECONDS

logger = get_logger(__name__)


class StorefrontClient:
    """
    Thin HTTP client for the storefront API.
    Uses one requests.Session so the cart session cookie survives between calls.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self.timeout = timeout or API_TIMEOUT_SECONDS
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **kwargs) -> Any:
        url = f"{self.base_url}{path}"
        logger.info(f"StorefrontClient {method} {url}")

        resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        resp.raise_for_status()
        return resp.json()

    def ping(self) -> bool:
        try:
            resp = self.session.request("GET", f"{self.base_url}/health", timeout=self.timeout)
        except RequestException as e:
            logger.info(f"Storefront API not reachable: {e}")
            return False
        return resp.status_code == 200

    # catalog
    def list_products(self, category: str | None = None) -> list[dict]:
        params = {"category": category} if category else None
        return self._request("GET", "/api/products", params=params)

    def get_product(self, id_or_slug: int | str) -> dict:
        return self._request("GET", f"/api/products/{id_or_slug}")

    # cart
    def get_cart(self) -> dict:
        return self._request("GET", "/api/cart")

    def add_item(self, product_id: int, quantity: int = 1) -> dict:
        return self._request("POST", "/api/cart", json={"productId": product_id, "quantity": quantity})

    def update_item(self, item_id: int, quantity: int) -> dict:
        return self._request("PATCH", "/api/cart", json={"itemId": item_id, "quantity": quantity})

    def remove_item(self, item_id: int) -> dict:
        return self._request("DELETE", f"/api/cart/{item_id}")

    def checkout(self) -> dict:
        return self._request("POST", "/api/checkout")
