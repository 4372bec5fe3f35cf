from storefront.client.api_client import StorefrontClient
from storefront.client.backends import (
    CartBackend,
    LocalCartBackend,
    LocalCartStorage,
    ServerCartBackend,
    select_backend,
)
from storefront.client.controller import CartController
from storefront.client.models import CartLine, CartView

__all__ = [
    "StorefrontClient",
    "CartBackend",
    "LocalCartBackend",
    "LocalCartStorage",
    "ServerCartBackend",
    "select_backend",
    "CartController",
    "CartLine",
    "CartView",
]
