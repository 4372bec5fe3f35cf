# storefront/client/backends.py
import json
import os
from abc import ABC, abstractmethod

import pydantic

from storefront.client.api_client import StorefrontClient
from storefront.client.models import CartLine, CartView
from storefront.domain.errors import ValidationError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartBackend(ABC):
    """
    Where the cart lives. Every method returns the cart as it is after the
    call, so the caller can re-render straight away.
    """

    name = "abstract"

    @abstractmethod
    def snapshot(self) -> CartView: ...

    @abstractmethod
    def add(self, product: dict, quantity: int = 1) -> CartView: ...

    @abstractmethod
    def set_quantity(self, product_id: int, quantity: int) -> CartView: ...

    @abstractmethod
    def remove(self, product_id: int) -> CartView: ...

    @abstractmethod
    def checkout(self) -> CartView: ...


class LocalCartStorage:
    """JSON file standing in for the browser's local storage."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> list[dict]:
        if not os.path.exists(self.path):
            return []
        with open(self.path, encoding="utf-8") as fh:
            try:
                data = json.load(fh)
            except json.JSONDecodeError:
                logger.warning(f"Unreadable cart file {self.path}, starting with an empty cart")
                return []
        return data if isinstance(data, list) else []

    def save(self, lines: list[dict]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            json.dump(lines, fh, ensure_ascii=False)


class LocalCartBackend(CartBackend):
    """Offline cart: product snapshots plus quantities, all math done here."""

    name = "local"

    def __init__(self, storage: LocalCartStorage):
        self.storage = storage
        self._lines = self._load_lines()

    def _load_lines(self) -> list[CartLine]:
        lines = []
        for entry in self.storage.load():
            try:
                lines.append(CartLine.model_validate(entry))
            except pydantic.ValidationError:
                logger.warning(f"Dropping unreadable cart line in {self.storage.path}: {entry!r}")
        return lines

    def _persist(self) -> CartView:
        self.storage.save([line.model_dump(exclude={"item_id"}) for line in self._lines])
        return self.snapshot()

    def snapshot(self) -> CartView:
        return CartView(lines=[line.model_copy() for line in self._lines])

    def add(self, product: dict, quantity: int = 1) -> CartView:
        if quantity < 1:
            raise ValidationError("quantity must be at least 1")

        product_id = int(product["id"])
        for line in self._lines:
            if line.product_id == product_id:
                line.quantity += quantity
                return self._persist()

        self._lines.append(
            CartLine(
                product_id=product_id,
                name=product["name"],
                price_cents=product["price_cents"],
                quantity=quantity,
                slug=product.get("slug"),
                image=product.get("image"),
            )
        )
        return self._persist()

    def set_quantity(self, product_id: int, quantity: int) -> CartView:
        if quantity < 0:
            raise ValidationError("quantity must not be negative")
        if quantity == 0:
            return self.remove(product_id)

        for line in self._lines:
            if line.product_id == product_id:
                line.quantity = quantity
        return self._persist()

    def remove(self, product_id: int) -> CartView:
        self._lines = [line for line in self._lines if line.product_id != product_id]
        return self._persist()

    def checkout(self) -> CartView:
        self._lines = []
        return self._persist()


class ServerCartBackend(CartBackend):
    """
    Server cart: the API owns the state. Only the last snapshot is kept, to
    translate product ids into line item ids.
    """

    name = "server"

    def __init__(self, client: StorefrontClient):
        self.client = client
        self._view: CartView | None = None

    def _apply(self, payload: dict) -> CartView:
        self._view = CartView.from_api(payload)
        return self._view

    def _item_id(self, product_id: int) -> int | None:
        view = self._view or self.snapshot()
        line = view.find(product_id)
        return line.item_id if line else None

    def snapshot(self) -> CartView:
        return self._apply(self.client.get_cart())

    def add(self, product: dict, quantity: int = 1) -> CartView:
        return self._apply(self.client.add_item(int(product["id"]), quantity))

    def set_quantity(self, product_id: int, quantity: int) -> CartView:
        if quantity < 0:
            raise ValidationError("quantity must not be negative")

        item_id = self._item_id(product_id)
        if item_id is None:
            return self.snapshot()
        return self._apply(self.client.update_item(item_id, quantity))

    def remove(self, product_id: int) -> CartView:
        item_id = self._item_id(product_id)
        if item_id is None:
            return self.snapshot()
        return self._apply(self.client.remove_item(item_id))

    def checkout(self) -> CartView:
        return self._apply(self.client.checkout())


def select_backend(client: StorefrontClient | None, storage: LocalCartStorage) -> CartBackend:
    """Chosen once at startup: server cart if the API answers, local file otherwise."""
    if client is not None and client.ping():
        logger.info(f"Using server cart at {client.base_url}")
        return ServerCartBackend(client)

    logger.info(f"Using local cart at {storage.path}")
    return LocalCartBackend(storage)
