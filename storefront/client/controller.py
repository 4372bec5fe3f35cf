# storefront/client/controller.py
from storefront.client.api_client import StorefrontClient
from storefront.client.backends import CartBackend, LocalCartStorage, select_backend
from storefront.client.models import CartView
from storefront.domain.errors import NotFoundError
from storefront.utils.logging import get_logger
from storefront.utils.settings import (
    CART_STORAGE_PATH,
    CURRENCY_LABEL,
    FREE_SHIPPING_THRESHOLD_CENTS,
    SHIPPING_CENTS,
)

logger = get_logger(__name__)

EMPTY_CART_TEXT = "Your cart is empty."


def format_price(cents: int) -> str:
    return f"{cents // 100}.{cents % 100:02d} {CURRENCY_LABEL}"


def shipping_for(subtotal_cents: int) -> int:
    if subtotal_cents == 0 or subtotal_cents > FREE_SHIPPING_THRESHOLD_CENTS:
        return 0
    return SHIPPING_CENTS


def badge_text(count: int) -> str:
    """Cart icon counter. Empty string means the badge is hidden."""
    if count <= 0:
        return ""
    return "9+" if count > 9 else str(count)


def filter_products(products: list[dict], category: str | None = "all") -> list[dict]:
    if not category or category == "all":
        return list(products)
    return [p for p in products if p.get("category") == category]


def render_cart(view: CartView) -> str:
    if not view.lines:
        return EMPTY_CART_TEXT

    rows = [
        f"{line.name} ({line.quantity}x)  {format_price(line.line_total_cents)}"
        for line in view.lines
    ]

    subtotal = view.total_cents
    shipping = shipping_for(subtotal)
    rows.append(f"Subtotal: {format_price(subtotal)}")
    rows.append(f"Shipping: {format_price(shipping)}")
    rows.append(f"Total: {format_price(subtotal + shipping)}")
    return "\n".join(rows)


class CartController:
    """
    Single cart UI controller. Works the same whichever backend was picked;
    after every mutation the held view is replaced with the backend's answer.
    """

    def __init__(self, backend: CartBackend, catalog: list[dict] | None = None):
        self.backend = backend
        self.catalog = list(catalog or [])
        self.view = backend.snapshot()

    @classmethod
    def create(
        cls,
        client: StorefrontClient | None = None,
        storage_path: str | None = None,
        catalog: list[dict] | None = None,
    ) -> "CartController":
        backend = select_backend(client, LocalCartStorage(storage_path or CART_STORAGE_PATH))
        if catalog is None and backend.name == "server":
            catalog = client.list_products()
        return cls(backend, catalog)

    @property
    def mode(self) -> str:
        return self.backend.name

    def products(self, category: str | None = "all") -> list[dict]:
        return filter_products(self.catalog, category)

    def _product(self, product_id: int) -> dict:
        for product in self.catalog:
            if int(product["id"]) == int(product_id):
                return product
        raise NotFoundError("Product not found")

    def add(self, product_id: int, quantity: int = 1) -> CartView:
        self.view = self.backend.add(self._product(product_id), quantity)
        return self.view

    def increase(self, product_id: int) -> CartView:
        line = self.view.find(product_id)
        if line:
            self.view = self.backend.set_quantity(product_id, line.quantity + 1)
        return self.view

    def decrease(self, product_id: int) -> CartView:
        # stops at 1, removing is an explicit action
        line = self.view.find(product_id)
        if line and line.quantity > 1:
            self.view = self.backend.set_quantity(product_id, line.quantity - 1)
        return self.view

    def remove(self, product_id: int) -> CartView:
        self.view = self.backend.remove(product_id)
        return self.view

    def checkout(self) -> CartView:
        self.view = self.backend.checkout()
        logger.info(f"Checkout done ({self.mode} cart)")
        return self.view

    def refresh(self) -> CartView:
        self.view = self.backend.snapshot()
        return self.view

    def render(self) -> str:
        return render_cart(self.view)

    def badge(self) -> str:
        return badge_text(self.view.item_count)
