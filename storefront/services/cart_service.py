# storefront/services/cart_service.py
from typing import Any, Dict

from sqlalchemy.orm import Session

from storefront.domain.errors import NotFoundError, ValidationError
from storefront.domain.schemas import MAX_ID, MAX_QUANTITY
from storefront.repos.cart_repo import CartRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases for the cart domain.
    Commands (add, update, remove, checkout) change state and return a fresh
    snapshot, the query (get) only reads. The cart itself is resolved by the
    caller (SessionResolver), so every operation is scoped to one cart id.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    # query
    def get_cart(self, cart_id: int) -> Dict[str, Any]:
        lines = self.repo.get_cart_lines(cart_id)

        items = [
            {
                "id": line.id,
                "product_id": line.product_id,
                "slug": line.slug,
                "name": line.name,
                "price_cents": line.price_cents,
                "image": line.image,
                "hover_image": line.hover_image,
                "quantity": line.quantity,
            }
            for line in lines
        ]
        # never stored, always derived from the current lines
        total = sum(i["price_cents"] * i["quantity"] for i in items)

        return {
            "cart_id": cart_id,
            "items": items,
            "total_cents": total,
        }

    # commands
    def add_item(self, cart_id: int, product_id: int, quantity: int = 1) -> Dict[str, Any]:
        """
        Use case: add a product. An existing line for the same product is
        incremented by quantity instead of getting a second row.
        """
        if not product_id or product_id <= 0:
            raise ValidationError("productId is required")
        if quantity is None or quantity < 1:
            raise ValidationError("quantity must be at least 1")
        if quantity > MAX_QUANTITY:
            raise ValidationError(f"quantity must not exceed {MAX_QUANTITY}")

        if product_id > MAX_ID or not self.products.get_product(product_id):
            raise NotFoundError("Product not found")

        self.repo.add_or_increment_item(cart_id, product_id, quantity)
        self.repo.commit()

        logger.info(f"Added product {product_id} x{quantity} to cart {cart_id}")

        return self.get_cart(cart_id)

    def update_item(self, cart_id: int, item_id: int, quantity: int) -> Dict[str, Any]:
        """
        Use case: set the absolute quantity of a line. 0 removes it.
        Lines of other carts are never matched.
        """
        if not item_id or item_id <= 0:
            raise ValidationError("itemId is required")
        if quantity is None or quantity < 0:
            raise ValidationError("quantity must not be negative")
        if quantity > MAX_QUANTITY:
            raise ValidationError(f"quantity must not exceed {MAX_QUANTITY}")

        if item_id > MAX_ID:
            rowcount = 0
        elif quantity == 0:
            rowcount = self.repo.delete_item(cart_id, item_id)
        else:
            rowcount = self.repo.set_item_quantity(cart_id, item_id, quantity)
        self.repo.commit()

        if rowcount == 0:
            logger.info(f"Item {item_id} not in cart {cart_id}, nothing updated")
        else:
            logger.info(f"Item {item_id} in cart {cart_id} set to {quantity}")

        return self.get_cart(cart_id)

    def remove_item(self, cart_id: int, item_id: int) -> Dict[str, Any]:
        """Use case: remove a line. Removing an absent line is a no-op."""
        if item_id > MAX_ID:
            return self.get_cart(cart_id)

        rowcount = self.repo.delete_item(cart_id, item_id)
        self.repo.commit()

        if rowcount:
            logger.info(f"Item {item_id} removed from cart {cart_id}")

        return self.get_cart(cart_id)

    def checkout(self, cart_id: int) -> Dict[str, Any]:
        """
        Use case: place the order. No order record is kept, the cart is
        emptied. Checking out an empty cart succeeds as well.
        """
        removed = self.repo.clear_items(cart_id)
        self.repo.commit()

        logger.info(f"Checkout of cart {cart_id}, {removed} line(s) cleared")

        return {"ok": True, **self.get_cart(cart_id)}
