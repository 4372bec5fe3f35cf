# storefront/repos/cart_repo.py
from sqlalchemy import delete, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from storefront.data.models.cart import CartModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.product import ProductModel
from storefront.utils.time import utc_now


class CartRepo:
    def __init__(self, db: Session):
        self.db = db

    def _insert(self, model):
        # both dialects expose on_conflict_do_update() and .excluded
        if self.db.get_bind().dialect.name == "postgresql":
            return pg_insert(model)
        return sqlite_insert(model)

    def upsert_cart(self, session_id: str) -> CartModel:
        """INSERT the cart for session_id, or touch updated_at if it already exists."""
        stmt = self._insert(CartModel).values(session_id=session_id)
        stmt = stmt.on_conflict_do_update(
            index_elements=[CartModel.session_id],
            set_={"updated_at": utc_now()},
        )
        self.db.execute(stmt)

        return self.db.execute(
            select(CartModel)
            .where(CartModel.session_id == session_id)
            .execution_options(populate_existing=True)
        ).scalar_one()

    def get_cart_lines(self, cart_id: int):
        """Cart items joined with their product, oldest line first."""
        stmt = (
            select(
                CartItemModel.id,
                CartItemModel.quantity,
                ProductModel.id.label("product_id"),
                ProductModel.slug,
                ProductModel.name,
                ProductModel.price_cents,
                ProductModel.image,
                ProductModel.hover_image,
            )
            .join(ProductModel, ProductModel.id == CartItemModel.product_id)
            .where(CartItemModel.cart_id == cart_id)
            .order_by(CartItemModel.id)
        )
        return self.db.execute(stmt).all()

    def add_or_increment_item(self, cart_id: int, product_id: int, quantity: int) -> None:
        """
        One statement instead of find-then-update, so two concurrent adds of
        the same product cannot produce two rows (u_cart_product).
        """
        stmt = self._insert(CartItemModel).values(
            cart_id=cart_id,
            product_id=product_id,
            quantity=quantity,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[CartItemModel.cart_id, CartItemModel.product_id],
            set_={"quantity": CartItemModel.quantity + stmt.excluded.quantity},
        )
        self.db.execute(stmt)

    def set_item_quantity(self, cart_id: int, item_id: int, quantity: int) -> int:
        result = self.db.execute(
            update(CartItemModel)
            .where(CartItemModel.id == item_id, CartItemModel.cart_id == cart_id)
            .values(quantity=quantity)
        )
        return result.rowcount

    def delete_item(self, cart_id: int, item_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(
                CartItemModel.id == item_id,
                CartItemModel.cart_id == cart_id,
            )
        )
        return result.rowcount

    def clear_items(self, cart_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.cart_id == cart_id)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
