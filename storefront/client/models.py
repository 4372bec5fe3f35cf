# storefront/client/models.py
from typing import List

from pydantic import BaseModel


class CartLine(BaseModel):
    """One product in the cart as the client sees it."""

    product_id: int
    name: str
    price_cents: int
    quantity: int
    slug: str | None = None
    image: str | None = None
    # only known for server carts
    item_id: int | None = None

    @property
    def line_total_cents(self) -> int:
        return self.price_cents * self.quantity


class CartView(BaseModel):
    lines: List[CartLine] = []

    @property
    def total_cents(self) -> int:
        return sum(line.line_total_cents for line in self.lines)

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def find(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    @classmethod
    def from_api(cls, payload: dict) -> "CartView":
        return cls(
            lines=[
                CartLine(
                    product_id=item["product_id"],
                    name=item["name"],
                    price_cents=item["price_cents"],
                    quantity=item["quantity"],
                    slug=item.get("slug"),
                    image=item.get("image"),
                    item_id=item["id"],
                )
                for item in payload.get("items", [])
            ]
        )
