# storefront/domain/schemas.py
from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

# largest value an INTEGER column holds
MAX_ID = 2**63 - 1
MAX_QUANTITY = 10_000


class ProductSummary(BaseModel):
    """Product row as shown in the catalog listing."""

    id: int
    slug: str
    name: str
    price_cents: int
    image: str | None = None
    hover_image: str | None = None
    category: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ProductOut(ProductSummary):
    """Full product row."""

    description: str | None = None
    features: List[str] = []
    created_at: datetime | None = None


class AddItemIn(BaseModel):
    """Body of POST /api/cart."""

    product_id: int = Field(..., alias="productId", gt=0, le=MAX_ID)
    quantity: int = Field(1, ge=1, le=MAX_QUANTITY)

    model_config = ConfigDict(populate_by_name=True)


class UpdateItemIn(BaseModel):
    """Body of PATCH /api/cart. quantity 0 removes the line."""

    item_id: int = Field(..., alias="itemId", gt=0, le=MAX_ID)
    quantity: int = Field(..., ge=0, le=MAX_QUANTITY)

    model_config = ConfigDict(populate_by_name=True)


class CartItemOut(BaseModel):
    id: int
    product_id: int
    slug: str | None = None
    name: str
    price_cents: int
    image: str | None = None
    hover_image: str | None = None
    quantity: int


class CartOut(BaseModel):
    cart_id: int
    items: List[CartItemOut]
    total_cents: int


class CheckoutOut(CartOut):
    ok: bool = True


class Credentials(BaseModel):
    """Register / login body. Emptiness is checked by the auth service."""

    email: str = ""
    password: str = ""


class UserRead(BaseModel):
    id: int
    email: str

    model_config = ConfigDict(from_attributes=True)


class OkOut(BaseModel):
    ok: bool = True


class HealthOut(BaseModel):
    status: str
    database: str
