# storefront/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Path
from sqlalchemy.orm import Session

from storefront.api.deps import get_db, resolve_cart
from storefront.data.models.cart import CartModel
from storefront.domain.errors import NotFoundError, ValidationError
from storefront.domain.schemas import MAX_ID, AddItemIn, CartOut, CheckoutOut, UpdateItemIn
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/api", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("/cart", response_model=CartOut)
def get_cart(
    cart: CartModel = Depends(resolve_cart),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(cart.id)


@router.post("/cart", response_model=CartOut)
def add_item(
    payload: AddItemIn,
    cart: CartModel = Depends(resolve_cart),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.add_item(cart.id, payload.product_id, payload.quantity)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.patch("/cart", response_model=CartOut)
def update_item(
    payload: UpdateItemIn,
    cart: CartModel = Depends(resolve_cart),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_item(cart.id, payload.item_id, payload.quantity)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/cart/{item_id}", response_model=CartOut)
def remove_item(
    item_id: int = Path(..., le=MAX_ID),
    cart: CartModel = Depends(resolve_cart),
    db: Session = Depends(get_db),
):
    return get_service(db).remove_item(cart.id, item_id)


@router.post("/checkout", response_model=CheckoutOut)
def checkout(
    cart: CartModel = Depends(resolve_cart),
    db: Session = Depends(get_db),
):
    return get_service(db).checkout(cart.id)
