# storefront/api/routers/products.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from storefront.api.deps import get_db
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import ProductOut, ProductSummary
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=List[ProductSummary])
def list_products(
    category: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return ProductService(db).list_products(category)


@router.get("/{id_or_slug}", response_model=ProductOut)
def get_product(id_or_slug: str, db: Session = Depends(get_db)):
    try:
        return ProductService(db).get_product(id_or_slug)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
