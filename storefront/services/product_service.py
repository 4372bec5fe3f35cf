# storefront/services/product_service.py
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import MAX_ID
from storefront.repos.product_repo import ProductRepo

ALL_CATEGORIES = "all"


class ProductService:
    """Read-only catalog."""

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    def list_products(self, category: str | None = None) -> list[ProductModel]:
        if category == ALL_CATEGORIES:
            category = None
        return self.repo.list_products(category)

    def get_product(self, id_or_slug: str) -> ProductModel:
        # ASCII digits are ids, everything else is a slug
        if id_or_slug.isascii() and id_or_slug.isdigit():
            product_id = int(id_or_slug)
            product = self.repo.get_product(product_id) if product_id <= MAX_ID else None
        else:
            product = self.repo.get_product_by_slug(id_or_slug)

        if not product:
            raise NotFoundError("Product not found")
        return product
