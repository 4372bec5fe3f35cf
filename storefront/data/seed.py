# storefront/data/seed.py
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel

PRODUCTS = [
    {
        "slug": "cans-mango",
        "name": "CANS Mango — 24 × 330ml",
        "price_cents": 59900,
        "image": "/Products/test.png",
        "hover_image": "/Products/test2.jpg",
        "description": "Refreshing mango flavour. Natural caffeine from guarana, B vitamins, no added sugar.",
        "features": ["Natural caffeine", "Sugar free", "Vegan", "Recyclable can"],
        "category": "energy",
    },
    {
        "slug": "cans-citrus",
        "name": "CANS Citrus — 24 × 330ml",
        "price_cents": 59900,
        "image": "/Products/test.png",
        "hover_image": "/Products/test2.jpg",
        "description": "Energising citrus flavour. Natural caffeine, vitamins, no sugar.",
        "features": ["Citrus", "Sugar free", "Vegan", "Recyclable can"],
        "category": "energy",
    },
    {
        "slug": "cans-berry",
        "name": "CANS Berry — 24 × 330ml",
        "price_cents": 59900,
        "image": "/Products/test.png",
        "hover_image": "/Products/test2.jpg",
        "description": "Forest berry blend. Natural caffeine, vitamins, no sugar.",
        "features": ["Forest fruit", "Sugar free", "Vegan", "Recyclable can"],
        "category": "energy",
    },
    {
        "slug": "test-bottle",
        "name": "Test Bottle",
        "price_cents": 2990,
        "image": "/Products/test.png",
        "hover_image": "/Products/test2.jpg",
        "description": "Everyday water bottle.",
        "features": ["BPA-free", "0.75l", "Light and durable"],
        "category": "accessories",
    },
    {
        "slug": "voda",
        "name": "Voda",
        "price_cents": 1990,
        "image": "/Products/voda.png",
        "hover_image": "/Products/test2.jpg",
        "description": "Still water for hydration.",
        "features": ["Natural", "Sugar free", "Recyclable packaging"],
        "category": "hydration",
    },
    {
        "slug": "drive-starter-pack",
        "name": "DRIVE Starter Pack",
        "price_cents": 99900,
        "image": "/Products/test.png",
        "hover_image": "/Products/test2.jpg",
        "description": "Starter bundle for a first order.",
        "features": ["Starter pack", "Limited edition"],
        "category": "bundles",
    },
]


def seed_products(db: Session, products: list[dict] | None = None) -> tuple[int, int]:
    """
    Insert catalog products whose slug is missing. Existing rows are left
    untouched. Returns (inserted, total in catalog). The caller commits.
    """
    products = PRODUCTS if products is None else products
    slugs = [p["slug"] for p in products]

    existing = set(
        db.execute(select(ProductModel.slug).where(ProductModel.slug.in_(slugs))).scalars()
    )
    missing = [p for p in products if p["slug"] not in existing]

    for row in missing:
        db.add(ProductModel(**row))
    db.flush()

    count = db.execute(select(func.count()).select_from(ProductModel)).scalar_one()
    return len(missing), count
