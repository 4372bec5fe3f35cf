import os

# keep password hashing cheap in tests, must be set before storefront is imported
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")

import pytest
from fastapi.testclient import TestClient

from storefront.data.database import Database
from storefront.data.models.product import ProductModel
from storefront.main import create_app


@pytest.fixture
def app(tmp_path):
    """App with the default seeded catalog on a throwaway SQLite file."""
    return create_app(database_url=f"sqlite:///{tmp_path / 'storefront.db'}", seed=True)


@pytest.fixture
def test_client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def other_client(app, test_client):
    """
    A second browser sharing the running app (and database) of test_client
    but with its own cookie jar.
    """
    return TestClient(app)


@pytest.fixture
def priced_app(tmp_path):
    return create_app(database_url=f"sqlite:///{tmp_path / 'priced.db'}", seed=False)


@pytest.fixture
def priced_client(priced_app):
    """
    Empty catalog plus two products with round prices:
    id 1 -> 100 cents, id 2 -> 250 cents.
    """
    with TestClient(priced_app) as client:
        with priced_app.state.database.session_scope() as db:
            db.add_all(
                [
                    ProductModel(id=1, slug="product-a", name="Product A", price_cents=100, category="energy"),
                    ProductModel(id=2, slug="product-b", name="Product B", price_cents=250, category="fresh"),
                ]
            )
        yield client


@pytest.fixture
def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'unit.db'}").open(seed=False)
    yield database
    database.close()


@pytest.fixture
def db_session(database):
    session = database.SessionLocal()
    yield session
    session.close()


@pytest.fixture
def products(db_session):
    a = ProductModel(slug="product-a", name="Product A", price_cents=100, category="energy")
    b = ProductModel(slug="product-b", name="Product B", price_cents=250, category="fresh")
    db_session.add_all([a, b])
    db_session.commit()
    return a, b
