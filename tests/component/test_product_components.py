"""
Component tests for the product catalog API over the seeded catalog.
"""
from fastapi.testclient import TestClient

from storefront.data.seed import PRODUCTS


class TestListProducts:
    def test_lists_seeded_catalog_ordered_by_id(self, test_client: TestClient):
        # Act
        response = test_client.get("/api/products")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert len(data) == len(PRODUCTS)
        ids = [p["id"] for p in data]
        assert ids == sorted(ids)
        assert set(data[0].keys()) == {
            "id", "slug", "name", "price_cents", "image", "hover_image", "category",
        }

    def test_filter_by_category(self, test_client: TestClient):
        # Act
        data = test_client.get("/api/products", params={"category": "energy"}).json()

        # Assert
        assert {p["slug"] for p in data} == {"cans-mango", "cans-citrus", "cans-berry"}

    def test_category_all_means_no_filter(self, test_client: TestClient):
        everything = test_client.get("/api/products").json()
        assert test_client.get("/api/products", params={"category": "all"}).json() == everything

    def test_unknown_category_is_empty(self, test_client: TestClient):
        assert test_client.get("/api/products", params={"category": "nope"}).json() == []


class TestProductDetail:
    """
    Validates:
    - numeric identifiers resolve by id, anything else by slug
    - detail carries description and features
    - missing products give 404
    """

    def test_get_by_slug(self, test_client: TestClient):
        # Act
        response = test_client.get("/api/products/voda")

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Voda"
        assert data["price_cents"] == 1990
        assert data["description"]
        assert "Natural" in data["features"]

    def test_get_by_id_matches_slug(self, test_client: TestClient):
        # Arrange
        by_slug = test_client.get("/api/products/cans-berry").json()

        # Act
        by_id = test_client.get(f"/api/products/{by_slug['id']}").json()

        # Assert
        assert by_id == by_slug

    def test_missing_product_returns_404(self, test_client: TestClient):
        assert test_client.get("/api/products/999999").status_code == 404
        response = test_client.get("/api/products/does-not-exist")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    def test_out_of_range_id_returns_404(self, test_client: TestClient):
        response = test_client.get(f"/api/products/{2**70}")
        assert response.status_code == 404
        assert response.json()["detail"] == "Product not found"

    def test_non_ascii_digits_are_a_slug(self, test_client: TestClient):
        # Arabic-Indic three, not product id 3
        assert test_client.get("/api/products/٣").status_code == 404


class TestHealth:
    def test_health_reports_database(self, test_client: TestClient):
        response = test_client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "database": "ok"}
