"""Tests for product API endpoints."""

from fastapi.testclient import TestClient

UNKNOWN_PRODUCT = "0f8fad5b-d9cb-469f-a165-70867728950e"

PAGINATION_MESSAGE = (
    "Invalid pagination parameters. Page must be between 1 and 10000 "
    "and limit must be between 1 and 50."
)


class TestGetProduct:
    """Tests for GET /product/{product_id}."""

    def test_get_product(self, client: TestClient, api_prefix, products, seller) -> None:
        product = products[2]

        response = client.get(f"{api_prefix}/product/{product['id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        data = body["data"]
        assert data["id"] == product["id"]
        assert data["name"] == "Aviator Jacket"
        assert data["brand_name"] == "Globex"
        assert data["seller_name"] == seller["store_name"]
        assert data["price"] == 49.99
        assert data["size_quantity"] == {"S": 3, "M": 5}
        assert data["color_variants"] is None

    def test_get_product_with_variants(
        self, client: TestClient, api_prefix, store, products, product_factory
    ) -> None:
        navy = product_factory("Aviator Jacket Navy", color="Navy")
        store.products.append(navy)
        products[2]["color_variants"] = [navy["id"]]

        response = client.get(f"{api_prefix}/product/{products[2]['id']}")

        assert response.status_code == 200
        assert response.json()["data"]["color_variants"] == [
            {"id": navy["id"], "color": "Navy", "image": navy["images"][0]}
        ]

    def test_get_product_not_found(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/product/{UNKNOWN_PRODUCT}")

        assert response.status_code == 404
        body = response.json()
        assert body["status"] == "error"
        assert body["message"] == "Product not found"

    def test_get_product_store_failure(self, client: TestClient, api_prefix, store, products) -> None:
        store.failing_operations.add("get_product")

        response = client.get(f"{api_prefix}/product/{products[0]['id']}")

        assert response.status_code == 500
        assert response.json()["message"] == "An error occurred while fetching the product"


class TestListings:
    """Tests for the paginated listing endpoints."""

    def test_latest(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/latest", params={"page": 1, "limit": 2})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "success"
        page = body["data"]
        assert [p["name"] for p in page["data"]] == ["Denim Overshirt", "Aviator Jacket"]
        assert page["total"] == 4
        assert page["page"] == 1
        assert page["limit"] == 2
        assert page["totalPages"] == 2
        assert "created_at" in page["data"][0]
        assert "sales_till_date" not in page["data"][0]

    def test_latest_with_three_active_rows(self, client: TestClient, api_prefix, store) -> None:
        store.products = [p for p in store.products if p["name"] != "Denim Overshirt"]

        response = client.get(f"{api_prefix}/products/latest", params={"page": 1, "limit": 2})

        page = response.json()["data"]
        assert len(page["data"]) == 2
        assert page["total"] == 3
        assert page["totalPages"] == 2

    def test_latest_default_limit(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/latest")

        assert response.json()["data"]["limit"] == 12

    def test_trending(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/trending")

        page = response.json()["data"]
        assert [p["name"] for p in page["data"]] == [
            "Canvas Tote",
            "Court Sneaker",
            "Retired Loafer",
        ]
        assert page["limit"] == 10

    def test_recommended(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/recommended")

        page = response.json()["data"]
        assert [p["name"] for p in page["data"]] == ["Aviator Jacket", "Canvas Tote"]
        assert page["totalPages"] == 1

    def test_top_selling(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/top-selling", params={"limit": 2})

        page = response.json()["data"]
        assert [(p["name"], p["sales_till_date"]) for p in page["data"]] == [
            ("Aviator Jacket", 300),
            ("Court Sneaker", 120),
        ]
        assert page["totalPages"] == 2
        assert "created_at" not in page["data"][0]

    def test_top_selling_by_seller(self, client: TestClient, api_prefix, other_seller) -> None:
        response = client.get(f"{api_prefix}/products/{other_seller['id']}/top-selling")

        page = response.json()["data"]
        assert [p["name"] for p in page["data"]] == ["Canvas Tote"]
        assert page["limit"] == 8

    def test_unknown_seller_is_empty(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/not-a-seller/top-selling")

        assert response.status_code == 200
        assert response.json()["data"] == {
            "data": [],
            "total": 0,
            "page": 1,
            "limit": 8,
            "totalPages": 0,
        }

    def test_listing_store_failure(self, client: TestClient, api_prefix, store) -> None:
        store.failing_operations.add("count_products")

        response = client.get(f"{api_prefix}/products/trending")

        assert response.status_code == 500
        body = response.json()
        assert body["status"] == "error"
        assert body["message"] == "An error occurred while fetching trending products"
        assert "simulated" not in body["message"]


class TestPaginationValidation:
    """Out-of-range pagination is rejected before any query runs."""

    def test_limit_too_large(self, client: TestClient, api_prefix, store) -> None:
        response = client.get(f"{api_prefix}/products/latest", params={"limit": 51})

        assert response.status_code == 400
        assert response.json()["message"] == PAGINATION_MESSAGE
        assert store.calls == []

    def test_limit_at_maximum(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/latest", params={"limit": 50})
        assert response.status_code == 200

    def test_page_zero(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/trending", params={"page": 0})

        assert response.status_code == 400
        assert response.json()["message"] == PAGINATION_MESSAGE

    def test_page_too_large(self, client: TestClient, api_prefix, store) -> None:
        """An unbounded page would become an offset the driver rejects."""
        response = client.get(
            f"{api_prefix}/products/top-selling", params={"page": 10**12}
        )

        assert response.status_code == 400
        assert response.json()["message"] == PAGINATION_MESSAGE
        assert store.calls == []

    def test_page_at_maximum(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/latest", params={"page": 10000})

        assert response.status_code == 200
        assert response.json()["data"]["data"] == []

    def test_non_numeric_limit(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/top-selling", params={"limit": "ten"})

        assert response.status_code == 400
        assert response.json()["status"] == "error"


class TestTopSellingByBrands:
    """Tests for the brands filter of GET /products/top-selling."""

    def test_comma_separated(self, client: TestClient, api_prefix) -> None:
        response = client.get(
            f"{api_prefix}/products/top-selling", params={"brands": "Acme, Umbrella"}
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert list(data) == ["Acme", "Umbrella"]
        assert [p["name"] for p in data["Acme"]["data"]] == ["Court Sneaker", "Canvas Tote"]
        assert data["Umbrella"] == {
            "data": [],
            "total": 0,
            "page": 1,
            "limit": 10,
            "totalPages": 0,
        }

    def test_repeated_parameter(self, client: TestClient, api_prefix, globex) -> None:
        response = client.get(
            f"{api_prefix}/products/top-selling",
            params=[("brands", "Acme"), ("brands", globex["id"])],
        )

        data = response.json()["data"]
        assert list(data) == ["Acme", globex["id"]]
        assert [p["name"] for p in data[globex["id"]]["data"]] == ["Aviator Jacket"]

    def test_blank_brands_is_overall(self, client: TestClient, api_prefix) -> None:
        response = client.get(f"{api_prefix}/products/top-selling", params={"brands": " , "})

        page = response.json()["data"]
        assert page["total"] == 4
        assert "totalPages" in page

    def test_failing_brand_query_fails_request(
        self, client: TestClient, api_prefix, store, acme
    ) -> None:
        store.failing_brand_ids.add(acme["id"])

        response = client.get(
            f"{api_prefix}/products/top-selling", params={"brands": "Acme,Initech"}
        )

        assert response.status_code == 500
        body = response.json()
        assert body["message"] == "An error occurred while fetching top selling products"
        assert "simulated" not in body["message"]

    def test_too_many_brands(self, client: TestClient, api_prefix, store) -> None:
        brands = ",".join(f"Brand {i}" for i in range(11))

        response = client.get(f"{api_prefix}/products/top-selling", params={"brands": brands})

        assert response.status_code == 400
        assert response.json()["message"] == (
            "Too many brands. At most 10 brands can be requested."
        )
        assert store.calls == []

    def test_brand_cap_counts_distinct_tokens(self, client: TestClient, api_prefix) -> None:
        brands = ",".join(["Acme"] * 11)

        response = client.get(f"{api_prefix}/products/top-selling", params={"brands": brands})

        assert response.status_code == 200
        assert list(response.json()["data"]) == ["Acme"]
