"""End-to-end tests for the HTTP API through FastAPI's TestClient."""

import pytest
from fastapi.testclient import TestClient

from retailops.infrastructure.bootstrap import Container, build_container
from retailops.infrastructure.config import Settings
from retailops.infrastructure.http.app import create_application
from tests.builders import make_repos


def _setup(seeded=False, debug=False, raise_server_exceptions=True):
    if seeded:
        container = build_container(seed=True)
    else:
        product_repo, order_repo = make_repos()
        container = Container(product_repo=product_repo, order_repo=order_repo)
    settings = Settings(SEED_SAMPLE_DATA=seeded, DEBUG=debug, ENVIRONMENT="test")
    app = create_application(container=container, settings=settings)
    client = TestClient(app, raise_server_exceptions=raise_server_exceptions)
    return client, container


def _order_body(*items, name="John Doe", email="john@example.com"):
    return {
        "customerName": name,
        "customerEmail": email,
        "items": [{"productId": pid, "quantity": qty} for pid, qty in items],
    }


class TestMetaEndpoints:

    def test_health(self):
        client, _ = _setup()
        resp = client.get("/health")
        assert resp.status_code == 200
        body = resp.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["uptime"] >= 0
        assert "timestamp" in body

    @pytest.mark.parametrize("path", ["/", "/api/info"])
    def test_api_directory(self, path):
        client, _ = _setup()
        body = client.get(path).json()
        assert body["version"] == "1.0.0"
        assert body["endpoints"]["products"] == "/api/products"

    def test_process_time_header(self):
        client, _ = _setup()
        assert "x-process-time" in client.get("/health").headers

    def test_unknown_route(self):
        client, _ = _setup()
        resp = client.get("/api/nowhere")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Route not found"}

    def test_wrong_method_is_route_not_found(self):
        client, _ = _setup()
        resp = client.delete("/api/orders")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Route not found"}


class TestProductEndpoints:

    def test_seeded_catalog(self):
        client, _ = _setup(seeded=True)
        body = client.get("/api/products").json()
        assert body["success"] is True
        assert body["count"] == 5
        assert [p["name"] for p in body["data"]][:2] == ["Laptop", "Wireless Mouse"]

    def test_list_filters(self):
        client, _ = _setup()
        body = client.get(
            "/api/products", params={"category": "Furniture", "maxPrice": "100"}
        ).json()
        assert [p["id"] for p in body["data"]] == ["p-lamp"]
        assert body["count"] == 1

    def test_get_product_shape(self):
        client, _ = _setup()
        data = client.get("/api/products/p-laptop").json()["data"]
        assert data["price"] == 1299.99
        assert data["stock"] == 50
        assert {"createdAt", "updatedAt", "description", "category"} <= data.keys()

    def test_get_missing_product(self):
        client, _ = _setup()
        resp = client.get("/api/products/missing")
        assert resp.status_code == 404
        assert resp.json() == {"success": False, "error": "Product not found"}

    def test_create_product(self):
        client, container = _setup()
        resp = client.post(
            "/api/products",
            json={"name": "Test Product", "price": 49.99, "stock": 100, "category": "Test"},
        )
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["name"] == "Test Product"
        assert data["description"] == ""
        assert container.product_repo.get_by_id(data["id"]) is not None

    def test_create_product_reports_every_problem(self):
        client, _ = _setup()
        resp = client.post("/api/products", json={"name": "", "price": -10, "stock": 100})
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["details"] == ["Product name is required", "Price must be a positive number"]

    @pytest.mark.parametrize("body,error", [
        ({"name": "Pen", "price": "10", "stock": 5}, "Price must be a positive number"),
        ({"name": "Pen", "price": 10, "stock": "5"}, "Stock must be a non-negative integer"),
        ({"name": "Pen", "price": 10, "stock": True}, "Stock must be a non-negative integer"),
        ({"name": "Pen", "price": True, "stock": 5}, "Price must be a positive number"),
        ({"name": 42, "price": 10, "stock": 5}, "Product name is required"),
    ])
    def test_create_product_rejects_wrong_json_types(self, body, error):
        client, container = _setup()
        resp = client.post("/api/products", json=body)
        assert resp.status_code == 400
        assert resp.json()["details"] == [error]
        assert len(container.product_repo.list_all()) == 4

    def test_type_and_value_errors_reported_together(self):
        client, _ = _setup()
        resp = client.post("/api/products", json={"name": "", "price": "abc", "stock": -1})
        assert resp.status_code == 400
        assert resp.json()["details"] == [
            "Product name is required",
            "Price must be a positive number",
            "Stock must be a non-negative integer",
        ]

    def test_update_product_rejects_string_price(self):
        client, container = _setup()
        resp = client.put("/api/products/p-mouse", json={"price": "24.5", "stock": False})
        assert resp.status_code == 400
        assert resp.json()["details"] == [
            "Price must be a positive number",
            "Stock must be a non-negative integer",
        ]
        assert container.product_repo.get_by_id("p-mouse").stock == 200

    def test_update_product_partially(self):
        client, _ = _setup()
        resp = client.put("/api/products/p-mouse", json={"price": 24.5})
        data = resp.json()["data"]
        assert data["price"] == 24.5
        assert data["name"] == "Wireless Mouse"

    def test_adjust_stock(self):
        client, _ = _setup()
        resp = client.patch("/api/products/p-lamp/stock", json={"delta": 7})
        assert resp.json()["data"]["stock"] == 10

    def test_adjust_stock_overdraw(self):
        client, _ = _setup()
        resp = client.patch("/api/products/p-lamp/stock", json={"delta": -5})
        assert resp.status_code == 400
        assert "Insufficient stock" in resp.json()["error"]

    def test_malformed_body_is_400(self):
        client, _ = _setup()
        resp = client.patch("/api/products/p-lamp/stock", json={"delta": "lots"})
        assert resp.status_code == 400
        body = resp.json()
        assert body["success"] is False
        assert body["details"]

    def test_delete_product(self):
        client, _ = _setup()
        resp = client.delete("/api/products/p-chair")
        assert resp.json() == {"success": True, "message": "Product deleted successfully"}
        assert client.get("/api/products/p-chair").status_code == 404


class TestOrderEndpoints:

    def test_create_order(self):
        client, container = _setup()
        resp = client.post("/api/orders", json=_order_body(("p-laptop", 2)))
        assert resp.status_code == 201
        data = resp.json()["data"]
        assert data["totalAmount"] == 2599.98
        assert data["status"] == "pending"
        assert data["orderNumber"].startswith("ORD-")
        assert data["items"] == [
            {"productId": "p-laptop", "productName": "Laptop", "quantity": 2, "price": 1299.99}
        ]
        assert container.product_repo.get_by_id("p-laptop").stock == 48

    def test_create_order_validation(self):
        client, _ = _setup()
        resp = client.post(
            "/api/orders", json={"customerName": "", "customerEmail": "invalid-email", "items": []}
        )
        assert resp.status_code == 400
        assert resp.json()["details"] == [
            "Customer name is required",
            "Valid customer email is required",
            "Order must contain at least one item",
        ]

    def test_create_order_item_types_not_coerced(self):
        client, container = _setup()
        resp = client.post(
            "/api/orders",
            json=_order_body(("p-laptop", "2"), (7, 1), ("p-mouse", True), email=None),
        )
        assert resp.status_code == 400
        assert resp.json()["details"] == [
            "Valid customer email is required",
            "Item 1: quantity must be a positive integer",
            "Item 2: productId is required",
            "Item 3: quantity must be a positive integer",
        ]
        assert container.product_repo.get_by_id("p-laptop").stock == 50

    def test_create_order_unknown_product(self):
        client, _ = _setup()
        resp = client.post("/api/orders", json=_order_body(("ghost", 1)))
        assert resp.status_code == 404
        assert resp.json()["error"] == "Product ghost not found"

    def test_create_order_insufficient_stock_changes_nothing(self):
        client, container = _setup()
        resp = client.post("/api/orders", json=_order_body(("p-laptop", 1), ("p-lamp", 10)))
        assert resp.status_code == 400
        assert resp.json()["error"] == "Insufficient stock for product Desk Lamp"
        assert container.product_repo.get_by_id("p-laptop").stock == 50
        assert client.get("/api/orders").json()["count"] == 0

    def test_list_and_filter_orders(self):
        client, _ = _setup()
        client.post("/api/orders", json=_order_body(("p-mouse", 1), email="JOHN@example.com"))
        client.post("/api/orders", json=_order_body(("p-mouse", 1), email="jane@example.com"))

        body = client.get("/api/orders", params={"customerEmail": "john"}).json()
        assert body["count"] == 1
        assert body["data"][0]["customerEmail"] == "JOHN@example.com"

    def test_get_order(self):
        client, _ = _setup()
        order_id = client.post("/api/orders", json=_order_body(("p-mouse", 1))).json()["data"]["id"]
        assert client.get(f"/api/orders/{order_id}").json()["data"]["id"] == order_id
        assert client.get("/api/orders/missing").status_code == 404

    def test_status_update(self):
        client, _ = _setup()
        order_id = client.post("/api/orders", json=_order_body(("p-mouse", 1))).json()["data"]["id"]

        resp = client.patch(f"/api/orders/{order_id}/status", json={"status": "processing"})
        assert resp.json()["data"]["status"] == "processing"

        bad = client.patch(f"/api/orders/{order_id}/status", json={"status": "shipped"})
        assert bad.status_code == 400
        assert bad.json()["error"] == "Invalid order status"

        missing = client.patch(f"/api/orders/{order_id}/status", json={})
        assert missing.status_code == 400
        assert missing.json()["error"] == "Status is required"

    def test_cancel_restores_stock(self):
        client, container = _setup()
        order_id = client.post("/api/orders", json=_order_body(("p-laptop", 2))).json()["data"]["id"]

        resp = client.post(f"/api/orders/{order_id}/cancel")
        assert resp.json()["data"]["status"] == "cancelled"
        assert container.product_repo.get_by_id("p-laptop").stock == 50

        again = client.post(f"/api/orders/{order_id}/cancel")
        assert again.status_code == 400
        assert container.product_repo.get_by_id("p-laptop").stock == 50

    def test_cancel_completed_order(self):
        client, _ = _setup()
        order_id = client.post("/api/orders", json=_order_body(("p-laptop", 1))).json()["data"]["id"]
        client.patch(f"/api/orders/{order_id}/status", json={"status": "completed"})

        resp = client.post(f"/api/orders/{order_id}/cancel")
        assert resp.status_code == 400
        assert resp.json()["error"] == "Cannot cancel completed order"

    def test_stats(self):
        client, _ = _setup()
        assert client.get("/api/orders/stats").json()["data"] == {
            "totalOrders": 0,
            "totalRevenue": 0.0,
            "ordersByStatus": {"pending": 0, "processing": 0, "completed": 0, "cancelled": 0},
        }

        client.post("/api/orders", json=_order_body(("p-mouse", 2)))
        data = client.get("/api/orders/stats").json()["data"]
        assert data["totalOrders"] == 1
        assert data["totalRevenue"] == 59.98
        assert data["ordersByStatus"]["pending"] == 1


class _Exploding:
    def handle(self, *args, **kwargs):
        raise RuntimeError("database on fire")


class TestUnexpectedErrors:

    def test_internal_error_is_generic(self):
        client, container = _setup(raise_server_exceptions=False)
        container.order_stats = _Exploding()

        resp = client.get("/api/orders/stats")

        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Internal server error"}

    def test_debug_includes_message(self):
        client, container = _setup(debug=True, raise_server_exceptions=False)
        container.order_stats = _Exploding()

        body = client.get("/api/orders/stats").json()

        assert body["error"] == "Internal server error"
        assert body["message"] == "database on fire"
