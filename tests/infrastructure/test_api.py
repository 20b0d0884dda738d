"""HTTP API tests using FastAPI's TestClient with in-memory fakes."""

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from myshop.domain.exceptions import ConcurrencyError
from myshop.domain.model.product import Product
from myshop.domain.model.value_objects import Money
from myshop.infrastructure.api import dependencies
from myshop.infrastructure.api.app import create_app
from myshop.infrastructure.settings import get_settings
from tests.fakes import (
    FakeEmailSender,
    FakeOrderRepository,
    FakePaymentGateway,
    FakeProductRepository,
)


@pytest.fixture()
def world(monkeypatch):
    monkeypatch.setenv("MYSHOP_ENVIRONMENT", "testing")
    get_settings.cache_clear()

    products = FakeProductRepository([
        Product(id=1, name="Notebook", price=Money.of("100.00"), stock_quantity=10),
        Product(id=2, name="Mouse", price=Money.of("50.00"), stock_quantity=1),
    ])
    orders = FakeOrderRepository()
    payments = FakePaymentGateway()
    emails = FakeEmailSender()

    app = create_app()
    app.dependency_overrides[dependencies.get_product_repository] = lambda: products
    app.dependency_overrides[dependencies.get_order_repository] = lambda: orders
    app.dependency_overrides[dependencies.get_payment_gateway] = lambda: payments
    app.dependency_overrides[dependencies.get_email_sender] = lambda: emails
    app.dependency_overrides[dependencies.get_currency] = lambda: "BRL"

    yield TestClient(app), products, orders, payments
    get_settings.cache_clear()


def _order_body(**overrides):
    body = {
        "customer_email": "ana@example.com",
        "shipping_address": {
            "street": "Rua A, 1",
            "city": "São Paulo",
            "state": "SP",
            "zip_code": "01000-000",
        },
        "items": [{"product_id": 1, "quantity": 2}],
    }
    body.update(overrides)
    return body


class TestProductRoutes:

    def test_list_products(self, world):
        client, *_ = world
        response = client.get("/api/products")
        assert response.status_code == 200
        assert [p["name"] for p in response.json()] == ["Notebook", "Mouse"]

    def test_get_missing_product_is_404(self, world):
        client, *_ = world
        response = client.get("/api/products/99")
        assert response.status_code == 404
        assert response.json() == {"error": "Product with ID 99 not found"}

    def test_create_product(self, world):
        client, products, *_ = world
        response = client.post(
            "/api/products",
            json={"name": "Monitor", "price": "600.00", "stock_quantity": 2},
        )
        assert response.status_code == 201
        assert response.json()["id"] == 3
        assert products.get_by_id(3).price == Money.of("600.00")

    def test_create_product_with_bad_price_is_422(self, world):
        client, *_ = world
        response = client.post(
            "/api/products",
            json={"name": "Monitor", "price": "0", "stock_quantity": 2},
        )
        assert response.status_code == 422

    def test_update_stock(self, world):
        client, products, *_ = world
        response = client.put("/api/products/1/stock", json={"stock_quantity": 4})
        assert response.status_code == 204
        assert products.get_by_id(1).stock_quantity == 4

    def test_concurrent_modification_is_409(self, world, monkeypatch):
        client, products, *_ = world

        def conflict(product):
            raise ConcurrencyError("Product 'Notebook' was modified concurrently")

        monkeypatch.setattr(products, "update", conflict)
        response = client.put("/api/products/1/stock", json={"stock_quantity": 4})
        assert response.status_code == 409


class TestOrderRoutes:

    def test_create_order(self, world):
        client, products, orders, payments = world
        response = client.post("/api/orders", json=_order_body())

        assert response.status_code == 201
        data = response.json()
        assert data["status"] == "CONFIRMED"
        assert Decimal(data["subtotal"]) == Decimal("200.00")
        assert Decimal(data["shipping_cost"]) == Decimal("0")
        assert Decimal(data["total"]) == Decimal("200.00")
        assert data["payment_reference"] == "TXN-TEST-0001"
        assert products.get_by_id(1).stock_quantity == 8
        assert orders.get_by_id(data["id"]) is not None

    def test_insufficient_stock_is_400(self, world):
        client, products, orders, payments = world
        body = _order_body(items=[
            {"product_id": 1, "quantity": 1},
            {"product_id": 2, "quantity": 5},
        ])
        response = client.post("/api/orders", json=body)

        assert response.status_code == 400
        assert "Insufficient stock for product 'Mouse'" in response.json()["error"]
        assert products.get_by_id(1).stock_quantity == 10
        assert orders.list_all() == []
        assert payments.authorizations == []

    def test_zero_quantity_is_422(self, world):
        client, *_ = world
        body = _order_body(items=[{"product_id": 1, "quantity": 0}])
        assert client.post("/api/orders", json=body).status_code == 422

    def test_get_and_cancel_order(self, world):
        client, products, _, payments = world
        order_id = client.post("/api/orders", json=_order_body()).json()["id"]

        assert client.get(f"/api/orders/{order_id}").json()["id"] == order_id
        assert client.post(f"/api/orders/{order_id}/cancel").status_code == 204
        assert client.get(f"/api/orders/{order_id}").json()["status"] == "CANCELLED"
        assert products.get_by_id(1).stock_quantity == 10
        assert payments.refunds == ["TXN-TEST-0001"]

    def test_cancel_twice_is_400(self, world):
        client, *_ = world
        order_id = client.post("/api/orders", json=_order_body()).json()["id"]
        client.post(f"/api/orders/{order_id}/cancel")

        response = client.post(f"/api/orders/{order_id}/cancel")
        assert response.status_code == 400
        assert response.json() == {"error": "Order is already cancelled"}

    def test_get_missing_order_is_404(self, world):
        client, *_ = world
        assert client.get("/api/orders/5").status_code == 404
