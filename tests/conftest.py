from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.core.config import settings
from storefront.database import cart_db, order_db, product_db, ProductDatabase
from storefront.main import app
from storefront.models.product import (
    PricingTier,
    Product,
    ProductColor,
    ProductVariant,
)


ADMIN_PASSWORD = "s3cret-admin"


@pytest.fixture(autouse=True)
def reset_databases(monkeypatch):
    monkeypatch.setattr(product_db, "products", ProductDatabase().products)
    monkeypatch.setattr(cart_db, "carts", {})
    monkeypatch.setattr(order_db, "orders", {})


@pytest.fixture
def tiered_shirt():
    return Product(
        id="shirt",
        name="Tiered Shirt",
        price=Decimal("1000"),
        colors=[
            ProductColor(name="Red", display_color="#f00"),
            ProductColor(name="Blue", display_color="#00f"),
        ],
        sizes=["S", "M", "L"],
        variants=[
            ProductVariant(color="Red", size="S", stock=10),
            ProductVariant(color="Red", size="M", stock=3),
            ProductVariant(color="Blue", size="M", stock=8),
            ProductVariant(color="Blue", size="L", stock=0),
        ],
        pricing_tiers=[
            PricingTier(min_qty=10, max_qty=49, price_per_unit=Decimal("900")),
            PricingTier(min_qty=50, price_per_unit=Decimal("800")),
        ],
    )


@pytest.fixture
def plain_mug():
    return Product(id="mug", name="Plain Mug", price=Decimal("500"))


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_client(client, monkeypatch):
    monkeypatch.setattr(settings, "admin_password", ADMIN_PASSWORD)
    response = client.post("/api/admin/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def cart_id(client):
    return client.post("/api/cart").json()["cart"]["cart_id"]
