"""
Pytest configuration and fixtures for the catalog API tests.
"""
import itertools
import os

# Set test environment before importing app modules
os.environ["SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from catalog_api.core.config import settings
from catalog_api.db.session import Base, SessionLocal, engine
from catalog_api.main import app
from catalog_api.models.product import Product
from catalog_api.models.variant import ProductVariant


@pytest.fixture(autouse=True)
def reset_database():
    """Every test starts from empty tables."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def lenient_client() -> TestClient:
    """Client that returns 500 responses instead of re-raising server errors."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def url():
    """Build a URL under the API prefix."""
    def _url(path: str) -> str:
        return f"{settings.API_V1_STR}{path}"
    return _url


@pytest.fixture
def make_product(db):
    counter = itertools.count(1)

    def _make(**overrides) -> Product:
        n = next(counter)
        fields = {
            "name": f"Product {n}",
            "description": f"Description for product {n}",
            "sku": f"PRD-{n:04d}",
            "price": 10.0,
            "inventory_quantity": 10,
            "status": "active",
            "vendor": "Acme",
            "product_type": "Widgets",
        }
        fields.update(overrides)
        product = Product(**fields)
        db.add(product)
        db.commit()
        db.refresh(product)
        return product

    return _make


@pytest.fixture
def make_variant(db, make_product):
    counter = itertools.count(1)

    def _make(product: Product = None, **overrides) -> ProductVariant:
        n = next(counter)
        if product is None:
            product = make_product()
        fields = {
            "product_id": product.id,
            "title": f"Variant {n}",
            "sku": f"VAR-{n:04d}",
            "price": 12.5,
            "inventory_quantity": 5,
            "position": n,
        }
        fields.update(overrides)
        variant = ProductVariant(**fields)
        db.add(variant)
        db.commit()
        db.refresh(variant)
        return variant

    return _make
