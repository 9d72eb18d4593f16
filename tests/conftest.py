"""Pytest configuration for storefront tests."""

from unittest.mock import MagicMock

import pytest

from db import make_engine
from main import create_app
from seed import seed
from storefront.core.config import AppConfig, CatalogConfig, Config, DatabaseConfig
from storefront.core.exceptions import CatalogError
from storefront.repositories.user_repository import UserRepository
from storefront.services.catalog_gateway import CatalogGateway


@pytest.fixture
def engine():
    """Fresh in-memory database per test, seeded with tax rates and products."""
    eng = make_engine("sqlite://")
    seed(eng)
    yield eng
    eng.dispose()


@pytest.fixture
def catalog():
    """Provider client stub. Offline unless a test says otherwise."""
    fake = MagicMock(spec=CatalogGateway)
    fake.get_products.side_effect = CatalogError("provider offline")
    fake.find_variant_id.return_value = None
    return fake


@pytest.fixture
def config():
    return Config(
        database=DatabaseConfig(url="sqlite://"),
        catalog=CatalogConfig(api_token="test-token", shop_id="shop-1"),
        app=AppConfig(environment="test", log_level="WARNING"),
    )


@pytest.fixture
def app(config, engine, catalog):
    return create_app(config, engine=engine, catalog=catalog)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["container"]


@pytest.fixture
def users(engine):
    """Two registered customers: (alice_id, bob_id)."""
    repo = UserRepository(engine)
    alice = repo.create_user("alice@example.com", "hash-a", first_name="Alice", last_name="Ng")
    bob = repo.create_user("bob@example.com", "hash-b", first_name="Bob", last_name="Ray")
    return alice, bob
