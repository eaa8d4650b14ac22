"""
Shared pytest fixtures for vending machine tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from vending_machine.domain.models.product import Product
from vending_machine.domain.models.role import Role
from vending_machine.domain.models.user import User


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_vending_db",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
        "ACCESS_TOKEN_EXPIRE_MINUTES": "10",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_timeout_ms = 1000
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 10
    mock.bcrypt_rounds = 4
    mock.log_level = "INFO"
    mock.host = "localhost"
    mock.port = 7777
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("vending_machine.core.config.get_settings", return_value=mock), patch(
        "vending_machine.core.security.get_settings", return_value=mock
    ):
        yield mock


def make_user(
    user_id: str = "buyer-1",
    username: str = "buyer_account",
    role: Role = Role.BUYER,
    deposit: int = 0,
    hashed_password: str = "$2b$04$hashed",
) -> User:
    return User(
        id=user_id,
        username=username,
        hashed_password=hashed_password,
        role=role,
        deposit=deposit,
    )


def make_product(
    product_id: str = "product-1",
    seller_id: str = "seller-1",
    name: str = "Cola",
    cost: int = 5,
    amount_available: int = 10,
) -> Product:
    return Product(
        id=product_id,
        name=name,
        cost=cost,
        amount_available=amount_available,
        seller_id=seller_id,
    )


@pytest.fixture
def buyer() -> User:
    return make_user(deposit=30)


@pytest.fixture
def seller() -> User:
    return make_user(user_id="seller-1", username="seller_account", role=Role.SELLER)


@pytest.fixture
def product() -> Product:
    return make_product()


@pytest.fixture
def user_factory():
    """Build valid User records; override any field by keyword"""
    return make_user


@pytest.fixture
def product_factory():
    """Build valid Product records; override any field by keyword"""
    return make_product
