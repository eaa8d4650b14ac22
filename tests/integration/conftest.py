"""
Fixtures for API tests.

The real use cases run behind the HTTP layer; only the repositories are
mocked, so the authentication pipeline, role gates and error mapping are
exercised end to end without a database.
"""
import dataclasses
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi.testclient import TestClient

from vending_machine.core.security import create_jwt_token
from vending_machine.di.base_container import BaseContainer
from vending_machine.di.providers import AuthProvider, DepositProvider, ProductProvider, PurchaseProvider
from vending_machine.domain.models.role import Role
from vending_machine.domain.repositories.product_repository import ProductRepository
from vending_machine.domain.repositories.purchase_repository import PurchaseRepository
from vending_machine.domain.repositories.user_repository import UserRepository

CONTROLLER_MODULES = [
    "vending_machine.api.v1.dependencies",
    "vending_machine.api.v1.auth_controller",
    "vending_machine.api.v1.deposit_controller",
    "vending_machine.api.v1.product_controller",
    "vending_machine.api.v1.purchase_controller",
]


@pytest.fixture
def store(user_factory, product_factory):
    """Users and products known to the mocked repositories, keyed by ID"""
    users = {
        "buyer-1": user_factory(user_id="buyer-1", username="buyer_account", deposit=30),
        "seller-1": user_factory(user_id="seller-1", username="seller_account", role=Role.SELLER),
        "seller-2": user_factory(user_id="seller-2", username="other_seller", role=Role.SELLER),
        "admin-1": user_factory(user_id="admin-1", username="admin_account", role=Role.ADMIN),
    }
    products = {
        "product-1": product_factory(product_id="product-1", seller_id="seller-1", cost=5, amount_available=10),
    }
    return SimpleNamespace(users=users, products=products)


@pytest.fixture
def repos(store):
    users = AsyncMock()
    users.find_by_id.side_effect = lambda user_id: store.users.get(user_id)

    async def add_to_deposit(user_id, amount):
        user = store.users[user_id]
        store.users[user_id] = dataclasses.replace(user, deposit=user.deposit + amount)
        return store.users[user_id]

    async def reset_deposit(user_id):
        store.users[user_id] = dataclasses.replace(store.users[user_id], deposit=0)
        return store.users[user_id]

    users.add_to_deposit.side_effect = add_to_deposit
    users.reset_deposit.side_effect = reset_deposit
    users.find_by_username.side_effect = lambda username: next(
        (user for user in store.users.values() if user.username == username), None
    )

    async def save_user(user):
        user.id = f"user-{len(store.users) + 1}"
        store.users[user.id] = user
        return user

    users.save.side_effect = save_user

    products = AsyncMock()
    products.find_by_id.side_effect = lambda product_id: store.products.get(product_id)
    products.list_all.side_effect = lambda: list(store.products.values())

    async def save_product(product):
        product.id = f"product-{len(store.products) + 1}"
        store.products[product.id] = product
        return product

    products.save.side_effect = save_product

    purchases = AsyncMock()
    return SimpleNamespace(users=users, products=products, purchases=purchases)


@pytest.fixture
def container(repos):
    container = BaseContainer()
    container.register_singleton(UserRepository, repos.users)
    container.register_singleton(ProductRepository, repos.products)
    container.register_singleton(PurchaseRepository, repos.purchases)
    AuthProvider.register(container)
    DepositProvider.register(container)
    ProductProvider.register(container)
    PurchaseProvider.register(container)
    return container


@pytest.fixture
def client(container, mock_settings):
    """Create test client with a container backed by mocked repositories."""
    from contextlib import ExitStack
    from vending_machine.main import app

    with ExitStack() as stack:
        for module in CONTROLLER_MODULES:
            stack.enter_context(patch(f"{module}.get_container", return_value=container))
        stack.enter_context(patch("vending_machine.main.ensure_indexes", new=AsyncMock()))
        stack.enter_context(patch("vending_machine.main.close_client", new=MagicMock()))
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_headers(mock_settings):
    """Bearer headers for a user ID"""

    def build(user_id: str) -> dict:
        token = create_jwt_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}

    return build
