from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.product_repository import ProductRepository
from ...domain.repositories.purchase_repository import PurchaseRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_product_repository import MongoProductRepository
from ...infrastructure.db.mongo_purchase_repository import MongoPurchaseRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets collections from database provider and creates repository instances.
        """
        user_collection = container.get("user_collection")
        product_collection = container.get("product_collection")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            MongoUserRepository(user_collection=user_collection)
        )

        container.register_singleton(
            ProductRepository,
            MongoProductRepository(product_collection=product_collection)
        )

        container.register_singleton(
            PurchaseRepository,
            MongoPurchaseRepository(
                client=container.get("mongo_client"),
                user_collection=user_collection,
                product_collection=product_collection,
            )
        )
