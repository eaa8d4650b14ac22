from typing import TYPE_CHECKING
from ...infrastructure.db.mongo_connection import (
    get_client,
    get_database,
    get_user_collection,
    get_product_collection,
)

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the client, database and collections in the container.
        This is the ONLY place where database connections are registered.
        The client is lazy: no connection is opened until the first query.
        """
        container.register_singleton("mongo_client", get_client())
        container.register_singleton("database", get_database())
        container.register_singleton("user_collection", get_user_collection())
        container.register_singleton("product_collection", get_product_collection())
