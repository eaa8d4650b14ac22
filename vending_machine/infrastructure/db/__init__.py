from .mongo_connection import (
    get_client,
    get_database,
    get_user_collection,
    get_product_collection,
    ensure_indexes,
    close_client,
)
from .mongo_user_repository import MongoUserRepository
from .mongo_product_repository import MongoProductRepository
from .mongo_purchase_repository import MongoPurchaseRepository

__all__ = [
    "get_client",
    "get_database",
    "get_user_collection",
    "get_product_collection",
    "ensure_indexes",
    "close_client",
    "MongoUserRepository",
    "MongoProductRepository",
    "MongoPurchaseRepository",
]
