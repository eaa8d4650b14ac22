# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ASCENDING

# Local application imports
from ...core.config import get_settings
from ...domain.constants import UserFields

logger = logging.getLogger(__name__)


# Global MongoDB connection instances (singleton pattern)
_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_client() -> AsyncIOMotorClient:
    """
    Get the shared MongoDB client (singleton pattern)

    The client owns the process-wide connection pool. Every operation is
    bounded by the configured client-side timeout.

    Returns:
        MongoDB client instance
    """
    global _mongo_client

    if _mongo_client is not None:
        return _mongo_client

    settings = get_settings()
    _mongo_client = AsyncIOMotorClient(settings.mongo_uri, timeoutMS=settings.mongo_timeout_ms)
    return _mongo_client


def get_database() -> AsyncIOMotorDatabase:
    """
    Get MongoDB database instance (singleton pattern)

    Returns:
        MongoDB database instance
    """
    global _mongo_database

    if _mongo_database is not None:
        return _mongo_database

    _mongo_database = get_client()[get_settings().mongo_database_name]
    return _mongo_database


def get_user_collection() -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB

    Returns:
        MongoDB collection for users
    """
    return get_database()["users"]


def get_product_collection() -> AsyncIOMotorCollection:
    """
    Get products collection from MongoDB

    Returns:
        MongoDB collection for products
    """
    return get_database()["products"]


async def ensure_indexes() -> None:
    """Create the unique username index if it does not exist yet"""
    await get_user_collection().create_index([(UserFields.USERNAME, ASCENDING)], unique=True)
    logger.info("MongoDB indexes ensured")


def close_client() -> None:
    """Close the shared client and forget the cached handles"""
    global _mongo_client, _mongo_database

    if _mongo_client is not None:
        _mongo_client.close()
        logger.info("MongoDB client closed")
    _mongo_client = None
    _mongo_database = None
