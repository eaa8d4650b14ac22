# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields
from ...domain.exceptions import StoreError, ValidationError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


def _to_object_id(user_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(user_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_username(self, username: str) -> Optional[User]:
        """
        Find user by username

        Args:
            username: Username to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not username:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.USERNAME: username})
        except Exception as e:
            raise StoreError(f"Error finding user by username: {str(e)}") from e

        if document is None:
            return None
        return self._stored_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model if found, None otherwise
        """
        object_id = _to_object_id(user_id) if user_id else None
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except Exception as e:
            raise StoreError(f"Error finding user by ID: {str(e)}") from e

        if document is None:
            return None
        return self._stored_user(document)

    async def save(self, user: User) -> User:
        """
        Insert a new user

        Args:
            user: User domain model to save (id must be None)

        Returns:
            Saved User domain model with ID set

        Raises:
            ValidationError: If the username is already taken
        """
        if not user:
            raise ValueError("User cannot be None")

        user_dict = self._user_to_dict(user)
        try:
            result = await self.user_collection.insert_one(user_dict)
        except DuplicateKeyError:
            raise ValidationError("User with this username already exists")
        except Exception as e:
            raise StoreError(f"Error saving user: {str(e)}") from e

        user.id = str(result.inserted_id)
        return user

    async def add_to_deposit(self, user_id: str, amount: int) -> Optional[User]:
        """Increment the deposit with a single $inc so concurrent deposits never overwrite each other"""
        return await self._update_deposit(user_id, {"$inc": {UserFields.DEPOSIT: amount}})

    async def reset_deposit(self, user_id: str) -> Optional[User]:
        return await self._update_deposit(user_id, {"$set": {UserFields.DEPOSIT: 0}})

    async def _update_deposit(self, user_id: str, update: dict) -> Optional[User]:
        object_id = _to_object_id(user_id)
        if object_id is None:
            return None

        try:
            document = await self.user_collection.find_one_and_update(
                {UserFields.MONGO_ID: object_id},
                update,
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            raise StoreError(f"Error updating deposit: {str(e)}") from e

        if document is None:
            return None
        return self._stored_user(document)

    def _stored_user(self, document: dict) -> User:
        """Map a document read from the store; a record the model rejects is a store fault"""
        try:
            return self._document_to_user(document)
        except (ValueError, TypeError) as e:
            logger.error(f"Malformed user record {document.get(UserFields.MONGO_ID)}: {e}")
            raise StoreError(f"Malformed user record: {str(e)}") from e

    def _document_to_user(self, document: dict) -> User:
        """Map a stored document to a User; the role string is validated by the model"""
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            role=document.get(UserFields.ROLE, ""),
            deposit=document.get(UserFields.DEPOSIT, 0),
        )

    def _user_to_dict(self, user: User) -> dict:
        """Stored form of a new user; MongoDB assigns _id"""
        return {
            UserFields.USERNAME: user.username,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.DEPOSIT: user.deposit,
            UserFields.ROLE: user.role.value,
        }
