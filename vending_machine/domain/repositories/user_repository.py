from abc import ABC, abstractmethod
from typing import Optional
from ..models.user import User


class UserRepository(ABC):
    """Repository interface - defines contract for user data access"""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by username"""
        pass

    @abstractmethod
    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def add_to_deposit(self, user_id: str, amount: int) -> Optional[User]:
        """Atomically increment a user's deposit, returning the updated user"""
        pass

    @abstractmethod
    async def reset_deposit(self, user_id: str) -> Optional[User]:
        """Atomically set a user's deposit to 0, returning the updated user"""
        pass
