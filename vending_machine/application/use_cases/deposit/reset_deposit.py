# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import StoreError
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class ResetDepositUseCase:
    """Use case for setting a buyer's deposit back to 0"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user: User) -> UserResponse:
        """
        Reset the user's deposit

        Raises:
            StoreError: If the reset could not be persisted
        """
        updated_user = await self.user_repository.reset_deposit(user.id or "")
        if updated_user is None:
            raise StoreError("reset failed")

        logger.info(f"User {user.id} reset deposit")
        return UserResponse.from_user(updated_user)
