# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import DepositFailedError, StoreError
from ....domain import validators
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class DepositCoinUseCase:
    """Use case for inserting one coin into a buyer's deposit"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user: User, coin_value: int) -> UserResponse:
        """
        Add a single coin to the user's deposit

        Args:
            user: The buyer making the deposit
            coin_value: One of 5, 10, 20, 50, 100

        Returns:
            UserResponse with the updated deposit

        Raises:
            InvalidCoinError: If the coin value is not accepted
            DepositFailedError: If the deposit could not be persisted
        """
        validators.validate_deposit_coin(coin_value)

        try:
            updated_user = await self.user_repository.add_to_deposit(user.id or "", coin_value)
        except StoreError as e:
            logger.error(f"Deposit of {coin_value} for user {user.id} failed: {e}")
            raise DepositFailedError("deposit failed") from e

        if updated_user is None:
            logger.error(f"Deposit of {coin_value} for user {user.id} failed: user not found")
            raise DepositFailedError("deposit failed")

        logger.info(f"User {user.id} deposited {coin_value}, deposit is now {updated_user.deposit}")
        return UserResponse.from_user(updated_user)
