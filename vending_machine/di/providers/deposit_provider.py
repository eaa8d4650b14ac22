from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.deposit.deposit_coin import DepositCoinUseCase
from ...application.use_cases.deposit.reset_deposit import ResetDepositUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DepositProvider:
    """Deposit use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            DepositCoinUseCase,
            lambda: DepositCoinUseCase(
                user_repository=container.get(UserRepository)
            )
        )

        container.register_factory(
            ResetDepositUseCase,
            lambda: ResetDepositUseCase(
                user_repository=container.get(UserRepository)
            )
        )
