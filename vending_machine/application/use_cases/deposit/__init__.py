from .deposit_coin import DepositCoinUseCase
from .reset_deposit import ResetDepositUseCase

__all__ = ["DepositCoinUseCase", "ResetDepositUseCase"]
