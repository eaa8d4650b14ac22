# Standard library imports
from typing import List

# Local application imports
from .validators import ACCEPTED_COINS


def make_change(amount: int) -> List[int]:
    """
    Split an amount into coins of 5, 10, 20, 50 and 100.

    Greedy from the largest denomination down. The denomination set is
    canonical, so greedy selection yields the minimum number of coins.
    The machine is assumed to always hold enough coins of every kind.

    Args:
        amount: Non-negative multiple of 5

    Returns:
        Coin counts ordered like ACCEPTED_COINS: [c5, c10, c20, c50, c100]

    Raises:
        ValueError: If amount is negative or not a multiple of 5
    """
    if amount < 0 or amount % ACCEPTED_COINS[0] != 0:
        raise ValueError(f"Cannot make change for {amount}")

    coins = [0] * len(ACCEPTED_COINS)
    remaining = amount
    for index in range(len(ACCEPTED_COINS) - 1, -1, -1):
        coins[index] = remaining // ACCEPTED_COINS[index]
        remaining -= coins[index] * ACCEPTED_COINS[index]

    return coins
