from abc import ABC, abstractmethod


class PurchaseRepository(ABC):
    """Repository interface - atomic unit of work spanning users and products"""

    @abstractmethod
    async def purchase(self, buyer_id: str, product_id: str, quantity: int, total_cost: int) -> int:
        """
        Decrement product stock and buyer deposit together.

        Both writes commit or neither does. Returns the buyer's remaining
        deposit. Raises InsufficientStockError / InsufficientDepositError
        when the stored values no longer cover the purchase.
        """
        pass
