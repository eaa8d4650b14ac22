from typing import TYPE_CHECKING
from ...domain.repositories.purchase_repository import PurchaseRepository
from ...application.use_cases.purchase.buy_product import BuyProductUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PurchaseProvider:
    """Purchase use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            BuyProductUseCase,
            lambda: BuyProductUseCase(
                purchase_repository=container.get(PurchaseRepository),
            )
        )
