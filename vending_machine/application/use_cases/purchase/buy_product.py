# Standard library imports
import dataclasses
import logging
from typing import Optional

# Local application imports
from ....domain.repositories.purchase_repository import PurchaseRepository
from ....domain.models.product import Product
from ....domain.models.user import User
from ....domain.exceptions import (
    InsufficientDepositError,
    InsufficientStockError,
    ValidationError,
)
from ....domain.change import make_change
from ...dto.product_dto import ProductResponse
from ...dto.purchase_dto import PurchaseResponse

logger = logging.getLogger(__name__)


class BuyProductUseCase:
    """Use case for buying a quantity of a product with the buyer's deposit"""

    def __init__(self, purchase_repository: PurchaseRepository) -> None:
        self.purchase_repository = purchase_repository

    async def execute(
        self,
        buyer: User,
        product: Product,
        quantity: Optional[int],
    ) -> PurchaseResponse:
        """
        Validate and commit a purchase

        Preconditions are checked in order against the values resolved for
        this request, then stock and deposit are decremented in a single
        transaction. The store re-checks both guards so a concurrent
        purchase cannot drive either value negative.

        Args:
            buyer: The purchasing principal
            product: The product being bought
            quantity: Number of items; None when the path value was unusable

        Returns:
            PurchaseResponse with total spent, remaining deposit and its
            decomposition into coins

        Raises:
            ValidationError: If quantity is missing
            InsufficientStockError: If quantity exceeds the available amount
            InsufficientDepositError: If the deposit does not cover the cost
        """
        if quantity is None:
            raise ValidationError("missing amount")

        if quantity > product.amount_available:
            raise InsufficientStockError("no availability")

        total_spent = product.total_cost(quantity)
        if not buyer.has_deposit_for(total_spent):
            raise InsufficientDepositError("not enough deposit")

        remaining_deposit = await self.purchase_repository.purchase(
            buyer_id=buyer.id or "",
            product_id=product.id or "",
            quantity=quantity,
            total_cost=total_spent,
        )

        logger.info(
            f"User {buyer.id} bought {quantity} x product {product.id} for {total_spent}, "
            f"remaining deposit {remaining_deposit}"
        )

        purchased = dataclasses.replace(
            product, amount_available=product.amount_available - quantity
        )
        return PurchaseResponse(
            product=ProductResponse.from_product(purchased),
            quantity=quantity,
            total_spent=total_spent,
            deposit=remaining_deposit,
            change=make_change(remaining_deposit),
        )
