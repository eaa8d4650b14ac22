# Standard library imports
from typing import Optional, Tuple

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.product import Product
from ....domain.models.user import User
from ....domain.exceptions import NotFoundError
from ....domain import validators


def parse_quantity(raw_quantity: Optional[str]) -> Optional[int]:
    """
    Parse a path-supplied quantity

    Anything that is not a positive integer yields None, leaving the
    handler to report the missing amount.
    """
    quantity = validators.parse_decimal(raw_quantity)
    if quantity is None or quantity <= 0:
        return None
    return quantity


class ResolveProductUseCase:
    """Use case for loading a path-referenced product together with its seller"""

    def __init__(self, product_repository: ProductRepository, user_repository: UserRepository) -> None:
        self.product_repository = product_repository
        self.user_repository = user_repository

    async def execute(self, product_id: str) -> Tuple[Product, User]:
        """
        Load a product and the user that owns it

        Args:
            product_id: ID of the product

        Returns:
            Tuple of (product, product owner)

        Raises:
            NotFoundError: If the product or its seller does not exist
        """
        product = await self.product_repository.find_by_id(product_id)
        if product is None:
            raise NotFoundError(f"Product {product_id} not found")

        owner = await self.user_repository.find_by_id(product.seller_id)
        if owner is None:
            raise NotFoundError(f"Seller of product {product_id} not found")

        return product, owner
