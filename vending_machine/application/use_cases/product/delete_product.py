# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.models.user import User
from ....domain.exceptions import AuthorizationError, NoRowsAffectedError

logger = logging.getLogger(__name__)


class DeleteProductUseCase:
    """Use case for a seller removing one of its products"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, seller: User, product: Product) -> None:
        """
        Delete the product

        Raises:
            AuthorizationError: If the seller does not own the product
            NoRowsAffectedError: If the store removed nothing
        """
        if not product.is_owned_by(seller.id):
            raise AuthorizationError("wrong seller id")

        deleted = await self.product_repository.delete(product.id or "", seller.id or "")
        if deleted < 1:
            raise NoRowsAffectedError("no rows deleted")

        logger.info(f"Seller {seller.id} deleted product {product.id}")
