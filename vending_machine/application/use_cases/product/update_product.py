# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.models.user import User
from ....domain.exceptions import AuthorizationError, NoRowsAffectedError, ValidationError
from ....domain import validators
from ...dto.product_dto import ProductUpdateRequest, ProductResponse

logger = logging.getLogger(__name__)


class UpdateProductUseCase:
    """Use case for a seller renaming or repricing one of its products"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(
        self,
        seller: User,
        product: Product,
        request: ProductUpdateRequest,
    ) -> ProductResponse:
        """
        Apply name and cost changes

        A blank name or an invalid cost is ignored rather than rejected.
        When nothing changes, the store is not touched.

        Returns:
            ProductResponse reflecting the stored state

        Raises:
            AuthorizationError: If the seller does not own the product
        """
        if not product.is_owned_by(seller.id):
            raise AuthorizationError("wrong seller id")

        name = product.name
        if request.name is not None and request.name.strip():
            name = request.name.strip()

        cost = product.cost
        if request.cost is not None:
            try:
                cost = validators.validate_cost(request.cost)
            except ValidationError:
                logger.debug(f"Ignoring invalid cost {request.cost} for product {product.id}")

        if name == product.name and cost == product.cost:
            return ProductResponse.from_product(product)

        matched = await self.product_repository.update_details(
            product_id=product.id or "",
            seller_id=seller.id or "",
            name=name,
            cost=cost,
        )
        if matched == 0:
            raise NoRowsAffectedError("no product updated")

        logger.info(f"Seller {seller.id} updated product {product.id}")
        product.name = name
        product.cost = cost
        return ProductResponse.from_product(product)
