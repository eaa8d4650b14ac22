# Standard library imports
import logging

# Local application imports
from ....domain.repositories.product_repository import ProductRepository
from ....domain.models.product import Product
from ....domain.models.role import Role
from ....domain.models.user import User
from ....domain.exceptions import AuthorizationError, ValidationError
from ....domain import validators
from ...dto.product_dto import ProductCreateRequest, ProductResponse

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Use case for a seller listing a new product"""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def execute(self, seller: User, request: ProductCreateRequest) -> ProductResponse:
        """
        Create a new product owned by the seller

        Args:
            seller: The principal creating the product
            request: Product creation request

        Returns:
            ProductResponse with created product information

        Raises:
            AuthorizationError: If the principal is not a seller
            ValidationError: If amount, cost or name are invalid
        """
        if seller.role is not Role.SELLER:
            raise AuthorizationError("user is not a seller")

        if request.amount_available <= 0:
            raise ValidationError("available amount must be positive")

        new_product = Product(
            id=None,  # Will be set by repository
            name=validators.validate_product_name(request.name),
            cost=validators.validate_cost(request.cost),
            amount_available=request.amount_available,
            seller_id=seller.id or "",
        )

        saved_product = await self.product_repository.save(new_product)
        logger.info(f"Seller {seller.id} created product {saved_product.id}")

        return ProductResponse.from_product(saved_product)
