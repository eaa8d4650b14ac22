# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from .. import validators
from ..exceptions import ValidationError


@dataclass
class Product:
    """
    Pure domain model for Product entity.

    A product is owned by exactly one seller and is only ever renamed,
    repriced or deleted by that seller. Stock changes only through purchases.
    """
    id: Optional[str]
    name: str
    cost: int
    amount_available: int
    seller_id: str

    def __post_init__(self) -> None:
        """Business validations"""
        self.name = validators.validate_product_name(self.name)
        validators.validate_cost(self.cost)
        validators.validate_amount_available(self.amount_available)
        if not self.seller_id:
            raise ValidationError("Seller ID is required")

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return bool(user_id) and self.seller_id == user_id

    def total_cost(self, quantity: int) -> int:
        return quantity * self.cost
