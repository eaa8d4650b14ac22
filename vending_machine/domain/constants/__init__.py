"""Constants for domain model field names"""

from .user_fields import UserFields
from .product_fields import ProductFields

__all__ = [
    "UserFields",
    "ProductFields",
]
