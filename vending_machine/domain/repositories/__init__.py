from .user_repository import UserRepository
from .product_repository import ProductRepository
from .purchase_repository import PurchaseRepository

__all__ = ["UserRepository", "ProductRepository", "PurchaseRepository"]
