from .role import Role, Capability
from .user import User
from .product import Product

__all__ = ["Role", "Capability", "User", "Product"]
