from abc import ABC, abstractmethod
from typing import Optional, List
from ..models.product import Product


class ProductRepository(ABC):
    """Repository interface - defines contract for product data access"""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find product by ID"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Product]:
        """List every product, skipping records that fail validation"""
        pass

    @abstractmethod
    async def save(self, product: Product) -> Product:
        """Create a new product"""
        pass

    @abstractmethod
    async def update_details(self, product_id: str, seller_id: str, name: str, cost: int) -> int:
        """Set name and cost of a product owned by seller_id, returning the matched count"""
        pass

    @abstractmethod
    async def delete(self, product_id: str, seller_id: str) -> int:
        """Delete a product owned by seller_id, returning the deleted count"""
        pass
