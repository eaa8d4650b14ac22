# Standard library imports
import logging
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.product_repository import ProductRepository
from ...domain.models.product import Product
from ...domain.constants import ProductFields
from ...domain.exceptions import StoreError, VendingMachineError
from .mongo_connection import get_product_collection

logger = logging.getLogger(__name__)


def _to_object_id(product_id: str) -> Optional[ObjectId]:
    try:
        return ObjectId(product_id)
    except (InvalidId, ValueError, TypeError):
        return None


class MongoProductRepository(ProductRepository):
    """MongoDB implementation of ProductRepository"""

    def __init__(self, product_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.product_collection = (
            product_collection if product_collection is not None else get_product_collection()
        )

    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """
        Find product by ID

        Args:
            product_id: The product ID to find

        Returns:
            Product domain model if found, None otherwise
        """
        object_id = _to_object_id(product_id) if product_id else None
        if object_id is None:
            return None

        try:
            document = await self.product_collection.find_one({ProductFields.MONGO_ID: object_id})
        except Exception as e:
            raise StoreError(f"Error finding product by ID: {str(e)}") from e

        if document is None:
            return None
        return self._document_to_product(document)

    async def list_all(self) -> List[Product]:
        """
        List all products

        A malformed document is logged and skipped so one bad record
        does not hide the rest of the catalog.

        Returns:
            List of Product domain models
        """
        products = []
        try:
            async for document in self.product_collection.find({}):
                try:
                    products.append(self._document_to_product(document))
                except (VendingMachineError, ValueError, TypeError, KeyError) as e:
                    logger.warning(f"Skipping malformed product record {document.get(ProductFields.MONGO_ID)}: {e}")
        except Exception as e:
            raise StoreError(f"Error listing products: {str(e)}") from e
        return products

    async def save(self, product: Product) -> Product:
        """
        Insert a new product

        Args:
            product: Product domain model (id must be None)

        Returns:
            Saved Product domain model with ID set
        """
        if not product:
            raise ValueError("Product cannot be None")

        try:
            result = await self.product_collection.insert_one(self._product_to_dict(product))
        except Exception as e:
            raise StoreError(f"Error saving product: {str(e)}") from e

        product.id = str(result.inserted_id)
        return product

    async def update_details(self, product_id: str, seller_id: str, name: str, cost: int) -> int:
        object_id = _to_object_id(product_id)
        if object_id is None:
            return 0

        try:
            result = await self.product_collection.update_one(
                {ProductFields.MONGO_ID: object_id, ProductFields.SELLER_ID: seller_id},
                {"$set": {ProductFields.NAME: name, ProductFields.COST: cost}},
            )
        except Exception as e:
            raise StoreError(f"Error updating product: {str(e)}") from e
        return result.matched_count

    async def delete(self, product_id: str, seller_id: str) -> int:
        object_id = _to_object_id(product_id)
        if object_id is None:
            return 0

        try:
            result = await self.product_collection.delete_one(
                {ProductFields.MONGO_ID: object_id, ProductFields.SELLER_ID: seller_id}
            )
        except Exception as e:
            raise StoreError(f"Error deleting product: {str(e)}") from e
        return result.deleted_count

    def _document_to_product(self, document: Dict[str, Any]) -> Product:
        """Convert MongoDB document to Product domain model"""
        if not document or ProductFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return Product(
            id=str(document[ProductFields.MONGO_ID]),
            name=document.get(ProductFields.NAME, ""),
            cost=document.get(ProductFields.COST, 0),
            amount_available=document.get(ProductFields.AMOUNT_AVAILABLE, 0),
            seller_id=document.get(ProductFields.SELLER_ID, ""),
        )

    def _product_to_dict(self, product: Product) -> Dict[str, Any]:
        """Convert Product domain model to MongoDB document"""
        return {
            ProductFields.NAME: product.name,
            ProductFields.COST: product.cost,
            ProductFields.AMOUNT_AVAILABLE: product.amount_available,
            ProductFields.SELLER_ID: product.seller_id,
        }
