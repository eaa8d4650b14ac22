# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ReturnDocument

# Local application imports
from ...domain.repositories.purchase_repository import PurchaseRepository
from ...domain.constants import ProductFields, UserFields
from ...domain.exceptions import (
    InsufficientDepositError,
    InsufficientStockError,
    NotFoundError,
    StoreError,
    VendingMachineError,
)
from .mongo_connection import get_client, get_product_collection, get_user_collection

logger = logging.getLogger(__name__)


class MongoPurchaseRepository(PurchaseRepository):
    """
    MongoDB implementation of PurchaseRepository.

    The stock and deposit decrements run in one multi-document transaction
    (requires a replica set). Each decrement carries a guard in its filter,
    so a concurrent purchase that already consumed the stock or the deposit
    makes the update match nothing and the whole transaction is aborted.
    """

    def __init__(
        self,
        client: Optional[AsyncIOMotorClient] = None,
        user_collection: Optional[AsyncIOMotorCollection] = None,
        product_collection: Optional[AsyncIOMotorCollection] = None,
    ) -> None:
        self.client = client if client is not None else get_client()
        self.user_collection = user_collection if user_collection is not None else get_user_collection()
        self.product_collection = (
            product_collection if product_collection is not None else get_product_collection()
        )

    async def purchase(self, buyer_id: str, product_id: str, quantity: int, total_cost: int) -> int:
        try:
            buyer_object_id = ObjectId(buyer_id)
            product_object_id = ObjectId(product_id)
        except (InvalidId, ValueError, TypeError):
            raise NotFoundError("Buyer or product not found")

        try:
            async with await self.client.start_session() as session:
                async with session.start_transaction():
                    product_result = await self.product_collection.update_one(
                        {
                            ProductFields.MONGO_ID: product_object_id,
                            ProductFields.AMOUNT_AVAILABLE: {"$gte": quantity},
                        },
                        {"$inc": {ProductFields.AMOUNT_AVAILABLE: -quantity}},
                        session=session,
                    )
                    if product_result.matched_count == 0:
                        raise InsufficientStockError("no availability")

                    buyer_document = await self.user_collection.find_one_and_update(
                        {
                            UserFields.MONGO_ID: buyer_object_id,
                            UserFields.DEPOSIT: {"$gte": total_cost},
                        },
                        {"$inc": {UserFields.DEPOSIT: -total_cost}},
                        return_document=ReturnDocument.AFTER,
                        session=session,
                    )
                    if buyer_document is None:
                        raise InsufficientDepositError("not enough deposit")

                    return buyer_document[UserFields.DEPOSIT]
        except VendingMachineError:
            raise
        except Exception as e:
            logger.error(f"Purchase transaction for product {product_id} by {buyer_id} rolled back: {e}")
            raise StoreError("purchase failed") from e
