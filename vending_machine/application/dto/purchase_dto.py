from typing import List

from pydantic import BaseModel

from .product_dto import ProductResponse


class PurchaseResponse(BaseModel):
    """
    DTO for a completed purchase.

    change decomposes the buyer's remaining deposit into coins
    [5, 10, 20, 50, 100]; it is informational, nothing is paid out.
    """
    product: ProductResponse
    quantity: int
    total_spent: int
    deposit: int
    change: List[int]
