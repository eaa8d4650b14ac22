from typing import Optional

from pydantic import BaseModel

from ...domain.models.product import Product


class ProductCreateRequest(BaseModel):
    """DTO for product creation request"""
    amount_available: int
    cost: int
    name: str


class ProductUpdateRequest(BaseModel):
    """DTO for product update request. Invalid or empty fields are ignored."""
    name: Optional[str] = None
    cost: Optional[int] = None


class ProductResponse(BaseModel):
    """DTO for product response"""
    id: str
    name: str
    cost: int
    amount_available: int
    seller_id: str

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(
            id=product.id or "",
            name=product.name,
            cost=product.cost,
            amount_available=product.amount_available,
            seller_id=product.seller_id,
        )
