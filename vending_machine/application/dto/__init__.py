from .auth_dto import UserRegistrationRequest, UserLoginRequest, TokenResponse
from .user_dto import UserResponse
from .product_dto import ProductCreateRequest, ProductUpdateRequest, ProductResponse
from .purchase_dto import PurchaseResponse

__all__ = [
    "UserRegistrationRequest",
    "UserLoginRequest",
    "TokenResponse",
    "UserResponse",
    "ProductCreateRequest",
    "ProductUpdateRequest",
    "ProductResponse",
    "PurchaseResponse",
]
