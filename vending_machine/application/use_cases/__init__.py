from .auth import (
    RegisterUserUseCase,
    LoginUserUseCase,
    GetCurrentUserUseCase,
    ResolveProductUseCase,
)
from .deposit import (
    DepositCoinUseCase,
    ResetDepositUseCase,
)
from .product import (
    CreateProductUseCase,
    UpdateProductUseCase,
    DeleteProductUseCase,
    ListProductsUseCase,
)
from .purchase import BuyProductUseCase

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ResolveProductUseCase",
    "DepositCoinUseCase",
    "ResetDepositUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "ListProductsUseCase",
    "BuyProductUseCase",
]
