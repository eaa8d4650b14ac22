from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .auth_provider import AuthProvider
from .deposit_provider import DepositProvider
from .product_provider import ProductProvider
from .purchase_provider import PurchaseProvider


__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "AuthProvider",
    "DepositProvider",
    "ProductProvider",
    "PurchaseProvider",
]
