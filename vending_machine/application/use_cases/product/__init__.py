from .create_product import CreateProductUseCase
from .update_product import UpdateProductUseCase
from .delete_product import DeleteProductUseCase
from .list_products import ListProductsUseCase

__all__ = [
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "ListProductsUseCase",
]
