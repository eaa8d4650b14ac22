from .buy_product import BuyProductUseCase

__all__ = ["BuyProductUseCase"]
