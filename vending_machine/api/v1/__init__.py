from .auth_controller import router as auth_router
from .deposit_controller import router as deposit_router
from .health_controller import router as health_router
from .product_controller import router as product_router
from .purchase_controller import router as purchase_router


__all__ = ["auth_router", "deposit_router", "health_router", "product_router", "purchase_router"]
