from .register_user import RegisterUserUseCase
from .login_user import LoginUserUseCase
from .get_current_user import GetCurrentUserUseCase
from .authorize import ensure_capability
from .resolve_product import ResolveProductUseCase, parse_quantity

__all__ = [
    "RegisterUserUseCase",
    "LoginUserUseCase",
    "GetCurrentUserUseCase",
    "ensure_capability",
    "ResolveProductUseCase",
    "parse_quantity",
]
