from .config import Settings, get_settings
from .security import (
    hash_password,
    verify_password,
    create_jwt_token,
    issue_access_token,
    decode_jwt_token,
)

__all__ = [
    "Settings",
    "get_settings",
    "hash_password",
    "verify_password",
    "create_jwt_token",
    "issue_access_token",
    "decode_jwt_token",
]

