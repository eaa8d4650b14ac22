# Standard library imports
import time
from typing import Any, Dict

# External package imports
import jwt
import bcrypt
from jwt.exceptions import InvalidTokenError

# Local application imports
from .config import get_settings


def hash_password(plain_password: str) -> str:
    """Hash a password with a fresh bcrypt salt (cost from BCRYPT_ROUNDS)"""
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    return bcrypt.hashpw(plain_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a password against a stored bcrypt hash

    An empty or unparsable hash never matches.
    """
    if not hashed_password:
        return False
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        return False


def create_jwt_token(payload: Dict[str, Any]) -> str:
    """
    Sign a claim set as an access token

    iat, nbf and exp are added here; the token is valid from the moment it is
    issued until ACCESS_TOKEN_EXPIRE_MINUTES later.

    Args:
        payload: Application claims (sub, username)

    Returns:
        Encoded JWT
    """
    settings = get_settings()
    issued_at = int(time.time())

    claims = {
        **payload,
        "iat": issued_at,
        "nbf": issued_at,
        "exp": issued_at + settings.access_token_expire_minutes * 60,
    }
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def issue_access_token(user_id: str, username: str) -> str:
    """Access token for a verified user: sub carries the user ID"""
    return create_jwt_token({"sub": user_id, "username": username})


def decode_jwt_token(token: str) -> Dict[str, Any]:
    """
    Verify an access token and return its claims

    Signature, exp and nbf are all checked by PyJWT.

    Raises:
        ValueError: If the token is malformed, tampered, expired or not yet valid
    """
    settings = get_settings()
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except InvalidTokenError as e:
        raise ValueError(f"Invalid token: {str(e)}")
