"""
Input validators shared by domain models and use cases.

Each validator raises ValidationError with a user-facing message and
returns the normalized value where normalization applies.
"""
# Standard library imports
import re
from typing import Any, Optional

# Local application imports
from .exceptions import ValidationError, InvalidCoinError
from .models.role import Role


PASSWORD_MIN_LENGTH = 8
ACCEPTED_COINS = (5, 10, 20, 50, 100)

_USERNAME_PATTERN = re.compile(r"[0-9a-zA-Z@._-]{8,}")
_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")
_SYMBOL = re.compile(r"[^a-zA-Z0-9]")
_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_decimal(raw: Any) -> Optional[int]:
    """
    Parse a path segment as a signed ASCII decimal

    Underscores, surrounding whitespace and non-ASCII digits are rejected,
    unlike int(). Returns None when the value does not parse.
    """
    if not isinstance(raw, str) or _DECIMAL.fullmatch(raw) is None:
        return None
    return int(raw)


def validate_username(username: str) -> str:
    if not isinstance(username, str) or _USERNAME_PATTERN.fullmatch(username) is None:
        raise ValidationError(
            "username should be at least 8 characters long and may only contain "
            "letters, numbers and the symbols @ . _ -"
        )
    return username


def validate_password(password: str) -> str:
    """
    Check password strength on the whitespace-trimmed value.

    Requires at least PASSWORD_MIN_LENGTH characters, one lowercase letter,
    one capital letter, one digit and one non-alphanumerical character.
    Inner whitespace counts as a symbol.
    """
    trimmed = password.strip() if isinstance(password, str) else ""

    if len(trimmed) < PASSWORD_MIN_LENGTH:
        raise ValidationError(f"minimum password length is {PASSWORD_MIN_LENGTH}")
    if not _LOWERCASE.search(trimmed):
        raise ValidationError("password should contain at least a small letter")
    if not _UPPERCASE.search(trimmed):
        raise ValidationError("password should contain at least a capital letter")
    if not _DIGIT.search(trimmed):
        raise ValidationError("password should contain at least a number")
    if not _SYMBOL.search(trimmed):
        raise ValidationError("password should contain at least a non-alphanumerical character")
    return password


def validate_deposit(deposit: int) -> int:
    if not _is_int(deposit) or deposit < 0 or deposit % 5 != 0:
        raise ValidationError("deposit should be a non-negative multiple of 5")
    return deposit


def validate_role(role: Any) -> Role:
    if isinstance(role, Role):
        return role
    try:
        return Role(role)
    except ValueError:
        raise ValidationError(f"unrecognized role: {role}")


def validate_cost(cost: int) -> int:
    if not _is_int(cost) or cost <= 0 or cost % 5 != 0:
        raise ValidationError("cost should be a positive multiple of 5")
    return cost


def validate_amount_available(amount: int) -> int:
    if not _is_int(amount) or amount < 0:
        raise ValidationError("available amount cannot be negative")
    return amount


def validate_product_name(name: str) -> str:
    trimmed = name.strip() if isinstance(name, str) else ""
    if not trimmed:
        raise ValidationError("missing name for product")
    return trimmed


def validate_deposit_coin(coin_value: int) -> int:
    if coin_value not in ACCEPTED_COINS or not _is_int(coin_value):
        raise InvalidCoinError(f"coin value not allowed, accepted values: {list(ACCEPTED_COINS)}")
    return coin_value
