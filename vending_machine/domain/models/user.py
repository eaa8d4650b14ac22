from dataclasses import dataclass
from typing import Optional

from .role import Role
from .. import validators


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    username: str
    hashed_password: str
    role: Role
    deposit: int = 0

    def __post_init__(self):
        """Business validations"""
        validators.validate_username(self.username)
        self.role = validators.validate_role(self.role)
        validators.validate_deposit(self.deposit)

    def has_deposit_for(self, total_cost: int) -> bool:
        return self.deposit >= total_cost
