from pydantic import BaseModel

from ...domain.models.role import Role
from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    username: str
    role: Role
    deposit: int

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            username=user.username,
            role=user.role,
            deposit=user.deposit,
        )
