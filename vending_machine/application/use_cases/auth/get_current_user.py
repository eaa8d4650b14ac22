# Standard library imports
from typing import Optional

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import AuthenticationError
from ....core.security import decode_jwt_token


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated principal from a JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, token: Optional[str]) -> User:
        """
        Verify the token and load the user it was issued for

        Args:
            token: JWT access token

        Returns:
            The principal's User record

        Raises:
            AuthenticationError: If the token is missing, invalid or expired,
                or the user no longer exists
        """
        if not token:
            raise AuthenticationError("Missing authentication token")

        try:
            payload = decode_jwt_token(token)
        except ValueError as exception:
            raise AuthenticationError(f"Invalid or expired token: {str(exception)}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise AuthenticationError("Invalid authentication payload: missing user ID")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("User not found")

        return user
