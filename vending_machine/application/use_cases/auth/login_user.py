# Standard library imports
import dataclasses

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import AuthenticationError
from ....core.security import verify_password, issue_access_token
from ...dto.auth_dto import UserLoginRequest, TokenResponse


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def verify_credentials(self, username: str, password: str) -> User:
        """
        Check a username/password pair against the stored hash

        Returns:
            The matching user with its password hash stripped

        Raises:
            AuthenticationError: If the user is unknown or the password does not match
        """
        user = await self.user_repository.find_by_username(username)
        if user is None:
            raise AuthenticationError("Invalid username or password")

        if not verify_password(password, user.hashed_password):
            raise AuthenticationError("Invalid username or password")

        return dataclasses.replace(user, hashed_password="")

    async def execute(self, request: UserLoginRequest) -> TokenResponse:
        """
        Authenticate user and generate access token

        Args:
            request: Login request with username and password

        Returns:
            TokenResponse with a signed access token
        """
        user = await self.verify_credentials(request.username, request.password)

        token = issue_access_token(user.id or "", user.username)

        return TokenResponse(access_token=token)
