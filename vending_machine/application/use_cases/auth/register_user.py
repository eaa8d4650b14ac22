# Standard library imports
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ValidationError
from ....domain import validators
from ....core.security import hash_password
from ...dto.auth_dto import UserRegistrationRequest
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> UserResponse:
        """
        Register a new user

        Input is fully validated before the password is hashed or anything
        is written.

        Args:
            request: Registration request with username, password, role and
                optional opening deposit

        Returns:
            UserResponse with created user information

        Raises:
            ValidationError: If any field is invalid or the username is taken
        """
        username = validators.validate_username(request.username)
        validators.validate_password(request.password)
        deposit = validators.validate_deposit(request.deposit)
        role = validators.validate_role(request.role)

        existing_user = await self.user_repository.find_by_username(username)
        if existing_user is not None:
            raise ValidationError("User with this username already exists")

        new_user = User(
            id=None,  # Will be set by repository
            username=username,
            hashed_password=hash_password(request.password),
            role=role,
            deposit=deposit,
        )

        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered {saved_user.role.value} user {saved_user.id}")

        return UserResponse.from_user(saved_user)
