# Local application imports
from ....domain.models.role import Capability
from ....domain.models.user import User
from ....domain.exceptions import AuthorizationError


def ensure_capability(principal: User, capability: Capability) -> User:
    """
    Role gate: let the principal through only if its role grants the capability

    Raises:
        AuthorizationError: If the role does not match the route's requirement
    """
    if not principal.role.has(capability):
        raise AuthorizationError(
            f"Role {principal.role.value} is not allowed to perform this operation"
        )
    return principal
