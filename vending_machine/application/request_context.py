"""
Request Context
---------------

Typed, request-scoped values filled in stage by stage by the
authorization pipeline and consumed by the use cases.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..domain.models.product import Product
from ..domain.models.user import User


@dataclass
class RequestContext:
    """
    Values attached to a request after authentication and resource resolution.

    principal is always set once the pipeline has run; the other fields are
    only set on routes that reference them.
    """
    principal: User
    product: Optional[Product] = None
    product_owner: Optional[User] = None
    coin_value: Optional[int] = None
    quantity: Optional[int] = None
