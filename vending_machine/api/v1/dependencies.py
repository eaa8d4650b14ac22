# Standard library imports
import logging
from typing import Optional, Tuple

# External package imports
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.request_context import RequestContext
from ...application.use_cases.auth.authorize import ensure_capability
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.use_cases.auth.resolve_product import ResolveProductUseCase, parse_quantity
from ...domain.exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleError,
    NotFoundError,
    StoreError,
    ValidationError,
    VendingMachineError,
)
from ...domain import validators
from ...domain.models.product import Product
from ...domain.models.role import Capability
from ...domain.models.user import User
from ...di.container import get_container

logger = logging.getLogger(__name__)

# Missing credentials are reported by the pipeline itself as a 401
security_scheme = HTTPBearer(auto_error=False)


def to_http_exception(exception: VendingMachineError) -> HTTPException:
    """
    Translate a domain error into the HTTP error returned to the client

    Store failures are logged and reported generically.
    """
    if isinstance(exception, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    if isinstance(exception, AuthenticationError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exception),
            headers={"WWW-Authenticate": "Bearer"},
        )
    if isinstance(exception, AuthorizationError):
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(exception))
    if isinstance(exception, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    if isinstance(exception, BusinessRuleError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exception))
    if isinstance(exception, StoreError):
        logger.error(f"Store error: {exception}", exc_info=exception)
        # Only the named subclasses carry client-safe messages
        detail = "internal error" if type(exception) is StoreError else str(exception)
        return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
    logger.error(f"Unmapped domain error: {exception!r}")
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error")


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> User:
    """
    FastAPI dependency resolving the authenticated principal from the bearer token

    Raises:
        HTTPException: 401 if the token is missing, invalid or the user is unknown
    """
    token = credentials.credentials if credentials is not None else None

    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)

    try:
        return await get_current_user_use_case.execute(token)
    except VendingMachineError as exception:
        raise to_http_exception(exception)


def _require(principal: User, capability: Capability) -> User:
    try:
        return ensure_capability(principal, capability)
    except AuthorizationError as exception:
        raise to_http_exception(exception)


async def require_buyer(current_user: User = Depends(get_current_user)) -> User:
    """Role gate for buyer-only routes"""
    return _require(current_user, Capability.IS_BUYER)


async def require_seller(current_user: User = Depends(get_current_user)) -> User:
    """Role gate for seller-only routes"""
    return _require(current_user, Capability.IS_SELLER)


async def _resolve_product(product_id: str) -> Tuple[Product, User]:
    container = get_container()
    resolve_product_use_case = container.get(ResolveProductUseCase)

    try:
        return await resolve_product_use_case.execute(product_id)
    except VendingMachineError as exception:
        raise to_http_exception(exception)


async def get_product(product_id: str) -> Product:
    """Public resource resolution: the path-referenced product"""
    product, _ = await _resolve_product(product_id)
    return product


async def get_buyer_context(buyer: User = Depends(require_buyer)) -> RequestContext:
    return RequestContext(principal=buyer)


async def get_deposit_context(coin: str, buyer: User = Depends(require_buyer)) -> RequestContext:
    """Buyer context carrying the path-supplied coin value"""
    coin_value = validators.parse_decimal(coin)
    if coin_value is None:
        raise to_http_exception(ValidationError("coin value must be a number"))
    return RequestContext(principal=buyer, coin_value=coin_value)


async def get_seller_product_context(
    product_id: str,
    seller: User = Depends(require_seller),
) -> RequestContext:
    """Seller context carrying the path-referenced product and its owner"""
    product, owner = await _resolve_product(product_id)
    return RequestContext(principal=seller, product=product, product_owner=owner)


async def get_purchase_context(
    product_id: str,
    amount: str,
    buyer: User = Depends(require_buyer),
) -> RequestContext:
    """
    Buyer context carrying the product, its owner and the requested quantity

    An unparsable amount is left unset; the purchase reports it as missing.
    """
    product, owner = await _resolve_product(product_id)
    return RequestContext(
        principal=buyer,
        product=product,
        product_owner=owner,
        quantity=parse_quantity(amount),
    )
