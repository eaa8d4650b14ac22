# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import UserResponse
from ...application.request_context import RequestContext
from ...application.use_cases.deposit.deposit_coin import DepositCoinUseCase
from ...application.use_cases.deposit.reset_deposit import ResetDepositUseCase
from ...domain.exceptions import VendingMachineError
from ...di.container import get_container
from .dependencies import get_buyer_context, get_deposit_context, to_http_exception


router = APIRouter(tags=["deposit"])


@router.post("/deposit/{coin}", response_model=UserResponse)
async def deposit_coin(context: RequestContext = Depends(get_deposit_context)) -> UserResponse:
    """
    Deposit one coin (5, 10, 20, 50 or 100) into the buyer's balance

    Returns:
        UserResponse with the updated deposit
    """
    container = get_container()
    deposit_use_case = container.get(DepositCoinUseCase)

    try:
        return await deposit_use_case.execute(context.principal, context.coin_value)
    except VendingMachineError as exception:
        raise to_http_exception(exception)


@router.post("/reset", response_model=UserResponse)
async def reset_deposit(context: RequestContext = Depends(get_buyer_context)) -> UserResponse:
    """
    Reset the buyer's deposit to 0

    Returns:
        UserResponse with the reset deposit
    """
    container = get_container()
    reset_use_case = container.get(ResetDepositUseCase)

    try:
        return await reset_use_case.execute(context.principal)
    except VendingMachineError as exception:
        raise to_http_exception(exception)
