# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.purchase_dto import PurchaseResponse
from ...application.request_context import RequestContext
from ...application.use_cases.purchase.buy_product import BuyProductUseCase
from ...domain.exceptions import VendingMachineError
from ...di.container import get_container
from .dependencies import get_purchase_context, to_http_exception


router = APIRouter(tags=["purchase"])


@router.get("/buy/product/{product_id}/amount/{amount}", response_model=PurchaseResponse)
async def buy_product(context: RequestContext = Depends(get_purchase_context)) -> PurchaseResponse:
    """
    Buy an amount of a product with the buyer's deposit

    Returns:
        PurchaseResponse with total spent, remaining deposit and change
    """
    container = get_container()
    buy_use_case = container.get(BuyProductUseCase)

    try:
        return await buy_use_case.execute(
            buyer=context.principal,
            product=context.product,
            quantity=context.quantity,
        )
    except VendingMachineError as exception:
        raise to_http_exception(exception)
