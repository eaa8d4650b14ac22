# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, Response, status

# Local application imports
from ...application.dto.product_dto import ProductCreateRequest, ProductUpdateRequest, ProductResponse
from ...application.request_context import RequestContext
from ...application.use_cases.product.create_product import CreateProductUseCase
from ...application.use_cases.product.update_product import UpdateProductUseCase
from ...application.use_cases.product.delete_product import DeleteProductUseCase
from ...application.use_cases.product.list_products import ListProductsUseCase
from ...domain.exceptions import VendingMachineError
from ...domain.models.product import Product
from ...domain.models.user import User
from ...di.container import get_container
from .dependencies import get_product, get_seller_product_context, require_seller, to_http_exception


router = APIRouter(tags=["product"])


@router.post("/product", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateRequest,
    seller: User = Depends(require_seller),
) -> ProductResponse:
    """
    Create a new product owned by the current seller

    Args:
        request: Product creation request
        seller: Current authenticated seller (from dependency)

    Returns:
        ProductResponse with created product information
    """
    container = get_container()
    create_product_use_case = container.get(CreateProductUseCase)

    try:
        return await create_product_use_case.execute(seller, request)
    except VendingMachineError as exception:
        raise to_http_exception(exception)


@router.get("/product/list", response_model=List[ProductResponse])
async def list_products() -> List[ProductResponse]:
    """
    List all products

    Returns:
        List of ProductResponse objects
    """
    container = get_container()
    list_products_use_case = container.get(ListProductsUseCase)

    try:
        return await list_products_use_case.execute()
    except VendingMachineError as exception:
        raise to_http_exception(exception)


@router.get("/product/{product_id}", response_model=ProductResponse)
async def get_product_details(product: Product = Depends(get_product)) -> ProductResponse:
    """
    Get a product by ID

    Returns:
        ProductResponse with product information
    """
    return ProductResponse.from_product(product)


@router.put("/product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_product(
    request: ProductUpdateRequest,
    context: RequestContext = Depends(get_seller_product_context),
) -> Response:
    """
    Update name and/or cost of a product owned by the current seller
    """
    container = get_container()
    update_product_use_case = container.get(UpdateProductUseCase)

    try:
        await update_product_use_case.execute(context.principal, context.product, request)
    except VendingMachineError as exception:
        raise to_http_exception(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/product/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(context: RequestContext = Depends(get_seller_product_context)) -> Response:
    """
    Delete a product owned by the current seller
    """
    container = get_container()
    delete_product_use_case = container.get(DeleteProductUseCase)

    try:
        await delete_product_use_case.execute(context.principal, context.product)
    except VendingMachineError as exception:
        raise to_http_exception(exception)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
