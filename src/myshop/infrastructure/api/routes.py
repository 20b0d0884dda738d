"""FastAPI routes for products and orders."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from myshop.application.add_product import AddProductHandler
from myshop.application.cancel_order import CancelOrderHandler
from myshop.application.create_order import CreateOrderHandler
from myshop.application.dto import OrderItemSpec
from myshop.application.list_products import ListProductsHandler
from myshop.application.ports import EmailSender, PaymentGateway
from myshop.application.show_order import ShowOrderHandler
from myshop.application.show_product import ShowProductHandler
from myshop.application.update_stock import UpdateStockHandler
from myshop.domain.model.value_objects import Address
from myshop.domain.repository.order_repository import OrderRepository
from myshop.domain.repository.product_repository import ProductRepository
from myshop.domain.service.pricing_policy import PricingPolicy
from myshop.infrastructure.api.dependencies import (
    get_currency,
    get_email_sender,
    get_order_repository,
    get_payment_gateway,
    get_pricing_policy,
    get_product_repository,
)
from myshop.infrastructure.api.schemas import (
    CreateOrderRequest,
    CreateProductRequest,
    ErrorResponse,
    OrderResponse,
    ProductResponse,
    UpdateStockRequest,
)

_ERRORS = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}

# ---------------------------------------------------------------------------
# Product Router
# ---------------------------------------------------------------------------
product_router = APIRouter(prefix="/api/products", tags=["products"])


@product_router.get("", response_model=list[ProductResponse])
def list_products(
    product_repo: ProductRepository = Depends(get_product_repository),
) -> list[ProductResponse]:
    products = ListProductsHandler(product_repo).handle()
    return [ProductResponse.from_dto(p) for p in products]


@product_router.get("/{product_id}", response_model=ProductResponse, responses=_ERRORS)
def get_product(
    product_id: int,
    product_repo: ProductRepository = Depends(get_product_repository),
) -> ProductResponse:
    return ProductResponse.from_dto(ShowProductHandler(product_repo).handle(product_id))


@product_router.post("", status_code=201, response_model=ProductResponse, responses=_ERRORS)
def create_product(
    body: CreateProductRequest,
    product_repo: ProductRepository = Depends(get_product_repository),
    currency: str = Depends(get_currency),
) -> ProductResponse:
    dto = AddProductHandler(product_repo).handle(
        name=body.name,
        price=str(body.price),
        stock_quantity=body.stock_quantity,
        description=body.description,
        currency=currency,
    )
    return ProductResponse.from_dto(dto)


@product_router.put("/{product_id}/stock", status_code=204, responses=_ERRORS)
def update_stock(
    product_id: int,
    body: UpdateStockRequest,
    product_repo: ProductRepository = Depends(get_product_repository),
) -> Response:
    UpdateStockHandler(product_repo).handle(product_id, body.stock_quantity)
    return Response(status_code=204)


# ---------------------------------------------------------------------------
# Order Router
# ---------------------------------------------------------------------------
order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.get("/{order_id}", response_model=OrderResponse, responses=_ERRORS)
def get_order(
    order_id: int,
    order_repo: OrderRepository = Depends(get_order_repository),
) -> OrderResponse:
    return OrderResponse.from_dto(ShowOrderHandler(order_repo).handle(order_id))


@order_router.post("", status_code=201, response_model=OrderResponse, responses=_ERRORS)
def create_order(
    body: CreateOrderRequest,
    order_repo: OrderRepository = Depends(get_order_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway),
    email_sender: EmailSender = Depends(get_email_sender),
    pricing_policy: PricingPolicy = Depends(get_pricing_policy),
    currency: str = Depends(get_currency),
) -> OrderResponse:
    handler = CreateOrderHandler(
        order_repo=order_repo,
        product_repo=product_repo,
        payment_gateway=payment_gateway,
        email_sender=email_sender,
        pricing_policy=pricing_policy,
        currency=currency,
    )
    address = Address(**body.shipping_address.model_dump())
    specs = [OrderItemSpec(product_id=i.product_id, quantity=i.quantity) for i in body.items]
    dto = handler.handle(body.customer_email, address, specs)
    return OrderResponse.from_dto(dto)


@order_router.post("/{order_id}/cancel", status_code=204, responses=_ERRORS)
def cancel_order(
    order_id: int,
    order_repo: OrderRepository = Depends(get_order_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
    payment_gateway: PaymentGateway = Depends(get_payment_gateway),
    email_sender: EmailSender = Depends(get_email_sender),
) -> Response:
    CancelOrderHandler(
        order_repo=order_repo,
        product_repo=product_repo,
        payment_gateway=payment_gateway,
        email_sender=email_sender,
    ).handle(order_id)
    return Response(status_code=204)
