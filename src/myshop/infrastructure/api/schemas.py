"""Pydantic request/response schemas for the HTTP API.

These are external contracts, kept separate from the application DTOs.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field

from myshop.application.dto import OrderDTO, ProductDTO


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------
class CreateProductRequest(BaseModel):
    name: str = Field(min_length=1)
    description: str | None = None
    price: Decimal = Field(gt=0)
    stock_quantity: int = Field(ge=0)


class UpdateStockRequest(BaseModel):
    stock_quantity: int = Field(ge=0)


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str
    price: Decimal
    currency: str
    stock_quantity: int
    is_active: bool

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductResponse:
        return cls(
            id=dto.id,
            name=dto.name,
            description=dto.description,
            price=dto.price,
            currency=dto.currency,
            stock_quantity=dto.stock_quantity,
            is_active=dto.is_active,
        )


# ---------------------------------------------------------------------------
# Orders
# ---------------------------------------------------------------------------
class AddressSchema(BaseModel):
    street: str = Field(min_length=1)
    city: str = Field(min_length=1)
    state: str = Field(min_length=1)
    zip_code: str = Field(min_length=1)
    country: str = "Brasil"


class OrderItemRequest(BaseModel):
    product_id: int
    quantity: int = Field(ge=1)


class CreateOrderRequest(BaseModel):
    customer_email: str = Field(min_length=1)
    shipping_address: AddressSchema
    items: list[OrderItemRequest]

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_email": "ana@example.com",
                    "shipping_address": {
                        "street": "Rua das Flores, 100",
                        "city": "São Paulo",
                        "state": "SP",
                        "zip_code": "01000-000",
                        "country": "Brasil",
                    },
                    "items": [{"product_id": 1, "quantity": 2}],
                }
            ]
        }
    }


class OrderItemResponse(BaseModel):
    product_id: int
    product_name: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderResponse(BaseModel):
    id: int
    customer_email: str
    status: str
    currency: str
    subtotal: Decimal
    shipping_cost: Decimal
    discount: Decimal
    total: Decimal
    created_at: datetime
    payment_reference: str | None
    items: list[OrderItemResponse]

    @classmethod
    def from_dto(cls, dto: OrderDTO) -> OrderResponse:
        return cls(
            id=dto.id,
            customer_email=dto.customer_email,
            status=dto.status,
            currency=dto.currency,
            subtotal=dto.subtotal,
            shipping_cost=dto.shipping_cost,
            discount=dto.discount,
            total=dto.total,
            created_at=dto.created_at,
            payment_reference=dto.payment_reference,
            items=[
                OrderItemResponse(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    unit_price=item.unit_price,
                    subtotal=item.subtotal,
                )
                for item in dto.items
            ],
        )


class ErrorResponse(BaseModel):
    error: str
