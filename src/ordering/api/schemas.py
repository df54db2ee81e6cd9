"""Pydantic request/response schemas for the Ordering API.

These are external contracts, separate from the internal checkout and
order records. Field names on the wire follow the browser client
(``productId``).

Cart lines are accepted loosely: any JSON value is taken as a line and
handed to checkout as sent, which rejects malformed lines one by one. Only
a body that is not a cart at all (``items`` not a list) fails validation.
"""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from ordering.checkout.checkout import CheckoutResult, LineOutcome
from ordering.order.order import Order, OrderItem


# ---------------------------------------------------------------------------
# Request Schemas
# ---------------------------------------------------------------------------
class CartItemRequest(BaseModel):
    """A cart line as sent by the client; extra product fields are ignored."""

    id: Any = None
    quantity: Any = None


class CheckoutRequest(BaseModel):
    items: list[Annotated[CartItemRequest | Any, Field(union_mode="left_to_right")]] | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [
                        {"id": 1, "quantity": 2},
                        {"id": 3, "quantity": 1},
                    ]
                }
            ]
        }
    }


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderItemResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int = Field(alias="productId")
    name: str
    price: int
    quantity: int

    @classmethod
    def from_item(cls, item: OrderItem) -> "OrderItemResponse":
        return cls(product_id=item.product_id, name=item.name, price=item.price, quantity=item.quantity)


class OrderResponse(BaseModel):
    id: int
    items: list[OrderItemResponse]
    total: int
    date: datetime
    status: str

    @classmethod
    def from_order(cls, order: Order) -> "OrderResponse":
        return cls(
            id=order.id,
            items=[OrderItemResponse.from_item(item) for item in order.items],
            total=order.total,
            date=order.date,
            status=order.status,
        )


class LineOutcomeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    product_id: int | None = Field(alias="productId")
    quantity: int | None
    status: str
    reason: str | None = None

    @classmethod
    def from_outcome(cls, outcome: LineOutcome) -> "LineOutcomeResponse":
        return cls(
            product_id=outcome.product_id,
            quantity=outcome.quantity,
            status=outcome.status,
            reason=outcome.reason,
        )


class CheckoutResponse(BaseModel):
    success: bool = True
    order: OrderResponse
    message: str = "Compra procesada exitosamente"
    lines: list[LineOutcomeResponse]

    @classmethod
    def from_result(cls, result: CheckoutResult) -> "CheckoutResponse":
        return cls(
            order=OrderResponse.from_order(result.order),
            lines=[LineOutcomeResponse.from_outcome(line) for line in result.lines],
        )
