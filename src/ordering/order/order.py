"""Order records produced by checkout.

An Order is written exactly once, when a checkout completes, and is never
changed afterwards. Its line items are snapshots of the product at the time
of purchase, not references to the live catalogue entry.
"""

from collections.abc import Iterable
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from catalogue.product.product import Product


class OrderStatus(Enum):
    COMPLETED = "completed"


class OrderItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int
    name: str
    price: int = Field(ge=0)
    quantity: int = Field(ge=1)

    @classmethod
    def snapshot(cls, product: Product, quantity: int) -> "OrderItem":
        return cls(
            product_id=product.id,
            name=product.name,
            price=product.price,
            quantity=quantity,
        )

    @property
    def subtotal(self) -> int:
        return self.price * self.quantity


class Order(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(ge=1)
    items: tuple[OrderItem, ...] = ()
    total: int = Field(default=0, ge=0)
    date: datetime
    status: str = OrderStatus.COMPLETED.value

    @classmethod
    def place(cls, order_id: int, items: Iterable[OrderItem]) -> "Order":
        """Build a completed order; the total is the sum of line subtotals."""
        items = tuple(items)
        return cls(
            id=order_id,
            items=items,
            total=sum(item.subtotal for item in items),
            date=datetime.now(UTC),
        )
