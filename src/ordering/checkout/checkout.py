"""Checkout: turns a submitted cart into an Order and stock decrements.

Flow:
    1. An absent or empty cart is rejected with EmptyCartError.
    2. Each line is handled on its own, in the order submitted. A line is
       accepted when it names a product by integer id, asks for an integer
       quantity of at least 1, and the product has at least that much stock;
       its stock is decremented immediately, so later lines of the same cart
       see the reduced figure. Any other line is rejected and left out of
       the order without failing the checkout.
    3. An Order holding the accepted lines (possibly none, total 0) is
       appended to the order log.

Ids and quantities are taken as sent: ``"1"`` or ``true`` is not product 1.

Rejected lines are reported through ``CheckoutResult.lines``. Nothing is
rolled back: stock taken by accepted lines stays taken. Replaying the same
cart places a second order.

The whole pass holds one lock, so two checkouts cannot both pass the stock
check for the same units and order ids stay gap-free.
"""

import threading
from collections.abc import Sequence
from contextlib import AbstractContextManager
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from catalogue.store import CatalogueStore
from ordering.order.log import OrderLog
from ordering.order.order import Order, OrderItem
from shared.exceptions import EmptyCartError
from shared.logging import get_logger

logger = get_logger(__name__)


class LineStatus(Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class RejectionReason(Enum):
    INVALID_LINE = "invalid_line"
    INVALID_QUANTITY = "invalid_quantity"
    PRODUCT_NOT_FOUND = "product_not_found"
    INSUFFICIENT_STOCK = "insufficient_stock"


def _strict_int(value: Any) -> int | None:
    """Return ``value`` when it is a plain int (bools excluded), else None."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


class CartLine(BaseModel):
    """One requested (product, quantity) pair, exactly as submitted.

    Values are not checked here; the processor rejects a malformed line
    without failing the rest of the cart.
    """

    model_config = ConfigDict(frozen=True)

    product_id: Any = None
    quantity: Any = None

    @property
    def requested_product(self) -> int | None:
        return _strict_int(self.product_id)

    @property
    def requested_quantity(self) -> int | None:
        return _strict_int(self.quantity)


class LineOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    product_id: int | None
    quantity: int | None
    status: str
    reason: str | None = None

    @classmethod
    def accepted(cls, line: CartLine) -> "LineOutcome":
        return cls(
            product_id=line.requested_product,
            quantity=line.requested_quantity,
            status=LineStatus.ACCEPTED.value,
        )

    @classmethod
    def rejected(cls, line: CartLine, reason: RejectionReason) -> "LineOutcome":
        return cls(
            product_id=line.requested_product,
            quantity=line.requested_quantity,
            status=LineStatus.REJECTED.value,
            reason=reason.value,
        )

    @property
    def is_accepted(self) -> bool:
        return self.status == LineStatus.ACCEPTED.value


class CheckoutResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    order: Order
    lines: tuple[LineOutcome, ...]

    @property
    def rejected_lines(self) -> tuple[LineOutcome, ...]:
        return tuple(line for line in self.lines if not line.is_accepted)


class CheckoutProcessor:
    def __init__(
        self,
        catalogue: CatalogueStore,
        orders: OrderLog,
        lock: AbstractContextManager | None = None,
    ):
        self._catalogue = catalogue
        self._orders = orders
        self._lock = lock or threading.Lock()

    def checkout(self, lines: Sequence[CartLine] | None) -> CheckoutResult:
        if not lines:
            raise EmptyCartError()

        with self._lock:
            items = []
            outcomes = []
            for line in lines:
                outcomes.append(self._process_line(line, items))

            order = Order.place(self._orders.next_id(), items)
            self._orders.append(order)

        result = CheckoutResult(order=order, lines=tuple(outcomes))
        logger.info(
            "checkout.completed",
            order_id=order.id,
            total=order.total,
            accepted=len(order.items),
            rejected=len(result.rejected_lines),
        )
        return result

    def _process_line(self, line: CartLine, items: list[OrderItem]) -> LineOutcome:
        product_id, quantity = line.requested_product, line.requested_quantity
        if product_id is None:
            return self._reject(line, RejectionReason.INVALID_LINE)
        if quantity is None or quantity < 1:
            return self._reject(line, RejectionReason.INVALID_QUANTITY)

        product = self._catalogue.find_product(product_id)
        if product is None:
            return self._reject(line, RejectionReason.PRODUCT_NOT_FOUND)
        if not product.has_stock_for(quantity):
            return self._reject(line, RejectionReason.INSUFFICIENT_STOCK, available=product.stock)

        items.append(OrderItem.snapshot(product, quantity))
        product.decrement_stock(quantity)
        return LineOutcome.accepted(line)

    def _reject(self, line: CartLine, reason: RejectionReason, **context) -> LineOutcome:
        logger.warning(
            "checkout.line_rejected",
            product_id=line.product_id,
            quantity=line.quantity,
            reason=reason.value,
            **context,
        )
        return LineOutcome.rejected(line, reason)
