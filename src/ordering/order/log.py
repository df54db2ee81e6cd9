"""Append-only, in-memory log of placed orders."""

from ordering.order.order import Order


class OrderLog:
    """Orders in creation order.

    Identifiers are derived from the log length, so the log must only be
    appended to while the checkout lock is held.
    """

    def __init__(self):
        self._orders: list[Order] = []

    def __len__(self):
        return len(self._orders)

    def next_id(self) -> int:
        return len(self._orders) + 1

    def append(self, order: Order) -> None:
        if order.id != self.next_id():
            raise ValueError(f"Order id {order.id} is out of sequence; expected {self.next_id()}")
        self._orders.append(order)

    def list_orders(self) -> list[Order]:
        return list(self._orders)
