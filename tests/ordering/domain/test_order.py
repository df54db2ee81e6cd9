"""Tests for Order, OrderItem and the order log."""

from datetime import UTC, datetime

import pytest
from catalogue.product.product import Product
from ordering.order.log import OrderLog
from ordering.order.order import Order, OrderItem, OrderStatus
from pydantic import ValidationError


def _make_product(**overrides):
    defaults = {"id": 1, "name": "Pintura Roja Concentrada", "price": 45000, "stock": 50}
    defaults.update(overrides)
    return Product(**defaults)


class TestOrderItem:
    def test_snapshot_copies_product_fields(self):
        item = OrderItem.snapshot(_make_product(), 2)
        assert item.product_id == 1
        assert item.name == "Pintura Roja Concentrada"
        assert item.price == 45000
        assert item.quantity == 2

    def test_snapshot_is_detached_from_product(self):
        product = _make_product()
        item = OrderItem.snapshot(product, 1)
        product.name = "Renamed"
        product.price = 1
        assert item.name == "Pintura Roja Concentrada"
        assert item.price == 45000

    def test_subtotal(self):
        assert OrderItem.snapshot(_make_product(price=1200), 3).subtotal == 3600

    def test_quantity_must_be_positive(self):
        with pytest.raises(ValidationError):
            OrderItem(product_id=1, name="X", price=1, quantity=0)


class TestOrderPlacement:
    def test_place_computes_total(self):
        items = [
            OrderItem(product_id=1, name="A", price=45000, quantity=2),
            OrderItem(product_id=2, name="B", price=42000, quantity=1),
        ]
        order = Order.place(1, items)
        assert order.total == 132000
        assert len(order.items) == 2

    def test_place_sets_completed_status(self):
        assert Order.place(1, []).status == OrderStatus.COMPLETED.value == "completed"

    def test_place_timestamps_in_utc(self):
        before = datetime.now(UTC)
        order = Order.place(1, [])
        assert before <= order.date <= datetime.now(UTC)

    def test_empty_order_has_zero_total(self):
        order = Order.place(1, [])
        assert order.items == ()
        assert order.total == 0

    def test_order_is_immutable(self):
        order = Order.place(1, [])
        with pytest.raises(ValidationError):
            order.status = "cancelled"

    def test_id_is_one_based(self):
        with pytest.raises(ValidationError):
            Order.place(0, [])


class TestOrderLog:
    def test_starts_empty(self):
        log = OrderLog()
        assert len(log) == 0
        assert log.list_orders() == []
        assert log.next_id() == 1

    def test_append_advances_next_id(self):
        log = OrderLog()
        log.append(Order.place(log.next_id(), []))
        log.append(Order.place(log.next_id(), []))
        assert [o.id for o in log.list_orders()] == [1, 2]
        assert log.next_id() == 3

    def test_out_of_sequence_append_rejected(self):
        log = OrderLog()
        with pytest.raises(ValueError):
            log.append(Order.place(5, []))
        assert len(log) == 0
