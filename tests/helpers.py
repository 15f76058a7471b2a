"""Test doubles and builders shared across test modules."""

from decimal import Decimal

from core.domain import EventHandler
from orders.domain import Order, OrderItem


class RecordingHandler(EventHandler):
    """Handler that appends (label, event) to a shared journal."""

    def __init__(self, label, journal):
        self.label = label
        self.journal = journal

    def handle(self, event) -> None:
        self.journal.append((self.label, event))


class FailingHandler(EventHandler):
    def __init__(self, error=None):
        self.error = error or RuntimeError("handler failed")

    def handle(self, event) -> None:
        raise self.error


def make_item(item_id="1", quantity=2, price="10", product_id="1", name=None) -> OrderItem:
    return OrderItem(item_id, name or f"Item {item_id}", Decimal(price), product_id, quantity)


def make_order(order_id="1", customer_id="1", quantities=(2,), price="10", product_id="1") -> Order:
    items = [
        make_item(str(index + 1), quantity, price, product_id)
        for index, quantity in enumerate(quantities)
    ]
    return Order(order_id, customer_id, items)
