"""A limit order book keeping buy orders best-price-first and sell orders cheapest-first."""

from __future__ import annotations

import itertools
from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum

_RULE = "_" * 44
_ids = itertools.count(1)


class OrderType(Enum):
    BUY = "buy"
    SELL = "sell"


@dataclass(frozen=True)
class Order:
    """An order; each one receives the next identifier when created."""

    order_type: OrderType
    price: float
    quantity: int
    order_id: int = field(default_factory=lambda: next(_ids))


class OrderBook:
    """Orders grouped by price, in arrival order within a price level."""

    def __init__(self) -> None:
        self._books: dict[OrderType, dict[float, list[Order]]] = {
            OrderType.BUY: defaultdict(list),
            OrderType.SELL: defaultdict(list),
        }

    def add_order(self, order: Order) -> None:
        self._books[order.order_type][order.price].append(order)

    def orders(self, order_type: OrderType) -> list[Order]:
        """Return the orders of one side: buys by descending price, sells by ascending."""
        book = self._books[order_type]
        prices = sorted(book, reverse=order_type is OrderType.BUY)
        return [order for price in prices for order in book[price]]

    @staticmethod
    def _lines(orders: list[Order]) -> str:
        return "".join(
            f"ID : {o.order_id}----price : {o.price:g}----Quantity : {o.quantity}\n"
            for o in orders
        )

    def render(self) -> str:
        """Lay out both sides of the book as text."""
        return (
            f"{_RULE}\nTop buy Orders\n"
            + self._lines(self.orders(OrderType.BUY))
            + f"{_RULE}Top sell Orders\n"
            + self._lines(self.orders(OrderType.SELL))
            + f"{_RULE}\n"
        )