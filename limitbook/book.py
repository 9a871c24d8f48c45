"""A price-time priority limit order book for a single instrument."""

from __future__ import annotations

import operator
import sys
from collections import OrderedDict
from dataclasses import dataclass, field, replace
from enum import Enum
from itertools import count, islice
from typing import Iterator, TextIO

from sortedcontainers import SortedDict

_TOP_LEVELS = 5


class Side(Enum):
    """Which side of the book an order belongs to."""

    BUY = "buy"
    SELL = "sell"


class OrderType(Enum):
    """How an order is priced."""

    LIMIT = "limit"
    MARKET = "market"


class OrderResult(Enum):
    """Outcome of submitting an order."""

    FILLED = "filled"
    PARTIALLY_FILLED = "partially_filled"
    REJECTED = "rejected"
    RESTED = "rested"


@dataclass
class Order:
    """An order to buy or sell a quantity, optionally at a limit price."""

    order_type: OrderType
    side: Side
    price: float
    quantity: int
    order_id: int


@dataclass
class FillReport:
    """What happened to a submitted order, with each fill as (price, quantity)."""

    status: OrderResult = OrderResult.REJECTED
    filled_quantity: int = 0
    fills: list[tuple[float, int]] = field(default_factory=list)


@dataclass(frozen=True)
class _Location:
    side: Side
    price: float
    token: int


def _format_price(price: float) -> str:
    return f"{price:g}"


class OrderBook:
    """Bids (best = highest) and asks (best = lowest), each level first in, first out."""

    def __init__(self) -> None:
        self._bids: SortedDict = SortedDict(operator.neg)
        self._asks: SortedDict = SortedDict()
        self._orders: dict[int, _Location] = {}
        self._tokens = count()

    def _ladder(self, side: Side) -> SortedDict:
        return self._bids if side is Side.BUY else self._asks

    def _opposite(self, side: Side) -> SortedDict:
        return self._asks if side is Side.BUY else self._bids

    @staticmethod
    def _crosses(order: Order, price: float) -> bool:
        if order.side is Side.BUY:
            return order.price >= price
        return order.price <= price

    def add_order(self, order: Order) -> FillReport:
        """Match the order against the book and rest any limit remainder."""
        if order.quantity < 0:
            return FillReport()
        incoming = replace(order)
        if incoming.order_type is OrderType.LIMIT:
            return self._add_limit(incoming)
        return self._add_market(incoming)

    def _add_market(self, order: Order) -> FillReport:
        book = self._opposite(order.side)
        if not book:
            return FillReport()
        return self._match(order, book)

    def _add_limit(self, order: Order) -> FillReport:
        if order.quantity <= 0:
            return FillReport()
        book = self._opposite(order.side)
        report = FillReport()
        if book and self._crosses(order, book.peekitem(0)[0]):
            report = self._match(order, book)
            if report.status is OrderResult.FILLED:
                return report
        if not book or report.status is OrderResult.PARTIALLY_FILLED:
            self._rest(order)
            if report.status is OrderResult.REJECTED:
                report.status = OrderResult.RESTED
        return report

    def _match(self, order: Order, book: SortedDict) -> FillReport:
        report = FillReport()
        while book and order.quantity > 0:
            price, level = book.peekitem(0)
            if order.order_type is OrderType.LIMIT and not self._crosses(order, price):
                break
            while level and order.quantity > 0:
                token, resting = next(iter(level.items()))
                quantity = min(order.quantity, resting.quantity)
                order.quantity -= quantity
                resting.quantity -= quantity
                report.filled_quantity += quantity
                report.fills.append((price, quantity))
                if resting.quantity == 0:
                    del level[token]
                    self._orders.pop(resting.order_id, None)
            if not level:
                del book[price]
        if order.quantity == 0:
            report.status = OrderResult.FILLED
        elif report.filled_quantity > 0:
            report.status = OrderResult.PARTIALLY_FILLED
        return report

    def _rest(self, order: Order) -> None:
        level = self._ladder(order.side).setdefault(order.price, OrderedDict())
        token = next(self._tokens)
        level[token] = order
        self._orders[order.order_id] = _Location(order.side, order.price, token)

    def cancel_order(self, order_id: int) -> bool:
        """Remove a resting order; return False if it is not in the book."""
        location = self._orders.pop(order_id, None)
        if location is None:
            return False
        book = self._ladder(location.side)
        level = book.get(location.price)
        if level is not None:
            level.pop(location.token, None)
            if not level:
                del book[location.price]
        return True

    def is_order_active(self, order_id: int) -> bool:
        """Whether an order with this id is resting in the book."""
        return order_id in self._orders

    @staticmethod
    def _top(book: SortedDict) -> Iterator[str]:
        entries = (
            (price, order)
            for price, level in book.items()
            for order in level.values()
        )
        for price, order in islice(entries, _TOP_LEVELS):
            yield (
                f"Price: {_format_price(price)} | Qty: {order.quantity}"
                f" | ID: {order.order_id}\n"
            )

    def format_book(self) -> str:
        """Render the five best bids and asks as text."""
        parts = ["\n--- Top 5 Bids ---\n"]
        parts.extend(self._top(self._bids) or [])
        if len(parts) == 1:
            parts.append("(none)\n")
        asks = list(self._top(self._asks))
        parts.append("--- Top 5 Asks ---\n")
        parts.extend(asks or ["(none)\n"])
        return "".join(parts)

    def print_book(self, file: TextIO | None = None) -> None:
        """Write the rendering of the book to a text stream."""
        print(self.format_book(), end="", file=file if file is not None else sys.stdout)