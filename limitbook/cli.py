"""Interactive menu for placing orders into an order book."""

from __future__ import annotations

import argparse
import sys
from itertools import count
from typing import Callable, Iterable, Iterator, TextIO, TypeVar

from limitbook.book import FillReport, Order, OrderBook, OrderResult, OrderType, Side

_MENU = (
    "\nMenu:\n"
    "1. Place LIMIT BUY\n"
    "2. Place LIMIT SELL\n"
    "3. Place MARKET BUY\n"
    "4. Place MARKET SELL\n"
    "5. Exit\n"
    "Choose: "
)

_EXIT_CHOICE = 5

_CHOICES = {
    1: (OrderType.LIMIT, Side.BUY),
    2: (OrderType.LIMIT, Side.SELL),
    3: (OrderType.MARKET, Side.BUY),
    4: (OrderType.MARKET, Side.SELL),
}

_RESULT_NAMES = {
    OrderResult.FILLED: "FILLED",
    OrderResult.PARTIALLY_FILLED: "PARTIALLY FILLED",
    OrderResult.REJECTED: "REJECTED",
    OrderResult.RESTED: "RESTED",
}

T = TypeVar("T")


class _EndOfInput(Exception):
    pass


def _tokens(stream: Iterable[str]) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _describe(report: FillReport) -> str:
    lines = [
        f"Order result: {_RESULT_NAMES[report.status]}",
        f"Filled Quantity: {report.filled_quantity}",
    ]
    if report.fills:
        lines.append("Fills:")
        lines.extend(f"  Price: {price:g} Qty: {quantity}" for price, quantity in report.fills)
    return "\n".join(lines) + "\n\n"


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input runs out."""
    book = OrderBook()
    order_ids = count(1)
    tokens = _tokens(stdin)

    def prompt(text: str, convert: Callable[[str], T]) -> T:
        stdout.write(text)
        stdout.flush()
        token = next(tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return convert(token)
        except ValueError:
            raise _EndOfInput from None

    try:
        while True:
            book.print_book(stdout)
            choice = prompt(_MENU, int)
            if choice == _EXIT_CHOICE:
                break
            price = 0.0
            if choice in (1, 2):
                price = prompt("Enter price: ", float)
            quantity = prompt("Enter quantity: ", int)

            kind = _CHOICES.get(choice)
            if kind is None:
                stdout.write("Invalid choice.\n")
                continue
            order_type, side = kind
            report = book.add_order(Order(order_type, side, price, quantity, next(order_ids)))
            stdout.write(_describe(report))
    except _EndOfInput:
        pass
    stdout.write("Goodbye!\n")
    stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Start the interactive order book on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="limitbook",
        description="Place limit and market orders into an interactive order book.",
    )
    parser.parse_args(argv)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())