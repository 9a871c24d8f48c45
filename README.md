# limitbook

A small limit order book for a single instrument. It keeps bids and asks in
price-time priority, matches incoming limit and market orders against the
resting side, and reports every fill.

## Install

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from limitbook.book import Order, OrderBook, OrderResult, OrderType, Side

book = OrderBook()

book.add_order(Order(OrderType.LIMIT, Side.SELL, 100.0, 5, 1))
book.add_order(Order(OrderType.LIMIT, Side.SELL, 101.0, 5, 2))

report = book.add_order(Order(OrderType.MARKET, Side.BUY, 0.0, 8, 3))
assert report.status is OrderResult.FILLED
print(report.filled_quantity)     # 8
print(report.fills)               # [(100.0, 5), (101.0, 3)]

print(book.is_order_active(2))    # True, 2 left at 101.0
print(book.cancel_order(2))       # True
print(book.format_book())
```

`Order` takes `order_type`, `side`, `price`, `quantity` and `order_id`.
`add_order` works on a copy, so the order passed in is left unchanged. It
returns a `FillReport` with `status` (an `OrderResult`), `filled_quantity` and
`fills`, a list of `(price, quantity)` pairs in the order they traded.

How orders are handled:

- An order with a negative quantity is `REJECTED`, as is a limit order with a
  quantity of zero.
- A **limit order** whose opposite side is empty rests in the book: `RESTED`.
- A limit order whose price crosses the best opposite price trades level by
  level for as long as the prices cross. If it is filled completely the
  result is `FILLED`; otherwise the remainder rests at its own price and the
  result is `PARTIALLY_FILLED`.
- A limit order that does not cross a non-empty opposite side is `REJECTED`
  and is not added to the book.
- A **market order** trades through the opposite side at any price and never
  rests. Any unfilled remainder is dropped and the result is
  `PARTIALLY_FILLED`. If the opposite side is empty the result is `REJECTED`.
- At one price level, earlier orders are filled first.

`cancel_order` removes a resting order and returns `False` when the id is not
in the book. `is_order_active` tells whether an id is resting in the book.
`format_book` renders the five best bid orders and the five best ask orders
as text, and `print_book` writes that text to a stream (standard output by
default).

## Interactive console

```
limitbook
```

After every action the console shows the top of the book, followed by a menu:

```
1. Place LIMIT BUY
2. Place LIMIT SELL
3. Place MARKET BUY
4. Place MARKET SELL
5. Exit
```

Limit orders ask for a price, then every order asks for a quantity. Each
order gets the next number, starting from 1, as its id. For every order the
console prints the result, the quantity filled and the fills at each price. A
number outside the menu prints `Invalid choice.` once the quantity has been
entered. Choose `5` to exit; the console also stops at the end of input or on
input that is not a number, and says `Goodbye!`.

The same loop is available as `limitbook.cli.run(stdin, stdout)` for any pair
of text streams.

## What it does not do

The book lives in memory only: nothing is saved between runs, and the console
starts with an empty book each time. There is one book per process, with no
users or accounts, no order modification and no network interface.