"""A price-time priority limit order book with an interactive console."""

__version__ = "0.1.0"
__all__ = ["book", "cli"]