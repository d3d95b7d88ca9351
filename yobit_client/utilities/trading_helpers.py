"""
Trading-specific helper utilities.

Normalization helpers shared by the trading wrappers and the CLI.
"""

from .constants import OrderSide, SortOrder


def normalize_side(side: str | OrderSide) -> OrderSide:
    """Normalize order side to OrderSide enum."""
    if isinstance(side, OrderSide):
        return side

    side_str = side.lower().strip()
    if side_str == "buy":
        return OrderSide.BUY
    elif side_str == "sell":
        return OrderSide.SELL
    else:
        raise ValueError(f"Invalid order side: {side}. Must be 'buy' or 'sell'")


def normalize_sort_order(order: str | SortOrder) -> SortOrder:
    """Normalize history sort order to SortOrder enum."""
    if isinstance(order, SortOrder):
        return order

    try:
        return SortOrder(order.upper().strip())
    except ValueError:
        raise ValueError(f"Invalid sort order: {order}. Must be 'ASC' or 'DESC'") from None
