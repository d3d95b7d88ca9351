"""
Formatting utilities for pair strings and displayed trading data.

`format_pairs` produces the path segment used by every public endpoint and
the `pair` field of private calls. The remaining helpers format values for
the command-line output.
"""

from collections.abc import Sequence
from datetime import datetime

from .constants import PAIR_SEPARATOR


def format_pairs(pairs: str | Sequence[str]) -> str:
    """
    Normalize one pair or a list of pairs to the API's pair string.

    Args:
        pairs: A pair such as "BTC_USD" or a sequence of pairs

    Returns:
        Lower-cased pair string, multiple pairs joined with "-"
        (e.g. ["BTC_USD", "LTC_BTC"] -> "btc_usd-ltc_btc")
    """
    if isinstance(pairs, str):
        if not pairs.strip():
            raise ValueError("Pair cannot be empty")
        return pairs.lower()

    pair_list = list(pairs)
    if not pair_list:
        raise ValueError("Pair list cannot be empty")

    for pair in pair_list:
        if not isinstance(pair, str) or not pair.strip():
            raise ValueError(f"Invalid pair in list: {pair!r}")

    return PAIR_SEPARATOR.join(pair_list).lower()


def format_amount(amount: float | str, precision: int = 8) -> str:
    """Format amount for display."""
    try:
        return f"{float(amount):.{precision}f}"
    except (ValueError, TypeError):
        return str(amount)


def format_timestamp(timestamp: int | float | str | None) -> str:
    """Format unix timestamp to readable date."""
    if timestamp is None:
        return "Unknown"

    try:
        return datetime.fromtimestamp(int(timestamp)).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, TypeError, OSError):
        return "Invalid Date"
