"""
Utilities package for the YoBit client.

Constants and exceptions, pair formatting, validation, console output and
credential helpers. Credential helpers live in `utilities.auth` and are
imported from there to keep this package free of client imports.
"""

from .constants import (
    ConfigurationError,
    HTTPStatusError,
    NonceError,
    OrderSide,
    ResponseParseError,
    SortOrder,
    TransportError,
    YobitError,
)
from .formatters import format_amount, format_pairs, format_timestamp
from .trading_helpers import normalize_side, normalize_sort_order

__all__ = [
    "ConfigurationError",
    "HTTPStatusError",
    "NonceError",
    "OrderSide",
    "ResponseParseError",
    "SortOrder",
    "TransportError",
    "YobitError",
    "format_amount",
    "format_pairs",
    "format_timestamp",
    "normalize_side",
    "normalize_sort_order",
]
