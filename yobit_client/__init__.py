"""
YoBit client - asynchronous binding for the YoBit exchange HTTP API.

This package provides:
- Public market-data endpoints (info, ticker, depth, trades)
- Signed private endpoints (balances, orders, history, deposits, withdrawals, Yobicodes)
- Pluggable nonce policies, including a file-persisted nonce store
- The `yobit` command-line tool

Private requests are signed with HMAC-SHA512 over the exact form body and
carry a strictly increasing nonce per API key.
"""

__version__ = "1.0.0"

from .core import public_api
from .core.api_client import YobitClient
from .core.public_api import depth, info, ticker, trades
from .services.nonce_store import FileNonceStore
from .utilities.constants import (
    ConfigurationError,
    HTTPStatusError,
    NonceError,
    OrderSide,
    ResponseParseError,
    SortOrder,
    TransportError,
    YobitError,
)
from .utilities.formatters import format_pairs

__all__ = [
    "ConfigurationError",
    "FileNonceStore",
    "HTTPStatusError",
    "NonceError",
    "OrderSide",
    "ResponseParseError",
    "SortOrder",
    "TransportError",
    "YobitClient",
    "YobitError",
    "depth",
    "format_pairs",
    "info",
    "public_api",
    "ticker",
    "trades",
]
