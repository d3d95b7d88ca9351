"""
Constants, enums and exceptions for the YoBit client.

Centralizes endpoint locations, request defaults and the error hierarchy so
that every module raises and catches the same exception types.
"""

from enum import Enum

# Endpoint locations
API_HOST = "https://yobit.net"
PUBLIC_API_SUFFIX = "api/3"
PRIVATE_API_SUFFIX = "tapi"

# Request defaults
DEFAULT_TIMEOUT = 30.0
DEFAULT_DEPTH_LIMIT = 100
PAIR_SEPARATOR = "-"

# Header names expected by the private API
HEADER_KEY = "key"
HEADER_SIGN = "sign"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

# Environment variable names
ENV_API_KEY = "YOBIT_API_KEY"
ENV_API_SECRET = "YOBIT_API_SECRET"
ENV_API_HOST = "YOBIT_API_HOST"
ENV_PROXY_URL = "YOBIT_PROXY_URL"
ENV_TIMEOUT = "YOBIT_TIMEOUT"
ENV_NONCE_FILE = "YOBIT_NONCE_FILE"

# Console
EMOJI_SUCCESS = "✅"
EMOJI_ERROR = "❌"
EMOJI_WARNING = "⚠️"
EMOJI_INFO = "ℹ️"


class OrderSide(Enum):
    """Order side accepted by the Trade method."""

    BUY = "buy"
    SELL = "sell"


class SortOrder(Enum):
    """Output ordering accepted by the TradeHistory method."""

    ASC = "ASC"
    DESC = "DESC"


class YobitError(Exception):
    """Base class for all client errors."""


class TransportError(YobitError):
    """Raised when a request cannot be completed at the HTTP level."""


class HTTPStatusError(TransportError):
    """Raised when the server answers with a non-2xx status."""

    def __init__(self, status: int, body: str, url: str) -> None:
        self.status = status
        self.body = body
        self.url = url
        super().__init__(f"HTTP {status} from {url}: {body[:200]}")


class ResponseParseError(TransportError):
    """Raised when a response body is not valid JSON."""


class NonceError(YobitError):
    """Raised when a nonce update policy does not produce a larger nonce."""


class ConfigurationError(YobitError):
    """Raised when client configuration is missing or invalid."""
