"""
Public market-data endpoints.

Stateless coroutines that need no credentials and carry no nonce. Each one
accepts an optional transport to reuse; without it a short-lived
AiohttpTransport is opened for the single call.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from ..utilities.constants import (
    API_HOST,
    DEFAULT_DEPTH_LIMIT,
    PUBLIC_API_SUFFIX,
)
from ..utilities.formatters import format_pairs
from ..utilities.validators import validate_positive_number
from .transport import AiohttpTransport
from .types import HTTPTransport

Pairs = str | Sequence[str]


def public_url(path: str, api_host: str = API_HOST) -> str:
    """Build the URL of a public API path (e.g. 'ticker/btc_usd')."""
    return f"{api_host.rstrip('/')}/{PUBLIC_API_SUFFIX}/{path}"


async def _get(
    path: str,
    params: Mapping[str, Any] | None,
    transport: HTTPTransport | None,
    api_host: str,
    proxy: str | None,
) -> Any:
    url = public_url(path, api_host)
    if transport is not None:
        return await transport.get_json(url, params=params, proxy=proxy)

    async with AiohttpTransport() as own_transport:
        return await own_transport.get_json(url, params=params, proxy=proxy)


async def info(
    *,
    transport: HTTPTransport | None = None,
    api_host: str = API_HOST,
    proxy: str | None = None,
) -> Any:
    """
    Get server time and the list of pairs with their trading limits.

    Returns:
        {"server_time": ..., "pairs": {"ltc_btc": {"decimal_places": 8,
        "min_price": ..., "max_price": ..., "min_amount": ..., "hidden": 0,
        "fee": 0.2}, ...}}
    """
    return await _get("info", None, transport, api_host, proxy)


async def ticker(
    pairs: Pairs,
    *,
    transport: HTTPTransport | None = None,
    api_host: str = API_HOST,
    proxy: str | None = None,
) -> Any:
    """
    Get 24 hour statistics for one or more pairs.

    Returns:
        {"ltc_btc": {"high": ..., "low": ..., "avg": ..., "vol": ...,
        "vol_cur": ..., "last": ..., "buy": ..., "sell": ..., "updated": ...}}
    """
    return await _get(f"ticker/{format_pairs(pairs)}", None, transport, api_host, proxy)


async def depth(
    pairs: Pairs,
    limit: int = DEFAULT_DEPTH_LIMIT,
    *,
    transport: HTTPTransport | None = None,
    api_host: str = API_HOST,
    proxy: str | None = None,
) -> Any:
    """
    Get active asks and bids for one or more pairs.

    Args:
        pairs: Pair or list of pairs (e.g. "btc_usd")
        limit: Number of levels per side

    Returns:
        {"ltc_btc": {"asks": [[price, amount], ...], "bids": [[price, amount], ...]}}
    """
    validate_positive_number(limit, "Depth limit")

    return await _get(
        f"depth/{format_pairs(pairs)}", {"limit": limit}, transport, api_host, proxy
    )


async def trades(
    pairs: Pairs,
    *,
    transport: HTTPTransport | None = None,
    api_host: str = API_HOST,
    proxy: str | None = None,
) -> Any:
    """
    Get recent trades for one or more pairs.

    Returns:
        {"ltc_btc": [{"type": "ask", "price": ..., "amount": ..., "tid": ...,
        "timestamp": ...}, ...]}
    """
    return await _get(f"trades/{format_pairs(pairs)}", None, transport, api_host, proxy)
