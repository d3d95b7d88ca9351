"""
Market-data commands - public endpoints, no credentials needed.
"""

from collections.abc import Sequence

from ..core import public_api
from ..utilities.console import print_json


async def info_command(proxy: str | None = None, api_host: str | None = None) -> None:
    """Show server time and pair limits"""
    print_json(await public_api.info(**_options(proxy, api_host)))


async def ticker_command(
    pairs: Sequence[str], proxy: str | None = None, api_host: str | None = None
) -> None:
    """Show 24h statistics for pairs"""
    print_json(await public_api.ticker(pairs, **_options(proxy, api_host)))


async def depth_command(
    pairs: Sequence[str], limit: int, proxy: str | None = None, api_host: str | None = None
) -> None:
    """Show order book for pairs"""
    print_json(await public_api.depth(pairs, limit, **_options(proxy, api_host)))


async def trades_command(
    pairs: Sequence[str], proxy: str | None = None, api_host: str | None = None
) -> None:
    """Show recent trades for pairs"""
    print_json(await public_api.trades(pairs, **_options(proxy, api_host)))


def _options(proxy: str | None, api_host: str | None) -> dict:
    options: dict = {"proxy": proxy}
    if api_host:
        options["api_host"] = api_host
    return options
