"""
Command routing for the yobit CLI.

Maps a parsed subcommand to its coroutine, creating a signed client only for
commands that touch the private API.
"""

import argparse
import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from .. import commands
from ..config import ClientConfig
from ..core.api_client import YobitClient
from ..utilities.auth import create_client

logger = logging.getLogger(__name__)

PUBLIC_COMMANDS = {"info", "ticker", "depth", "trades"}


class CommandRouter:
    """Routes parsed CLI arguments to command implementations."""

    def __init__(self, config: ClientConfig | None = None):
        self._config = config

    @property
    def config(self) -> ClientConfig:
        if self._config is None:
            self._config = ClientConfig.from_env()
        return self._config

    def route_command(self, args: argparse.Namespace) -> int:
        """Run the command selected by args and return a process exit code."""
        if args.command in PUBLIC_COMMANDS:
            success = asyncio.run(self._run_public(args))
        else:
            success = asyncio.run(self._run_private(args))
        return 0 if success is not False else 1

    async def _run_public(self, args: argparse.Namespace) -> Any:
        proxy = args.proxy or self.config.proxy_url
        api_host = self.config.api_host

        if args.command == "info":
            return await commands.info_command(proxy, api_host)
        elif args.command == "ticker":
            return await commands.ticker_command(args.pairs, proxy, api_host)
        elif args.command == "depth":
            return await commands.depth_command(args.pairs, args.limit, proxy, api_host)
        else:
            return await commands.trades_command(args.pairs, proxy, api_host)

    async def _run_private(self, args: argparse.Namespace) -> bool:
        handler = self._private_handler(args)
        async with create_client(self.config, proxy_url=args.proxy) as client:
            logger.debug(f"Running {args.command} with nonce starting at {client.nonce}")
            return await handler(client)

    def _private_handler(
        self, args: argparse.Namespace
    ) -> Callable[[YobitClient], Awaitable[bool]]:
        handlers: dict[str, Callable[[YobitClient], Awaitable[bool]]] = {
            "balance": lambda c: commands.balance_command(c),
            "orders": lambda c: commands.orders_command(c, args.pair),
            "order": lambda c: commands.order_command(c, args.order_id),
            "cancel": lambda c: commands.cancel_command(c, args.order_id),
            "trade": lambda c: commands.trade_command(
                c, args.pair, args.side, args.rate, args.amount
            ),
            "history": lambda c: commands.history_command(
                c,
                from_=args.from_,
                count=args.count,
                from_id=args.from_id,
                end_id=args.end_id,
                order=args.order,
                since=args.since,
                end=args.end,
                pair=args.pair,
            ),
            "deposit-address": lambda c: commands.deposit_address_command(c, args.coin, args.new),
            "withdraw": lambda c: commands.withdraw_command(
                c, args.coin, args.amount, args.address, args.yes
            ),
        }
        if args.command == "coupon":
            if args.coupon_action == "create":
                return lambda c: commands.coupon_create_command(c, args.currency, args.amount)
            return lambda c: commands.coupon_redeem_command(c, args.code)

        if args.command not in handlers:
            raise ValueError(f"Unknown command: {args.command}")
        return handlers[args.command]


def create_command_router(config: ClientConfig | None = None) -> CommandRouter:
    """Create command router."""
    return CommandRouter(config)
