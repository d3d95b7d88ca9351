"""
Argument parsing for the yobit CLI.

One subcommand per API endpoint, grouped into market-data commands that need
no credentials and account commands that sign requests.
"""

import argparse

from ..utilities.constants import DEFAULT_DEPTH_LIMIT


class CLIArgumentParser:
    """
    Argument parser for the yobit command.

    Separates argument parsing from command routing and execution.
    """

    def __init__(self):
        """Initialize the argument parser."""
        self.parser = argparse.ArgumentParser(prog="yobit", description="YoBit exchange API CLI")
        self.parser.add_argument(
            "-v", "--verbose", action="store_true", help="Enable debug logging"
        )
        self.parser.add_argument("--proxy", help="Proxy URL for outgoing requests")
        self.subparsers = self.parser.add_subparsers(dest="command", help="Available commands")
        self._setup_all_parsers()

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def _setup_all_parsers(self) -> None:
        """Set up all command parsers."""
        self._setup_market_commands()
        self._setup_order_commands()
        self._setup_funds_commands()

    def _setup_market_commands(self) -> None:
        """Set up public market-data parsers (info, ticker, depth, trades)."""
        self.subparsers.add_parser("info", help="Show server time and pair limits")

        parser_ticker = self.subparsers.add_parser("ticker", help="Show 24h pair statistics")
        parser_ticker.add_argument("pairs", nargs="+", help="Pairs, e.g. btc_usd ltc_btc")

        parser_depth = self.subparsers.add_parser("depth", help="Show order book")
        parser_depth.add_argument("pairs", nargs="+", help="Pairs, e.g. btc_usd")
        parser_depth.add_argument(
            "--limit",
            type=int,
            default=DEFAULT_DEPTH_LIMIT,
            help=f"Levels per side (default: {DEFAULT_DEPTH_LIMIT})",
        )

        parser_trades = self.subparsers.add_parser("trades", help="Show recent trades")
        parser_trades.add_argument("pairs", nargs="+", help="Pairs, e.g. btc_usd")

    def _setup_order_commands(self) -> None:
        """Set up order management parsers (balance, orders, order, cancel, trade, history)."""
        self.subparsers.add_parser("balance", help="Show balances and key rights")

        parser_orders = self.subparsers.add_parser("orders", help="List active orders")
        parser_orders.add_argument("pair", help="Pair, e.g. btc_usd")

        parser_order = self.subparsers.add_parser("order", help="Show one order")
        parser_order.add_argument("order_id", type=int, help="Order ID")

        parser_cancel = self.subparsers.add_parser("cancel", help="Cancel an order")
        parser_cancel.add_argument("order_id", type=int, help="Order ID to cancel")

        parser_trade = self.subparsers.add_parser("trade", help="Place a limit order")
        parser_trade.add_argument("pair", help="Pair, e.g. btc_usd")
        parser_trade.add_argument("side", choices=["buy", "sell"], help="Order side")
        parser_trade.add_argument("rate", help="Order price")
        parser_trade.add_argument("amount", help="Order size")

        parser_history = self.subparsers.add_parser("history", help="Show own trade history")
        parser_history.add_argument("--pair", help="Filter by pair")
        parser_history.add_argument("--from", dest="from_", type=int, help="Start trade number")
        parser_history.add_argument("--count", type=int, help="Number of trades")
        parser_history.add_argument("--from-id", type=int, help="Start trade ID")
        parser_history.add_argument("--end-id", type=int, help="End trade ID")
        parser_history.add_argument("--order", choices=["ASC", "DESC"], help="Sort order")
        parser_history.add_argument("--since", type=int, help="Start unix time")
        parser_history.add_argument("--end", type=int, help="End unix time")

    def _setup_funds_commands(self) -> None:
        """Set up deposit, withdrawal and coupon parsers."""
        parser_deposit = self.subparsers.add_parser(
            "deposit-address", help="Show deposit address for a coin"
        )
        parser_deposit.add_argument("coin", help="Coin, e.g. BTC")
        parser_deposit.add_argument(
            "--new", action="store_true", help="Generate a new address"
        )

        parser_withdraw = self.subparsers.add_parser("withdraw", help="Withdraw coins")
        parser_withdraw.add_argument("coin", help="Coin, e.g. BTC")
        parser_withdraw.add_argument("amount", help="Amount to withdraw")
        parser_withdraw.add_argument("address", help="Destination address")
        parser_withdraw.add_argument(
            "-y", "--yes", action="store_true", help="Skip confirmation prompt"
        )

        parser_coupon = self.subparsers.add_parser("coupon", help="Create or redeem Yobicodes")
        coupon_actions = parser_coupon.add_subparsers(dest="coupon_action", required=True)

        parser_create = coupon_actions.add_parser("create", help="Create a Yobicode")
        parser_create.add_argument("currency", help="Currency, e.g. BTC")
        parser_create.add_argument("amount", help="Coupon amount")

        parser_redeem = coupon_actions.add_parser("redeem", help="Redeem a Yobicode")
        parser_redeem.add_argument("code", help="Coupon code")


def create_cli_parser() -> CLIArgumentParser:
    """Create CLI argument parser."""
    return CLIArgumentParser()
