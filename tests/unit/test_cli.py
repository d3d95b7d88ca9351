"""
Unit tests for CLI argument parsing, command routing and commands.
"""

import importlib
from unittest.mock import AsyncMock, patch

import pytest

from tests.fixtures import api_responses
from tests.mocks import RecordingTransport
from yobit_client.cli import main
from yobit_client.cli.argument_parser import create_cli_parser
from yobit_client.cli.command_router import create_command_router
from yobit_client.commands.account import report_response
from yobit_client.config import ClientConfig
from yobit_client.core.api_client import YobitClient


@pytest.fixture
def cli_transport():
    return RecordingTransport()


@pytest.fixture
def patched_client(cli_transport):
    """Route private commands to a client over the mock transport."""
    client = YobitClient("k", "s", nonce=1000, transport=cli_transport)
    with patch("yobit_client.cli.command_router.create_client", return_value=client) as factory:
        yield factory


@pytest.fixture
def router():
    return create_command_router(ClientConfig(api_key="k", api_secret="s"))


class TestArgumentParser:
    """Test cases for CLI argument parsing."""

    def test_depth_arguments(self):
        args = create_cli_parser().parse_args(["depth", "btc_usd", "ltc_btc", "--limit", "5"])
        assert args.command == "depth"
        assert args.pairs == ["btc_usd", "ltc_btc"]
        assert args.limit == 5

    def test_history_arguments(self):
        args = create_cli_parser().parse_args(
            ["history", "--pair", "btc_usd", "--from", "3", "--order", "ASC"]
        )
        assert args.from_ == 3
        assert args.order == "ASC"
        assert args.count is None

    def test_global_options(self):
        args = create_cli_parser().parse_args(["-v", "--proxy", "http://p:1", "balance"])
        assert args.verbose
        assert args.proxy == "http://p:1"

    def test_invalid_side_rejected(self):
        with pytest.raises(SystemExit):
            create_cli_parser().parse_args(["trade", "btc_usd", "hold", "1", "1"])

    def test_coupon_action_required(self):
        with pytest.raises(SystemExit):
            create_cli_parser().parse_args(["coupon"])


class TestCommandRouter:
    """Test cases for routing parsed arguments to commands."""

    def test_public_command(self, router):
        args = create_cli_parser().parse_args(["ticker", "BTC_USD"])
        with patch(
            "yobit_client.core.public_api.ticker",
            new=AsyncMock(return_value=api_responses.ticker_response("btc_usd")),
        ) as ticker:
            assert router.route_command(args) == 0

        ticker.assert_awaited_once()
        assert ticker.await_args.args[0] == ["BTC_USD"]

    def test_cancel_command(self, router, patched_client, cli_transport):
        cli_transport.queue_response(api_responses.cancel_order_response(42))
        args = create_cli_parser().parse_args(["cancel", "42"])

        assert router.route_command(args) == 0
        assert cli_transport.last_request.body == "method=CancelOrder&order_id=42&nonce=1001"

    def test_rejected_request_exits_non_zero(self, router, patched_client, cli_transport):
        cli_transport.queue_response(api_responses.error_response("invalid key"))
        args = create_cli_parser().parse_args(["balance"])
        assert router.route_command(args) == 1

    def test_history_command(self, router, patched_client, cli_transport):
        args = create_cli_parser().parse_args(["history", "--count", "10", "--pair", "LTC_BTC"])
        router.route_command(args)
        assert (
            cli_transport.last_request.body
            == "method=TradeHistory&count=10&pair=ltc_btc&nonce=1001"
        )

    def test_coupon_create_command(self, router, patched_client, cli_transport):
        cli_transport.queue_response(api_responses.create_yobicode_response())
        args = create_cli_parser().parse_args(["coupon", "create", "BTC", "0.5"])

        assert router.route_command(args) == 0
        assert cli_transport.last_request.form["method"] == "CreateYobicode"

    def test_withdraw_requires_confirmation(self, router, patched_client, cli_transport):
        args = create_cli_parser().parse_args(["withdraw", "BTC", "1", "addr"])
        with patch("yobit_client.commands.account.confirm_action", return_value=False):
            assert router.route_command(args) == 1
        assert cli_transport.requests == []

    def test_withdraw_with_yes_flag(self, router, patched_client, cli_transport):
        args = create_cli_parser().parse_args(["withdraw", "BTC", "1", "addr", "-y"])
        assert router.route_command(args) == 0
        assert cli_transport.last_request.form["address"] == "addr"

    def test_proxy_forwarded_to_factory(self, router, patched_client):
        args = create_cli_parser().parse_args(["--proxy", "http://p:1", "balance"])
        router.route_command(args)
        assert patched_client.call_args.kwargs["proxy_url"] == "http://p:1"


class TestMain:
    """Test cases for the CLI entry point."""

    def test_no_command_prints_help(self):
        assert main([]) == 0

    def test_missing_credentials(self, clean_env):
        assert main(["balance"]) == 1

    def test_main_module_import_does_not_run_cli(self):
        module = importlib.import_module("yobit_client.__main__")
        assert module.main is main


class TestReportResponse:
    """Test cases for response reporting."""

    def test_success(self):
        assert report_response({"success": 1, "return": {"order_id": 1}})

    def test_failure(self):
        assert not report_response(api_responses.error_response())

    def test_unexpected_shape(self):
        assert not report_response(["unexpected"])
