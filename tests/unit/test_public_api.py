"""
Unit tests for the public market-data functions.
"""

from unittest.mock import AsyncMock, patch

import pytest

from tests.fixtures import api_responses
from yobit_client.core import public_api
from yobit_client.utilities.constants import HTTPStatusError


class TestPublicUrl:
    """Test cases for public URL construction."""

    def test_default_host(self):
        assert public_api.public_url("info") == "https://yobit.net/api/3/info"

    def test_custom_host_trailing_slash(self):
        assert (
            public_api.public_url("ticker/btc_usd", "http://localhost:1234/")
            == "http://localhost:1234/api/3/ticker/btc_usd"
        )


class TestPublicEndpoints:
    """Test cases for each public endpoint."""

    @pytest.mark.asyncio
    async def test_info(self, transport):
        transport.queue_response(api_responses.info_response())
        result = await public_api.info(transport=transport)

        assert result["pairs"]["ltc_btc"]["fee"] == 0.2
        assert transport.last_request.url == "https://yobit.net/api/3/info"
        assert transport.last_request.params is None

    @pytest.mark.asyncio
    async def test_ticker_multiple_pairs(self, transport):
        await public_api.ticker(["BTC_USD", "LTC_BTC"], transport=transport)
        assert transport.last_request.url == "https://yobit.net/api/3/ticker/btc_usd-ltc_btc"

    @pytest.mark.asyncio
    async def test_depth_default_limit(self, transport):
        transport.queue_response(api_responses.depth_response())
        result = await public_api.depth("ltc_btc", transport=transport)

        assert result["ltc_btc"]["asks"][0] == [104.67, 0.01]
        assert transport.last_request.url == "https://yobit.net/api/3/depth/ltc_btc"
        assert transport.last_request.params == {"limit": 100}

    @pytest.mark.asyncio
    async def test_depth_invalid_limit(self, transport):
        with pytest.raises(ValueError):
            await public_api.depth("ltc_btc", 0, transport=transport)
        assert transport.requests == []

    @pytest.mark.asyncio
    async def test_trades(self, transport):
        transport.queue_response(api_responses.trades_response())
        result = await public_api.trades("LTC_BTC", transport=transport)

        assert len(result["ltc_btc"]) == 2
        assert transport.last_request.url == "https://yobit.net/api/3/trades/ltc_btc"

    @pytest.mark.asyncio
    async def test_proxy_and_host_passthrough(self, transport):
        await public_api.info(
            transport=transport, api_host="http://mirror.example", proxy="http://proxy:3128"
        )
        assert transport.last_request.url == "http://mirror.example/api/3/info"
        assert transport.last_request.proxy == "http://proxy:3128"

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self, transport):
        url = "https://yobit.net/api/3/info"
        transport.queue_response(HTTPStatusError(503, "maintenance", url))
        with pytest.raises(HTTPStatusError) as exc_info:
            await public_api.info(transport=transport)
        assert exc_info.value.status == 503

    @pytest.mark.asyncio
    async def test_short_lived_transport_without_argument(self):
        with patch.object(
            public_api.AiohttpTransport, "get_json", new=AsyncMock(return_value={"ok": 1})
        ) as get_json, patch.object(
            public_api.AiohttpTransport, "close", new=AsyncMock()
        ) as close:
            result = await public_api.ticker("btc_usd")

        assert result == {"ok": 1}
        get_json.assert_awaited_once_with(
            "https://yobit.net/api/3/ticker/btc_usd", params=None, proxy=None
        )
        close.assert_awaited_once()
