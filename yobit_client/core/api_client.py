"""
API client for YoBit.

Every private operation goes through YobitClient.request(), which advances
the nonce, signs the exact form body with the account secret and POSTs it to
the single private endpoint. The trading wrappers only assemble parameters
for one remote method each; responses are returned exactly as the exchange
sends them, including `{"success": 0, "error": ...}` payloads.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..utilities.constants import (
    API_HOST,
    DEFAULT_DEPTH_LIMIT,
    DEFAULT_TIMEOUT,
    PRIVATE_API_SUFFIX,
    OrderSide,
    SortOrder,
)
from ..utilities.formatters import format_pairs
from ..utilities.trading_helpers import normalize_side, normalize_sort_order
from ..utilities.validators import validate_flag, validate_non_empty_string
from . import public_api
from .nonce import NonceManager
from .signer import sign_request
from .transport import AiohttpTransport
from .types import HTTPTransport, NonceUpdatePolicy, ParamValue

logger = logging.getLogger(__name__)


class YobitClient:
    """
    Client bound to one YoBit API key.

    Args:
        key: Public API key
        secret: API secret used to sign requests
        nonce: Last nonce used with this key; defaults to the current unix time
        nonce_update_fn: Maps the current nonce to the next one, sync or async.
            Defaults to incrementing by one.
        proxy_url: Default proxy for private requests
        transport: Transport to use; an AiohttpTransport is created otherwise
        api_host: Exchange base URL
        timeout: Total request timeout in seconds for the default transport
    """

    def __init__(
        self,
        key: str,
        secret: str,
        *,
        nonce: int | None = None,
        nonce_update_fn: NonceUpdatePolicy | None = None,
        proxy_url: str | None = None,
        transport: HTTPTransport | None = None,
        api_host: str = API_HOST,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        validate_non_empty_string(key, "API key")
        validate_non_empty_string(secret, "API secret")

        self._key = key
        self._secret = secret
        self._nonce = NonceManager(nonce, nonce_update_fn)
        self.proxy_url = proxy_url
        self.api_host = api_host.rstrip("/")
        self._owns_transport = transport is None
        self._transport = transport or AiohttpTransport(timeout=timeout)

    async def __aenter__(self) -> "YobitClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def close(self) -> None:
        """Release the transport if the client created it."""
        if self._owns_transport:
            await self._transport.close()

    @property
    def key(self) -> str:
        return self._key

    @property
    def nonce(self) -> int:
        """Last nonce sent (or the initial value before any private call)."""
        return self._nonce.current

    @property
    def private_url(self) -> str:
        return f"{self.api_host}/{PRIVATE_API_SUFFIX}"

    # Public API

    async def info(self) -> Any:
        """Get server time and pair limits. See public_api.info."""
        return await public_api.info(
            transport=self._transport, api_host=self.api_host, proxy=self.proxy_url
        )

    async def ticker(self, pairs: str | Sequence[str]) -> Any:
        """Get 24h statistics. See public_api.ticker."""
        return await public_api.ticker(
            pairs, transport=self._transport, api_host=self.api_host, proxy=self.proxy_url
        )

    async def depth(self, pairs: str | Sequence[str], limit: int = DEFAULT_DEPTH_LIMIT) -> Any:
        """Get order book. See public_api.depth."""
        return await public_api.depth(
            pairs, limit, transport=self._transport, api_host=self.api_host, proxy=self.proxy_url
        )

    async def trades(self, pairs: str | Sequence[str]) -> Any:
        """Get recent trades. See public_api.trades."""
        return await public_api.trades(
            pairs, transport=self._transport, api_host=self.api_host, proxy=self.proxy_url
        )

    # Private API

    async def request(
        self,
        method: str,
        params: Mapping[str, ParamValue] | None = None,
        *,
        proxy: str | None = None,
    ) -> Any:
        """
        Send a signed request to the private API.

        Args:
            method: Remote method name (e.g. "getInfo")
            params: Method parameters in body order; None values are omitted
            proxy: Proxy for this call, overriding the client default

        Returns:
            Decoded JSON response, whatever its `success` flag

        Raises:
            TransportError: On network failure, non-2xx status or invalid JSON
            NonceError: If the nonce update policy does not increase the nonce
        """
        nonce = await self._nonce.advance()
        signed = sign_request(
            self.private_url,
            method,
            params,
            nonce,
            self._key,
            self._secret,
            proxy=proxy or self.proxy_url,
        )
        logger.debug(f"Private call {method} with nonce {nonce}")
        return await self._transport.post_form(
            signed.url, signed.body, signed.headers, proxy=signed.proxy
        )

    async def get_info(self, *, proxy: str | None = None) -> Any:
        """
        Get balances, API key rights and server time.

        Returns:
            {"success": 1, "return": {"funds": {...}, "funds_incl_orders": {...},
            "rights": {"info": 1, "trade": 0, "withdraw": 0},
            "transaction_count": 0, "open_orders": 1, "server_time": ...}}

        Key access: info
        """
        return await self.request("getInfo", proxy=proxy)

    async def trade(
        self,
        pair: str,
        type: str | OrderSide,
        rate: float | str,
        amount: float | str,
        *,
        proxy: str | None = None,
    ) -> Any:
        """
        Create a new order.

        Args:
            pair: Pair (e.g. "btc_usd")
            type: "buy" or "sell"
            rate: Order price
            amount: Order size

        Returns:
            {"success": 1, "return": {"received": ..., "remains": ...,
            "order_id": ..., "funds": {...}}}

        Key access: info & trade
        """
        params = {
            "pair": format_pairs(pair),
            "type": normalize_side(type).value,
            "rate": rate,
            "amount": amount,
        }
        return await self.request("Trade", params, proxy=proxy)

    async def active_orders(self, pair: str, *, proxy: str | None = None) -> Any:
        """
        Get the user's active orders for a pair.

        Key access: info
        """
        return await self.request("ActiveOrders", {"pair": format_pairs(pair)}, proxy=proxy)

    async def order_info(self, order_id: int | str, *, proxy: str | None = None) -> Any:
        """
        Get details of one order.

        Order status: 0 active, 1 executed and closed, 2 canceled,
        3 canceled but partially executed.

        Key access: info
        """
        return await self.request("OrderInfo", {"order_id": order_id}, proxy=proxy)

    async def cancel_order(self, order_id: int | str, *, proxy: str | None = None) -> Any:
        """
        Cancel an order.

        Returns:
            {"success": 1, "return": {"order_id": ..., "funds": {...}}}

        Key access: info & trade
        """
        return await self.request("CancelOrder", {"order_id": order_id}, proxy=proxy)

    async def trade_history(
        self,
        *,
        from_: int | None = None,
        count: int | None = None,
        from_id: int | None = None,
        end_id: int | None = None,
        order: str | SortOrder | None = None,
        since: int | None = None,
        end: int | None = None,
        pair: str | None = None,
        proxy: str | None = None,
    ) -> Any:
        """
        Get the user's trade history.

        All filters are optional and left to the exchange defaults when unset
        (from 0, count 1000, from_id 0, end_id and end unbounded, order DESC,
        since 0). With `since` the history reaches back at most one week.

        Key access: info
        """
        params = {
            "from": from_,
            "count": count,
            "from_id": from_id,
            "end_id": end_id,
            "order": normalize_sort_order(order).value if order is not None else None,
            "since": since,
            "end": end,
            "pair": format_pairs(pair) if pair is not None else None,
        }
        return await self.request("TradeHistory", params, proxy=proxy)

    async def get_deposit_address(
        self, coin_name: str, need_new: int | bool = 0, *, proxy: str | None = None
    ) -> Any:
        """
        Get the deposit address for a coin.

        Args:
            coin_name: Currency code (e.g. "BTC")
            need_new: 1 to generate a new address

        Key access: deposits
        """
        params = {"coinName": coin_name, "need_new": validate_flag(need_new, "need_new")}
        return await self.request("GetDepositAddress", params, proxy=proxy)

    async def withdraw_coins_to_address(
        self,
        coin_name: str,
        amount: float | str,
        address: str,
        *,
        proxy: str | None = None,
    ) -> Any:
        """
        Request a withdrawal of funds to an external address.

        Key access: withdrawals
        """
        params = {"coinName": coin_name, "amount": amount, "address": address}
        return await self.request("WithdrawCoinsToAddress", params, proxy=proxy)

    async def create_yobicode(
        self, currency: str, amount: float | str, *, proxy: str | None = None
    ) -> Any:
        """
        Create a Yobicode (coupon).

        Returns:
            {"success": 1, "return": {"coupon": ..., "transID": 1, "funds": {...}}}

        Key access: withdrawals
        """
        return await self.request(
            "CreateYobicode", {"currency": currency, "amount": amount}, proxy=proxy
        )

    async def redeem_yobicode(self, coupon: str, *, proxy: str | None = None) -> Any:
        """
        Redeem a Yobicode (coupon).

        Returns:
            {"success": 1, "return": {"couponAmount": ..., "couponCurrency": ...,
            "transID": 1, "funds": {...}}}

        Key access: deposits
        """
        return await self.request("RedeemYobicode", {"coupon": coupon}, proxy=proxy)
