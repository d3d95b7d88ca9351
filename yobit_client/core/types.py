"""
Shared protocol types for structural typing across the client and transports.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Mapping
from typing import Any, Protocol, runtime_checkable

# Maps the current nonce to the next one; may be a coroutine function so that
# nonces can be kept in an external store.
NonceUpdatePolicy = Callable[[int], int | Awaitable[int]]

# Primitive values accepted in a private request body. None means "omit".
ParamValue = str | int | float | None


@runtime_checkable
class HTTPTransport(Protocol):
    """Minimal transport contract used by the public and private API layers.

    The aiohttp transport and test doubles are interchangeable as long as
    they implement these coroutines and return decoded JSON.
    """

    async def get_json(
        self, url: str, params: Mapping[str, Any] | None = None, proxy: str | None = None
    ) -> Any: ...

    async def post_form(
        self, url: str, body: str, headers: Mapping[str, str], proxy: str | None = None
    ) -> Any: ...

    async def close(self) -> None: ...
