"""
aiohttp-backed HTTP transport.

Sends GET requests for the public API and pre-encoded form POSTs for the
private API, decoding JSON responses. Every network, status or decoding
failure is translated into a TransportError subclass; payload-level
failures (`"success": 0`) are returned untouched.
"""

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from ..utilities.constants import (
    DEFAULT_TIMEOUT,
    HTTPStatusError,
    ResponseParseError,
    TransportError,
)

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """
    HTTP transport over a lazily created aiohttp.ClientSession.

    The session is opened on first use and released by close() or by
    leaving an `async with` block.
    """

    def __init__(
        self, timeout: float = DEFAULT_TIMEOUT, session: aiohttp.ClientSession | None = None
    ) -> None:
        self._timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    async def __aenter__(self) -> "AiohttpTransport":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
            self._owns_session = True
        return self._session

    async def close(self) -> None:
        """Close the underlying session if this transport created it."""
        if self._session is not None and self._owns_session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def get_json(
        self, url: str, params: Mapping[str, Any] | None = None, proxy: str | None = None
    ) -> Any:
        """GET url with optional query parameters and return the decoded JSON."""
        logger.debug(f"GET {url} params={dict(params) if params else {}}")
        return await self._send("GET", url, params=params, proxy=proxy)

    async def post_form(
        self, url: str, body: str, headers: Mapping[str, str], proxy: str | None = None
    ) -> Any:
        """POST an already encoded form body and return the decoded JSON."""
        logger.debug(f"POST {url} body={body}")
        return await self._send(
            "POST", url, data=body.encode("utf-8"), headers=dict(headers), proxy=proxy
        )

    async def _send(self, method: str, url: str, **kwargs: Any) -> Any:
        session = self._get_session()
        try:
            async with session.request(method, url, **kwargs) as response:
                raw = await response.read()
                status = response.status
        except asyncio.TimeoutError as e:
            logger.error(f"{method} {url} timed out")
            raise TransportError(f"Request to {url} timed out") from e
        except aiohttp.ClientError as e:
            logger.error(f"{method} {url} failed: {e}")
            raise TransportError(f"Request to {url} failed: {e}") from e

        if not 200 <= status < 300:
            logger.error(f"{method} {url} returned HTTP {status}")
            raise HTTPStatusError(status, raw.decode("utf-8", errors="replace"), url)

        try:
            return json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(f"{method} {url} returned a non-JSON body")
            preview = raw[:200].decode("utf-8", errors="replace")
            raise ResponseParseError(f"Invalid JSON from {url}: {preview}") from e
