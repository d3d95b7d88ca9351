"""
Nonce tracking for private API requests.

The private endpoint rejects any nonce that is not greater than the last one
seen for a key. A NonceManager holds the current value for one credential
pair and serializes the read -> update -> commit sequence with an
asyncio.Lock, since the update policy may suspend (e.g. a remote or
file-backed nonce store).
"""

import asyncio
import inspect
import logging
import time

from ..utilities.constants import NonceError
from .types import NonceUpdatePolicy

logger = logging.getLogger(__name__)


def increment_nonce(nonce: int) -> int:
    """Default update policy: add one."""
    return nonce + 1


def current_timestamp_nonce() -> int:
    """Initial nonce derived from wall-clock seconds."""
    return int(time.time())


class NonceManager:
    """
    Per-credential nonce state with a pluggable update policy.

    Args:
        nonce: Last nonce used with this key; defaults to the current unix time
        update_policy: Callable mapping current nonce to the next one. May
            return an awaitable. Defaults to incrementing by one.
    """

    def __init__(
        self, nonce: int | None = None, update_policy: NonceUpdatePolicy | None = None
    ) -> None:
        self._nonce = current_timestamp_nonce() if nonce is None else int(nonce)
        self._update_policy = update_policy or increment_nonce
        self._lock: asyncio.Lock | None = None
        self._lock_loop: asyncio.AbstractEventLoop | None = None

    def _get_lock(self) -> asyncio.Lock:
        # One lock per event loop; a manager may outlive an asyncio.run() call.
        loop = asyncio.get_running_loop()
        if self._lock is None or self._lock_loop is not loop:
            self._lock = asyncio.Lock()
            self._lock_loop = loop
        return self._lock

    @property
    def current(self) -> int:
        """Last committed nonce."""
        return self._nonce

    async def advance(self) -> int:
        """
        Apply the update policy once and commit the result.

        Concurrent callers are serialized, so each receives a distinct nonce.

        Raises:
            NonceError: If the policy returns a value not greater than the
                current nonce. The stored nonce is left unchanged.
        """
        async with self._get_lock():
            result = self._update_policy(self._nonce)
            if inspect.isawaitable(result):
                result = await result

            next_nonce = int(result)
            if next_nonce <= self._nonce:
                raise NonceError(
                    f"Nonce update policy returned {next_nonce}, "
                    f"which is not greater than current nonce {self._nonce}"
                )

            self._nonce = next_nonce
            logger.debug(f"Nonce advanced to {next_nonce}")
            return next_nonce
