"""
File-backed nonce store.

Keeps the last issued nonce in a small JSON file so that nonces continue to
increase across process restarts, and across processes that share the same
key and file. A FileNonceStore is a callable nonce update policy and can be
passed directly as `nonce_update_fn` to YobitClient.

Concurrent writers are serialized with an exclusive `fcntl.flock` on a
sidecar `<name>.lock` file, so this store requires a POSIX system.
"""

import asyncio
import fcntl
import json
import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)


class FileNonceStore:
    """
    Nonce update policy persisted to a JSON file.

    The next nonce is one more than the larger of the client's current nonce
    and the stored one, so a stale in-memory value never reuses a nonce that
    another run already sent.
    """

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path).expanduser()
        self.lock_path = self.path.with_name(self.path.name + ".lock")

    async def __call__(self, nonce: int) -> int:
        return await asyncio.to_thread(self._advance, nonce)

    def load(self) -> int | None:
        """Return the stored nonce, or None if nothing has been stored yet."""
        if not self.path.exists():
            return None

        try:
            with open(self.path, encoding="utf-8") as f:
                return int(json.load(f)["nonce"])
        except (ValueError, KeyError, TypeError) as e:
            raise ValueError(f"Corrupt nonce file {self.path}: {e}") from e

    @contextmanager
    def _locked(self) -> Iterator[None]:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.lock_path, "a") as lock_file:
            fcntl.flock(lock_file.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(lock_file.fileno(), fcntl.LOCK_UN)

    def _advance(self, nonce: int) -> int:
        # Load and save happen under one lock.
        with self._locked():
            stored = self.load()
            next_nonce = max(nonce, stored if stored is not None else nonce) + 1
            self._save(next_nonce)
        logger.debug(f"Stored nonce {next_nonce} in {self.path}")
        return next_nonce

    def _save(self, nonce: int) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Readers only ever see a complete file.
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=".nonce-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"nonce": nonce}, f)
            os.replace(tmp_path, self.path)
        except OSError:
            os.unlink(tmp_path)
            raise
