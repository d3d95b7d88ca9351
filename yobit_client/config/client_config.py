"""
Client configuration loaded from the environment.

Values come from YOBIT_* environment variables first and fall back to a
`.env` file (KEY=value lines, `#` comments, optional quotes).
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from ..utilities.constants import (
    API_HOST,
    DEFAULT_TIMEOUT,
    ENV_API_HOST,
    ENV_API_KEY,
    ENV_API_SECRET,
    ENV_NONCE_FILE,
    ENV_PROXY_URL,
    ENV_TIMEOUT,
    ConfigurationError,
)


def read_env_file(path: str | os.PathLike) -> dict[str, str]:
    """Parse a .env file into a dict; a missing file yields an empty dict."""
    env_path = Path(path)
    if not env_path.exists():
        return {}

    values = {}
    with open(env_path, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#") and "=" in line:
                key, value = line.split("=", 1)
                key = key.strip()
                if key.startswith("export "):
                    key = key[len("export ") :].strip()
                values[key] = value.strip().strip('"').strip("'")
    return values


@dataclass(frozen=True)
class ClientConfig:
    """Settings needed to build a YobitClient."""

    api_key: str | None = None
    api_secret: str | None = None
    api_host: str = API_HOST
    proxy_url: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    nonce_file: str | None = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout}")

        if not self.api_host.startswith(("http://", "https://")):
            raise ConfigurationError(f"API host must be an http(s) URL, got {self.api_host}")

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key and self.api_secret)

    @classmethod
    def from_mapping(cls, values: Mapping[str, str]) -> "ClientConfig":
        """Build configuration from a mapping of YOBIT_* variables."""
        timeout_raw = values.get(ENV_TIMEOUT)
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_TIMEOUT
        except ValueError as e:
            raise ConfigurationError(f"Invalid {ENV_TIMEOUT}: {timeout_raw}") from e

        return cls(
            api_key=values.get(ENV_API_KEY) or None,
            api_secret=values.get(ENV_API_SECRET) or None,
            api_host=values.get(ENV_API_HOST) or API_HOST,
            proxy_url=values.get(ENV_PROXY_URL) or None,
            timeout=timeout,
            nonce_file=values.get(ENV_NONCE_FILE) or None,
        )

    @classmethod
    def from_env(cls, env_file: str | os.PathLike | None = ".env") -> "ClientConfig":
        """
        Load configuration from environment variables and an optional .env file.

        Environment variables take precedence over the file.
        """
        values = read_env_file(env_file) if env_file else {}
        values.update({key: value for key, value in os.environ.items() if value})
        return cls.from_mapping(values)
