"""
Credential lookup and client construction.
"""

from ..config import ClientConfig
from ..core.api_client import YobitClient
from ..services.nonce_store import FileNonceStore
from .constants import ENV_API_KEY, ENV_API_SECRET, ConfigurationError


def get_credentials(config: ClientConfig | None = None) -> tuple[str, str]:
    """Get API credentials from environment variables or .env file"""
    config = config or ClientConfig.from_env()

    if not config.has_credentials:
        raise ConfigurationError(
            "Missing API credentials. Set them using one of these methods:\n"
            f"  export {ENV_API_KEY}='your_api_key_here'\n"
            f"  export {ENV_API_SECRET}='your_api_secret_here'\n"
            "or put the same KEY=value lines in a .env file in the working directory."
        )

    return config.api_key, config.api_secret


def create_client(config: ClientConfig | None = None, proxy_url: str | None = None) -> YobitClient:
    """
    Create a YobitClient from configuration.

    When a nonce file is configured the client starts from the stored nonce
    and persists every new one through FileNonceStore.
    """
    config = config or ClientConfig.from_env()
    api_key, api_secret = get_credentials(config)

    nonce = None
    nonce_update_fn = None
    if config.nonce_file:
        store = FileNonceStore(config.nonce_file)
        nonce = store.load()
        nonce_update_fn = store

    return YobitClient(
        api_key,
        api_secret,
        nonce=nonce,
        nonce_update_fn=nonce_update_fn,
        proxy_url=proxy_url or config.proxy_url,
        api_host=config.api_host,
        timeout=config.timeout,
    )
