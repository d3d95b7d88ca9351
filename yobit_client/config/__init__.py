"""
Configuration management for the YoBit client.
"""

from .client_config import ClientConfig, read_env_file

__all__ = ["ClientConfig", "read_env_file"]
