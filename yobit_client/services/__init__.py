"""
Services package: pluggable collaborators for the client.
"""

from .nonce_store import FileNonceStore

__all__ = ["FileNonceStore"]
