"""
Core client components: signing, nonce tracking, transport and endpoints.
"""

from .api_client import YobitClient
from .nonce import NonceManager, increment_nonce
from .signer import SignedRequest, build_form, encode_form, sign, sign_request
from .transport import AiohttpTransport

__all__ = [
    "AiohttpTransport",
    "NonceManager",
    "SignedRequest",
    "YobitClient",
    "build_form",
    "encode_form",
    "increment_nonce",
    "sign",
    "sign_request",
]
