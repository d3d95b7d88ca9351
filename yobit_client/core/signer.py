"""
Form encoding and HMAC-SHA512 signing for private API requests.

The private endpoint authenticates a request by the `sign` header, an
HMAC-SHA512 hex digest of the exact form body keyed by the account secret.
The body is therefore encoded once, signed, and the same string is sent.
"""

import hashlib
import hmac
from collections.abc import Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from urllib.parse import urlencode

from ..utilities.constants import FORM_CONTENT_TYPE, HEADER_KEY, HEADER_SIGN
from .types import ParamValue


def sign(message: str, secret: str) -> str:
    """Return the hex HMAC-SHA512 digest of message keyed by secret."""
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha512).hexdigest()


def build_form(method: str, params: Mapping[str, ParamValue] | None, nonce: int) -> dict:
    """
    Assemble the ordered form fields of a private request.

    `method` comes first, then the caller's parameters in their given order,
    then `nonce`. Parameters set to None are left out entirely.
    """
    form: dict[str, ParamValue] = {"method": method}
    for name, value in (params or {}).items():
        if name in ("method", "nonce"):
            raise ValueError(f"Parameter name is reserved: {name}")
        if value is not None:
            form[name] = value
    form["nonce"] = nonce
    return form


def format_value(value: ParamValue) -> ParamValue:
    """Render floats in positional notation (1e-05 is sent as 0.00001)."""
    if isinstance(value, float):
        return format(Decimal(repr(value)), "f")
    return value


def encode_form(form: Mapping[str, ParamValue]) -> str:
    """URL-encode form fields as key=value pairs in insertion order."""
    return urlencode(
        [(name, format_value(value)) for name, value in form.items() if value is not None]
    )


@dataclass(frozen=True)
class SignedRequest:
    """A private request ready for dispatch."""

    url: str
    body: str
    nonce: int
    headers: dict[str, str] = field(default_factory=dict)
    proxy: str | None = None


def sign_request(
    url: str,
    method: str,
    params: Mapping[str, ParamValue] | None,
    nonce: int,
    key: str,
    secret: str,
    proxy: str | None = None,
) -> SignedRequest:
    """Build, encode and sign a private request for the given nonce."""
    body = encode_form(build_form(method, params, nonce))
    headers = {
        HEADER_KEY: key,
        HEADER_SIGN: sign(body, secret),
        "Content-Type": FORM_CONTENT_TYPE,
    }
    return SignedRequest(url=url, body=body, nonce=nonce, headers=headers, proxy=proxy)
