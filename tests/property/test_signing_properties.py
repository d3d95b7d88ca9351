"""
Property-based tests for signing, form encoding and nonce sequencing.

Uses Hypothesis to generate parameter sets, pair lists and nonce policies
and checks the invariants the private API depends on.
"""

import asyncio
import hashlib
import hmac
from urllib.parse import parse_qsl

from hypothesis import given, settings
from hypothesis import strategies as st

from tests.mocks import RecordingTransport
from yobit_client.core.api_client import YobitClient
from yobit_client.core.nonce import NonceManager
from yobit_client.core.signer import build_form, encode_form, sign, sign_request
from yobit_client.utilities.formatters import format_pairs

param_names = st.text(
    alphabet=st.characters(min_codepoint=97, max_codepoint=122), min_size=1, max_size=10
).filter(lambda name: name not in ("method", "nonce"))

param_values = st.one_of(
    st.none(),
    st.integers(min_value=0, max_value=10**12),
    st.text(max_size=20),
    st.decimals(min_value=0, max_value=10**6, places=8, allow_nan=False).map(str),
)


@st.composite
def valid_pairs(draw):
    """Generate pair strings such as 'btc_usd' in mixed case."""
    currency = st.text(
        alphabet=st.sampled_from("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"),
        min_size=2,
        max_size=6,
    )
    return f"{draw(currency)}_{draw(currency)}"


class TestSigningProperties:
    """Property-based tests for request signing."""

    @given(st.text(), st.text(min_size=1))
    def test_sign_matches_reference_hmac(self, message, secret):
        expected = hmac.new(
            secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha512
        ).hexdigest()
        assert sign(message, secret) == expected

    @given(st.dictionaries(param_names, param_values, max_size=8), st.integers(min_value=1))
    def test_body_order_and_omission(self, params, nonce):
        form = build_form("Method", params, nonce)
        decoded = parse_qsl(encode_form(form), keep_blank_values=True)

        expected_names = ["method"] + [k for k, v in params.items() if v is not None] + ["nonce"]
        assert [name for name, _ in decoded] == expected_names
        assert decoded[-1] == ("nonce", str(nonce))

    @given(st.dictionaries(param_names, param_values, max_size=8), st.integers(min_value=1))
    def test_signature_covers_transmitted_body(self, params, nonce):
        signed = sign_request("u", "Method", params, nonce, "key", "secret")
        assert signed.headers["sign"] == sign(signed.body, "secret")
        assert signed.body == encode_form(build_form("Method", params, nonce))


class TestPairProperties:
    """Property-based tests for pair normalization."""

    @given(st.lists(valid_pairs(), min_size=1, max_size=5))
    def test_join_and_lower(self, pairs):
        formatted = format_pairs(pairs)
        assert formatted == formatted.lower()
        assert formatted.split("-") == [pair.lower() for pair in pairs]

    @given(valid_pairs())
    def test_single_string_passthrough(self, pair):
        assert format_pairs(pair) == pair.lower()
        assert format_pairs([pair]) == format_pairs(pair)


class TestNonceProperties:
    """Property-based tests for nonce sequencing."""

    @given(st.integers(min_value=0, max_value=10**12), st.integers(min_value=1, max_value=30))
    def test_sequential_nonces_strictly_increase(self, start, count):
        async def run():
            manager = NonceManager(start)
            return [await manager.advance() for _ in range(count)]

        nonces = asyncio.run(run())
        assert nonces == list(range(start + 1, start + count + 1))

    @settings(max_examples=25, deadline=None)
    @given(st.integers(min_value=2, max_value=15), st.integers(min_value=1, max_value=5))
    def test_concurrent_private_calls_get_unique_nonces(self, calls, step):
        async def policy(nonce):
            await asyncio.sleep(0)
            return nonce + step

        async def run():
            transport = RecordingTransport()
            client = YobitClient("k", "s", nonce=1, nonce_update_fn=policy, transport=transport)
            await asyncio.gather(*(client.cancel_order(i) for i in range(calls)))
            return transport.nonces

        nonces = asyncio.run(run())
        assert len(set(nonces)) == calls
        assert sorted(nonces) == [1 + step * i for i in range(1, calls + 1)]
