"""Tests for request field decoding.

Invariants:
1. Valid addresses round-trip through decode / encode unchanged
2. Non-base58 or wrong-length input yields InvalidInput, never raises
3. Multi-field parsing stops at the first invalid field
4. Secret keys must be 64 bytes whose tail is the seed's public key
"""

import base64

import base58
import pytest
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from solgate.core.codec import (
    decode_secret,
    decode_signature,
    encode_base64,
    encode_message,
    encode_secret,
    parse_pubkey,
    parse_pubkeys,
)
from solgate.core.errors import InvalidInput

from conftest import BAD_ADDRESSES, SYSTEM_PROGRAM, make_keypair


class TestParsePubkey:
    """Tests for address decoding."""

    def test_round_trip_is_identity(self):
        """Decoding then re-encoding a valid address returns the same text."""
        for n in range(10):
            address = str(make_keypair(n).pubkey())
            parsed = parse_pubkey(address, "mint", "Invalid mint address")
            assert isinstance(parsed, Pubkey)
            assert str(parsed) == address

    def test_all_zero_address(self):
        """The system program address decodes to 32 zero bytes."""
        parsed = parse_pubkey(SYSTEM_PROGRAM, "from", "Invalid 'from' address")
        assert bytes(parsed) == bytes(32)

    @pytest.mark.parametrize("value", BAD_ADDRESSES + ["", "1" * 33])
    def test_invalid_returns_error(self, value: str):
        """Invalid text produces InvalidInput with the given message."""
        parsed = parse_pubkey(value, "mint", "Invalid mint address")
        assert parsed == InvalidInput(field="mint", message="Invalid mint address")

    def test_non_ascii_returns_error(self):
        """Non-ASCII text is rejected, not raised."""
        parsed = parse_pubkey("адрес", "to", "Invalid 'to' address")
        assert isinstance(parsed, InvalidInput)


class TestParsePubkeys:
    """Tests for fail-fast multi-field decoding."""

    def test_returns_all_in_order(self):
        """All valid fields come back in declaration order."""
        a = str(make_keypair(1).pubkey())
        b = str(make_keypair(2).pubkey())
        parsed = parse_pubkeys((a, "a", "bad a"), (b, "b", "bad b"))
        assert [str(p) for p in parsed] == [a, b]

    def test_stops_at_first_invalid(self):
        """The first invalid field is reported even if later ones are bad too."""
        good = str(make_keypair(1).pubkey())
        parsed = parse_pubkeys(
            (good, "mint", "Invalid mint address"),
            ("bad!", "destination", "Invalid destination address"),
            ("bad!", "authority", "Invalid authority address"),
        )
        assert parsed == InvalidInput(
            field="destination", message="Invalid destination address"
        )


class TestDecodeSecret:
    """Tests for secret key decoding."""

    def test_round_trip(self):
        """An encoded keypair decodes to the same public key."""
        keypair = Keypair()
        decoded = decode_secret(encode_secret(keypair))
        assert isinstance(decoded, Keypair)
        assert decoded.pubkey() == keypair.pubkey()

    def test_encoded_secret_is_64_bytes(self):
        """encode_secret emits the 64-byte seed + pubkey form."""
        keypair = make_keypair(5)
        raw = base58.b58decode(encode_secret(keypair))
        assert len(raw) == 64
        assert raw[32:] == bytes(keypair.pubkey())

    def test_invalid_base58(self):
        """Non-base58 text is reported as such."""
        assert decode_secret("0OIl") == InvalidInput(
            field="secret", message="Invalid base58 secret key"
        )

    def test_wrong_length(self):
        """A 32-byte value is not a full secret key."""
        short = base58.b58encode(bytes(range(32))).decode()
        assert decode_secret(short) == InvalidInput(
            field="secret", message="Failed to deserialize secret key"
        )

    @pytest.mark.parametrize("suffix", ["\n", "  ", "\t"])
    def test_surrounding_whitespace(self, suffix: str):
        """Whitespace around an otherwise valid secret is not base58."""
        secret = encode_secret(make_keypair(3))
        assert decode_secret(secret + suffix) == InvalidInput(
            field="secret", message="Invalid base58 secret key"
        )
        assert decode_secret(suffix + secret) == InvalidInput(
            field="secret", message="Invalid base58 secret key"
        )

    def test_oversized_rejected_before_decoding(self):
        """Text longer than any 64-byte encoding is refused outright."""
        assert decode_secret("z" * 89) == InvalidInput(
            field="secret", message="Invalid base58 secret key"
        )

    def test_mismatched_public_half(self):
        """Seed and public key halves must belong together."""
        raw = bytes(make_keypair(1))[:32] + bytes(make_keypair(2).pubkey())
        assert decode_secret(base58.b58encode(raw).decode()) == InvalidInput(
            field="secret", message="Failed to deserialize secret key"
        )


class TestDecodeSignature:
    """Tests for signature decoding."""

    def test_valid_signature(self):
        """64 bytes of base64 decode unchanged."""
        sig = bytes(range(64))
        assert decode_signature(encode_base64(sig)) == sig

    def test_invalid_base64(self):
        """Characters outside the base64 alphabet are rejected."""
        assert decode_signature("not*base64!") == InvalidInput(
            field="signature", message="Invalid base64 signature"
        )

    def test_wrong_length(self):
        """Well-formed base64 of the wrong length is a format error."""
        short = base64.b64encode(bytes(10)).decode()
        assert decode_signature(short) == InvalidInput(
            field="signature", message="Invalid signature format"
        )


class TestEncodeMessage:
    """Tests for message text to bytes."""

    def test_utf8_bytes(self):
        assert encode_message("héllo") == "héllo".encode("utf-8")

    @pytest.mark.parametrize("text", ["\ud800", "ok\udfff", "\udc00tail"])
    def test_lone_surrogate(self, text: str):
        """Text that cannot be UTF-8 encoded is an input error."""
        assert encode_message(text) == InvalidInput(
            field="message", message="Invalid UTF-8 message"
        )
