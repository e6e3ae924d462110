"""Decoding and validation of request fields.

Every address, secret key and signature string passes through here before
it reaches the ledger adapter. Functions return either the decoded value or
an InvalidInput naming the offending field; they never raise for bad input.

Encodings:
- addresses and secret keys: base58 (32 and 64 bytes)
- signatures and instruction payloads: standard base64
"""

from __future__ import annotations

import base64

import base58
from solders.keypair import Keypair
from solders.pubkey import Pubkey

from solgate.adapter import keypair_from_seed
from solgate.core.errors import InvalidInput

PUBKEY_LENGTH = 32
SECRET_KEY_LENGTH = 64
SIGNATURE_LENGTH = 64

# Longest base58 text of 32 / 64 bytes
MAX_PUBKEY_CHARS = 44
MAX_SECRET_CHARS = 88

BASE58_CHARS = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))


def _b58decode(value: str, max_chars: int) -> bytes | None:
    """Strict base58 decode: no whitespace, bounded length."""
    if not value or len(value) > max_chars or not BASE58_CHARS.issuperset(value):
        return None
    return base58.b58decode(value)


def parse_pubkey(value: str, field: str, message: str) -> Pubkey | InvalidInput:
    """Decode a base58 address into a Pubkey.

    Text longer than 44 characters is rejected before decoding.

    Args:
        value: Address text from the request.
        field: Request field name, reported on failure.
        message: Human-readable error for this field.

    Returns:
        Pubkey, or InvalidInput if the text is not canonical base58 of 32 bytes.
    """
    if len(value) > MAX_PUBKEY_CHARS:
        return InvalidInput(field=field, message=message)
    try:
        return Pubkey.from_string(value)
    except ValueError:
        return InvalidInput(field=field, message=message)


def parse_pubkeys(*fields: tuple[str, str, str]) -> list[Pubkey] | InvalidInput:
    """Decode several addresses, stopping at the first invalid one.

    Args:
        fields: (value, field, message) triples in validation order.

    Returns:
        Decoded pubkeys in the same order, or the first InvalidInput.
    """
    pubkeys: list[Pubkey] = []
    for value, field, message in fields:
        parsed = parse_pubkey(value, field, message)
        if isinstance(parsed, InvalidInput):
            return parsed
        pubkeys.append(parsed)
    return pubkeys


def decode_secret(value: str) -> Keypair | InvalidInput:
    """Decode a base58 64-byte secret key into a Keypair.

    The trailing 32 bytes must be the public key derived from the leading
    32-byte seed.

    Args:
        value: Secret key text from the request.

    Returns:
        Keypair, or InvalidInput describing the decoding failure.
    """
    raw = _b58decode(value, MAX_SECRET_CHARS)
    if raw is None:
        return InvalidInput(field="secret", message="Invalid base58 secret key")

    if len(raw) != SECRET_KEY_LENGTH:
        return InvalidInput(field="secret", message="Failed to deserialize secret key")

    keypair = keypair_from_seed(raw[:PUBKEY_LENGTH])
    if bytes(keypair.pubkey()) != raw[PUBKEY_LENGTH:]:
        return InvalidInput(field="secret", message="Failed to deserialize secret key")

    return keypair


def decode_signature(value: str) -> bytes | InvalidInput:
    """Decode a base64 ed25519 signature.

    Args:
        value: Signature text from the request.

    Returns:
        64 signature bytes, or InvalidInput.
    """
    try:
        raw = base64.b64decode(value, validate=True)
    except ValueError:
        return InvalidInput(field="signature", message="Invalid base64 signature")

    if len(raw) != SIGNATURE_LENGTH:
        return InvalidInput(field="signature", message="Invalid signature format")

    return raw


def encode_base64(data: bytes) -> str:
    """Encode binary payloads for JSON transport."""
    return base64.b64encode(data).decode("ascii")


def encode_secret(keypair: Keypair) -> str:
    """Encode a keypair's 64-byte secret as base58 text."""
    return base58.b58encode(bytes(keypair)).decode("ascii")


def encode_message(value: str) -> bytes | InvalidInput:
    """UTF-8 bytes of a message; lone surrogates are rejected."""
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError:
        return InvalidInput(field="message", message="Invalid UTF-8 message")
