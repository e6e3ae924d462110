"""Message signing and verification commands.

Messages are signed as their UTF-8 bytes. Verification is strict and a
mismatch is a normal `valid=False` result, not an error.
"""

from __future__ import annotations

import logging

from solgate import adapter
from solgate.core.codec import (
    decode_secret,
    decode_signature,
    encode_base64,
    encode_message,
    parse_pubkey,
)
from solgate.core.errors import GatewayError, InvalidInput
from solgate.models.types import (
    SignatureData,
    SignMessageRequest,
    VerificationData,
    VerifyMessageRequest,
)

logger = logging.getLogger(__name__)


def sign_message(request: SignMessageRequest) -> SignatureData | GatewayError:
    """Sign a message with a base58 secret key.

    Args:
        request: Message text and secret key.

    Returns:
        SignatureData with base64 signature and signer pubkey,
        or InvalidInput for an undecodable secret.
    """
    message = encode_message(request.message)
    if isinstance(message, InvalidInput):
        return message

    keypair = decode_secret(request.secret)
    if isinstance(keypair, InvalidInput):
        return keypair

    signature = adapter.sign_message(keypair, message)

    return SignatureData(
        signature=encode_base64(signature),
        public_key=str(keypair.pubkey()),
        message=request.message,
    )


def verify_message(request: VerifyMessageRequest) -> VerificationData | GatewayError:
    """Verify a base64 signature over a message.

    Args:
        request: Message text, signature and claimed signer.

    Returns:
        VerificationData, or InvalidInput for malformed pubkey / signature.
    """
    pubkey = parse_pubkey(request.pubkey, "pubkey", "Invalid pubkey")
    if isinstance(pubkey, InvalidInput):
        return pubkey

    signature = decode_signature(request.signature)
    if isinstance(signature, InvalidInput):
        return signature

    message = encode_message(request.message)
    if isinstance(message, InvalidInput):
        return message

    valid = adapter.verify_signature(pubkey, message, signature)
    logger.debug(f"Signature check for {pubkey}: valid={valid}")

    return VerificationData(valid=valid, message=request.message, pubkey=request.pubkey)
