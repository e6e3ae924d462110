"""Keypair generation command."""

from __future__ import annotations

import logging

from solgate import adapter
from solgate.core.codec import encode_secret
from solgate.core.errors import GatewayError, SimulatedFailure
from solgate.models.types import KeypairData

logger = logging.getLogger(__name__)


def generate_keypair(fail: str | None = None) -> KeypairData | GatewayError:
    """Generate a new keypair.

    Args:
        fail: Query override; the literal "true" forces a simulated failure.

    Returns:
        KeypairData with base58 pubkey and 64-byte base58 secret,
        or SimulatedFailure.
    """
    if fail == "true":
        logger.info("Keypair generation failed on request (fail=true)")
        return SimulatedFailure()

    keypair = adapter.generate_keypair()
    pubkey = str(keypair.pubkey())
    logger.debug(f"Generated keypair {pubkey}")

    return KeypairData(pubkey=pubkey, secret=encode_secret(keypair))
