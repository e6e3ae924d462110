"""Adapter module for the external ledger SDK.

Adapters wrap external dependencies behind gateway-focused functions.
Command logic should use adapters rather than calling the SDK directly.

Structure:
- adapter/ledger.py - solders / spl-token / PyNaCl primitives
"""

from solgate.adapter.ledger import (
    SYSTEM_PROGRAM_ID,
    TOKEN_PROGRAM_ID,
    associated_token_address,
    build_initialize_mint,
    build_mint_to,
    build_sol_transfer,
    build_transfer_checked,
    generate_keypair,
    keypair_from_seed,
    sign_message,
    verify_signature,
)

__all__ = [
    "SYSTEM_PROGRAM_ID",
    "TOKEN_PROGRAM_ID",
    "associated_token_address",
    "build_initialize_mint",
    "build_mint_to",
    "build_sol_transfer",
    "build_transfer_checked",
    "generate_keypair",
    "keypair_from_seed",
    "sign_message",
    "verify_signature",
]
