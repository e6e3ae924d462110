"""Ledger SDK adapter.

Adapter for the Solana primitives the gateway exposes. Each function wraps
exactly one SDK call so the command layer never touches solders, spl or
nacl directly:
- key generation and message signing (solders Keypair)
- SPL token instructions (solana-py spl.token)
- system program transfers (solders system_program)
- strict ed25519 verification (PyNaCl / libsodium)
"""

from __future__ import annotations

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey
from solders.instruction import Instruction
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.system_program import ID as SYSTEM_PROGRAM_ID
from solders.system_program import TransferParams, transfer
from spl.token.constants import TOKEN_PROGRAM_ID
from spl.token.models import InitializeMintParams, MintToParams, TransferCheckedParams
from spl.token.instructions import (
    get_associated_token_address,
    initialize_mint,
    mint_to,
    transfer_checked,
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


def generate_keypair() -> Keypair:
    """Generate a fresh random ed25519 keypair."""
    return Keypair()


def keypair_from_seed(seed: bytes) -> Keypair:
    """Rebuild a keypair from its 32-byte secret seed."""
    return Keypair.from_seed(seed)


def build_initialize_mint(mint: Pubkey, mint_authority: Pubkey, decimals: int) -> Instruction:
    """Build an SPL InitializeMint instruction without a freeze authority.

    Args:
        mint: Mint account to initialize.
        mint_authority: Account allowed to mint new tokens.
        decimals: Number of base-10 digits to the right of the decimal point.

    Returns:
        Instruction targeting the SPL token program.
    """
    return initialize_mint(
        InitializeMintParams(
            decimals=decimals,
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            mint_authority=mint_authority,
            freeze_authority=None,
        )
    )


def build_mint_to(
    mint: Pubkey,
    destination: Pubkey,
    authority: Pubkey,
    amount: int,
) -> Instruction:
    """Build an SPL MintTo instruction signed by a single authority.

    Args:
        mint: Mint to issue from.
        destination: Token account receiving the new tokens.
        authority: Mint authority.
        amount: Amount in base units.

    Returns:
        Instruction targeting the SPL token program.
    """
    return mint_to(
        MintToParams(
            program_id=TOKEN_PROGRAM_ID,
            mint=mint,
            dest=destination,
            mint_authority=authority,
            amount=amount,
            signers=[],
        )
    )


def build_sol_transfer(sender: Pubkey, recipient: Pubkey, lamports: int) -> Instruction:
    """Build a native SOL transfer through the system program."""
    return transfer(
        TransferParams(
            from_pubkey=sender,
            to_pubkey=recipient,
            lamports=lamports,
        )
    )


def build_transfer_checked(
    source: Pubkey,
    mint: Pubkey,
    destination: Pubkey,
    owner: Pubkey,
    amount: int,
    decimals: int,
) -> Instruction:
    """Build an SPL TransferChecked instruction signed by a single owner.

    Args:
        source: Token account tokens are debited from.
        mint: Mint of the token being moved.
        destination: Token account tokens are credited to.
        owner: Owner of the source account.
        amount: Amount in base units.
        decimals: Mint decimals the program checks the amount against.

    Returns:
        Instruction targeting the SPL token program.
    """
    return transfer_checked(
        TransferCheckedParams(
            program_id=TOKEN_PROGRAM_ID,
            source=source,
            mint=mint,
            dest=destination,
            owner=owner,
            amount=amount,
            decimals=decimals,
            signers=[],
        )
    )


def associated_token_address(owner: Pubkey, mint: Pubkey) -> Pubkey:
    """Derive the owner's associated token account for a mint."""
    return get_associated_token_address(owner, mint)


def sign_message(keypair: Keypair, message: bytes) -> bytes:
    """Sign raw message bytes, returning the 64-byte ed25519 signature."""
    return bytes(keypair.sign_message(message))


def verify_signature(pubkey: Pubkey, message: bytes, signature: bytes) -> bool:
    """Verify an ed25519 signature with strict libsodium semantics.

    Non-canonical signatures, small-order keys and bytes that are not a
    curve point all verify as False rather than raising.

    Args:
        pubkey: Claimed signer.
        message: Signed message bytes.
        signature: 64-byte detached signature.

    Returns:
        True if the signature is valid for message under pubkey.
    """
    try:
        VerifyKey(bytes(pubkey)).verify(message, signature)
    except BadSignatureError:
        return False
    return True
