"""Mapping of SDK instructions into response payloads."""

from __future__ import annotations

from solders.instruction import Instruction

from solgate.core.codec import encode_base64
from solgate.models.types import (
    AccountMetaInfo,
    InstructionData,
    SolTransferData,
    TokenAccountInfo,
    TokenTransferData,
)


def describe_instruction(instruction: Instruction) -> InstructionData:
    """Full account metadata: pubkey, signer and writable flags."""
    return InstructionData(
        program_id=str(instruction.program_id),
        accounts=[
            AccountMetaInfo(
                pubkey=str(meta.pubkey),
                is_signer=meta.is_signer,
                is_writable=meta.is_writable,
            )
            for meta in instruction.accounts
        ],
        instruction_data=encode_base64(bytes(instruction.data)),
    )


def describe_sol_transfer(instruction: Instruction) -> SolTransferData:
    """Addresses only."""
    return SolTransferData(
        program_id=str(instruction.program_id),
        accounts=[str(meta.pubkey) for meta in instruction.accounts],
        instruction_data=encode_base64(bytes(instruction.data)),
    )


def describe_token_transfer(instruction: Instruction) -> TokenTransferData:
    """Pubkey and signer flag."""
    return TokenTransferData(
        program_id=str(instruction.program_id),
        accounts=[
            TokenAccountInfo(pubkey=str(meta.pubkey), is_signer=meta.is_signer)
            for meta in instruction.accounts
        ],
        instruction_data=encode_base64(bytes(instruction.data)),
    )
