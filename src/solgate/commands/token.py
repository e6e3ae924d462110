"""SPL token instruction commands.

- create_token: InitializeMint
- mint_token: MintTo
"""

from __future__ import annotations

import logging

from solgate import adapter
from solgate.commands.instruction import describe_instruction
from solgate.core.codec import parse_pubkeys
from solgate.core.errors import GatewayError, InvalidInput, PrimitiveFailed
from solgate.models.types import CreateTokenRequest, InstructionData, MintTokenRequest

logger = logging.getLogger(__name__)


def create_token(request: CreateTokenRequest) -> InstructionData | GatewayError:
    """Build an InitializeMint instruction for a new mint.

    Args:
        request: Mint address, mint authority and decimals.

    Returns:
        InstructionData, or the first validation / construction error.
    """
    parsed = parse_pubkeys(
        (request.mint, "mint", "Invalid mint pubkey"),
        (request.mint_authority, "mintAuthority", "Invalid mint authority pubkey"),
    )
    if isinstance(parsed, InvalidInput):
        return parsed
    mint, mint_authority = parsed

    try:
        instruction = adapter.build_initialize_mint(mint, mint_authority, request.decimals)
    except Exception as e:
        return PrimitiveFailed(detail=str(e))

    logger.debug(f"Built InitializeMint for mint {mint}")
    return describe_instruction(instruction)


def mint_token(request: MintTokenRequest) -> InstructionData | GatewayError:
    """Build a MintTo instruction.

    Args:
        request: Mint, destination token account, authority and amount.

    Returns:
        InstructionData, or the first validation / construction error.
    """
    parsed = parse_pubkeys(
        (request.mint, "mint", "Invalid mint address"),
        (request.destination, "destination", "Invalid destination address"),
        (request.authority, "authority", "Invalid authority address"),
    )
    if isinstance(parsed, InvalidInput):
        return parsed
    mint, destination, authority = parsed

    try:
        instruction = adapter.build_mint_to(mint, destination, authority, request.amount)
    except Exception as e:
        return PrimitiveFailed(detail=str(e))

    return describe_instruction(instruction)
