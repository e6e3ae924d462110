"""Transfer instruction commands.

- send_sol: system program transfer of lamports
- send_token: SPL TransferChecked out of the owner's associated token account
"""

from __future__ import annotations

import logging

from solgate import adapter
from solgate.commands.instruction import describe_sol_transfer, describe_token_transfer
from solgate.core.codec import parse_pubkeys
from solgate.core.errors import GatewayError, InvalidInput, PrimitiveFailed
from solgate.models.types import (
    SendSolRequest,
    SendTokenRequest,
    SolTransferData,
    TokenTransferData,
)

logger = logging.getLogger(__name__)


def send_sol(request: SendSolRequest) -> SolTransferData | GatewayError:
    """Build a native SOL transfer instruction.

    Args:
        request: Sender, recipient and lamports.

    Returns:
        SolTransferData, or the first validation / construction error.
    """
    parsed = parse_pubkeys(
        (request.from_, "from", "Invalid 'from' address"),
        (request.to, "to", "Invalid 'to' address"),
    )
    if isinstance(parsed, InvalidInput):
        return parsed
    sender, recipient = parsed

    try:
        instruction = adapter.build_sol_transfer(sender, recipient, request.lamports)
    except Exception as e:
        return PrimitiveFailed(detail=str(e))

    return describe_sol_transfer(instruction)


def send_token(request: SendTokenRequest) -> TokenTransferData | GatewayError:
    """Build a TransferChecked instruction.

    The source account is the owner's associated token account for the
    mint. The destination is used as given, as a token account.

    Args:
        request: Destination token account, mint, owner, amount, decimals.

    Returns:
        TokenTransferData, or the first validation / construction error.
    """
    parsed = parse_pubkeys(
        (request.destination, "destination", "Invalid destination address"),
        (request.mint, "mint", "Invalid mint address"),
        (request.owner, "owner", "Invalid owner address"),
    )
    if isinstance(parsed, InvalidInput):
        return parsed
    destination, mint, owner = parsed

    try:
        source = adapter.associated_token_address(owner, mint)
        instruction = adapter.build_transfer_checked(
            source=source,
            mint=mint,
            destination=destination,
            owner=owner,
            amount=request.amount,
            decimals=request.decimals,
        )
    except Exception as e:
        return PrimitiveFailed(detail=str(e), prefix="Instruction error")

    logger.debug(f"Built TransferChecked {source} -> {destination}")
    return describe_token_transfer(instruction)
