"""Transfer API endpoints.

POST /send/sol - Build a system program SOL transfer
POST /send/token - Build an SPL TransferChecked instruction
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from solgate.api.responses import respond
from solgate.commands.send import send_sol, send_token
from solgate.models.types import (
    ErrorResponse,
    SendSolRequest,
    SendTokenRequest,
    SolTransferData,
    SuccessResponse,
    TokenTransferData,
)

router = APIRouter(prefix="/send")


@router.post(
    "/sol",
    response_model=SuccessResponse[SolTransferData],
    responses={400: {"model": ErrorResponse}},
)
def post_send_sol(
    request: SendSolRequest,
) -> SuccessResponse[SolTransferData] | JSONResponse:
    """Build a lamport transfer.

    Args:
        request: Sender, recipient and lamports.

    Returns:
        Program id, account addresses and base64 instruction data.
    """
    return respond(send_sol(request))


@router.post(
    "/token",
    response_model=SuccessResponse[TokenTransferData],
    responses={400: {"model": ErrorResponse}},
)
def post_send_token(
    request: SendTokenRequest,
) -> SuccessResponse[TokenTransferData] | JSONResponse:
    """Build a checked token transfer from the owner's associated account.

    Args:
        request: Destination token account, mint, owner, amount, decimals.

    Returns:
        Program id, accounts with signer flags and base64 instruction data.
    """
    return respond(send_token(request))
