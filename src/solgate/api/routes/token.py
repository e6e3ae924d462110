"""Token API endpoints.

POST /token/create - Build an SPL InitializeMint instruction
POST /token/mint - Build an SPL MintTo instruction
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from solgate.api.responses import respond
from solgate.commands.token import create_token, mint_token
from solgate.models.types import (
    CreateTokenRequest,
    ErrorResponse,
    InstructionData,
    MintTokenRequest,
    SuccessResponse,
)

router = APIRouter(prefix="/token")


@router.post(
    "/create",
    response_model=SuccessResponse[InstructionData],
    responses={400: {"model": ErrorResponse}},
)
def post_create_token(
    request: CreateTokenRequest,
) -> SuccessResponse[InstructionData] | JSONResponse:
    """Build an instruction initializing a new mint.

    Args:
        request: Mint, mint authority and decimals.

    Returns:
        Program id, account metas and base64 instruction data.
    """
    return respond(create_token(request))


@router.post(
    "/mint",
    response_model=SuccessResponse[InstructionData],
    responses={400: {"model": ErrorResponse}},
)
def post_mint_token(
    request: MintTokenRequest,
) -> SuccessResponse[InstructionData] | JSONResponse:
    """Build an instruction minting tokens to a destination account."""
    return respond(mint_token(request))
