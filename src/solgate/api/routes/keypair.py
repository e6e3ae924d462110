"""Keypair API endpoint.

POST /keypair - Generate a new keypair (?fail=true forces an error)
GET /keypair - Same, for query-only clients
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from solgate.api.responses import respond
from solgate.commands.keypair import generate_keypair
from solgate.models.types import ErrorResponse, KeypairData, SuccessResponse

router = APIRouter()


@router.api_route(
    "/keypair",
    methods=["GET", "POST"],
    response_model=SuccessResponse[KeypairData],
    responses={400: {"model": ErrorResponse}},
)
def create_keypair(fail: str | None = None) -> SuccessResponse[KeypairData] | JSONResponse:
    """Generate a new keypair.

    Args:
        fail: When "true", return the simulated failure envelope.

    Returns:
        Base58 pubkey and secret in the success envelope.
    """
    return respond(generate_keypair(fail))
