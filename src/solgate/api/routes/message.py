"""Message API endpoints.

POST /message/sign - Sign a UTF-8 message with a base58 secret key
POST /message/verify - Verify a base64 signature against a pubkey
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from solgate.api.responses import respond
from solgate.commands.message import sign_message, verify_message
from solgate.models.types import (
    ErrorResponse,
    SignatureData,
    SignMessageRequest,
    SuccessResponse,
    VerificationData,
    VerifyMessageRequest,
)

router = APIRouter(prefix="/message")


@router.post(
    "/sign",
    response_model=SuccessResponse[SignatureData],
    responses={400: {"model": ErrorResponse}},
)
def post_sign_message(
    request: SignMessageRequest,
) -> SuccessResponse[SignatureData] | JSONResponse:
    """Sign a message.

    Args:
        request: Message text and base58 secret key.

    Returns:
        Base64 signature, signer public key and the original message.
    """
    return respond(sign_message(request))


@router.post(
    "/verify",
    response_model=SuccessResponse[VerificationData],
    responses={400: {"model": ErrorResponse}},
)
def post_verify_message(
    request: VerifyMessageRequest,
) -> SuccessResponse[VerificationData] | JSONResponse:
    """Verify a signature.

    A well-formed signature that does not match returns valid=false with
    HTTP 200.
    """
    return respond(verify_message(request))
