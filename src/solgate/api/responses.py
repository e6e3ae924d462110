"""Uniform response envelope.

Every command result passes through `respond`:
- data model -> {"success": true, "data": ...}, HTTP 200
- GatewayError -> {"success": false, "error": ...}, HTTP 400
"""

from __future__ import annotations

import logging

from fastapi import status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from solgate.core.errors import GatewayError
from solgate.models.types import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)


def error_response(message: str) -> JSONResponse:
    """Build the 400 error envelope."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(error=message).model_dump(),
    )


def respond(result: BaseModel | GatewayError) -> SuccessResponse | JSONResponse:
    """Convert a command result into a response.

    Args:
        result: Data model on success, error variant on failure.

    Returns:
        SuccessResponse for FastAPI to serialize, or a 400 JSONResponse.
    """
    if isinstance(result, GatewayError):
        logger.warning(f"Request rejected: {result.message}")
        return error_response(result.message)
    return SuccessResponse(data=result)
