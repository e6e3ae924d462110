"""FastAPI application factory.

API layer:
- Decodes request bodies, delegates to commands, wraps results
- Every failure is a 400 with the uniform error envelope
- Forbidden: direct SDK calls, field decoding logic
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from solgate import __version__
from solgate.api.responses import error_response
from solgate.config import ServerConfig

logger = logging.getLogger(__name__)


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Summarize the first pydantic error as a single message."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    # Drop the leading "body"/"query" location segment
    loc = [str(part) for part in first.get("loc", ())[1:]]
    if loc:
        return f"Invalid request: {'.'.join(loc)}: {first.get('msg', 'invalid value')}"
    return f"Invalid request: {first.get('msg', 'invalid value')}"


def create_app(config: ServerConfig | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        config: Optional server config. Defaults to the environment.

    Returns:
        Configured FastAPI application.
    """
    if config is None:
        config = ServerConfig.from_env()

    app = FastAPI(
        title="Solgate API",
        description="Stateless Solana key, signature and instruction builder",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(config.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report malformed bodies in the uniform envelope."""
        message = _describe_validation_error(exc)
        logger.warning(f"Validation error on {request.url.path}: {message}")
        return error_response(message)

    # Include routes
    from solgate.api.routes import keypair, message, send, token

    app.include_router(keypair.router)
    app.include_router(token.router)
    app.include_router(message.router)
    app.include_router(send.router)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
