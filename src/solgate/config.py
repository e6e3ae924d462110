"""Server configuration from environment variables.

PORT                  listen port (default 3000)
SOLGATE_HOST          bind address (default 0.0.0.0; 127.0.0.1 for loopback only)
SOLGATE_LOG_LEVEL     root log level (default INFO)
SOLGATE_CORS_ORIGINS  comma-separated allowed origins
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_CORS_ORIGINS = (
    "http://localhost:3000",
    "http://127.0.0.1:3000",
)


@dataclass(frozen=True)
class ServerConfig:
    """Startup settings for the gateway."""

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = DEFAULT_LOG_LEVEL
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ServerConfig:
        """Build config from the environment.

        Args:
            environ: Variables to read. Defaults to os.environ.

        Returns:
            ServerConfig with defaults for unset variables.

        Raises:
            ValueError: If PORT is not an integer in 1..65535.
        """
        if environ is None:
            environ = os.environ

        raw_port = environ.get("PORT", str(DEFAULT_PORT))
        try:
            port = int(raw_port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {raw_port!r}") from None
        if not 0 < port < 65536:
            raise ValueError(f"PORT out of range: {port}")

        origins = environ.get("SOLGATE_CORS_ORIGINS")
        if origins is None:
            cors_origins = DEFAULT_CORS_ORIGINS
        else:
            cors_origins = tuple(o.strip() for o in origins.split(",") if o.strip())

        return cls(
            host=environ.get("SOLGATE_HOST", DEFAULT_HOST),
            port=port,
            log_level=environ.get("SOLGATE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            cors_origins=cors_origins,
        )
