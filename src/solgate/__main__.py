"""Run the gateway with uvicorn.

Usage:
    PORT=8080 SOLGATE_HOST=127.0.0.1 python -m solgate
"""

from __future__ import annotations

import logging

import uvicorn

from solgate.api.app import create_app
from solgate.config import ServerConfig

logger = logging.getLogger(__name__)


def main() -> None:
    """Configure logging and serve until interrupted."""
    config = ServerConfig.from_env()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    logger.info(f"Server running at http://{config.host}:{config.port}")
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
