"""Entry point for running the site API server."""

import uvicorn

from doublevisuals.config import get_config
from doublevisuals.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Entry point for running the server."""
    config = get_config()
    configure_logging(config.log_level)

    logger.info("Starting DoubleVisuals API", host=config.server_host, port=config.server_port)

    uvicorn.run(
        "doublevisuals.server:app",
        host=config.server_host,
        port=config.server_port,
        log_config=None,  # Use our custom structlog configuration
        access_log=False,
    )


if __name__ == "__main__":
    main()
