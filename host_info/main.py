"""Process bootstrap: logging setup and the uvicorn listener."""
from __future__ import annotations

import logging

import uvicorn

from .api import create_app
from .config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level.upper(), format=LOG_FORMAT)


def main() -> None:
    """Serve the info endpoint until the process exits.

    A port that cannot be bound makes uvicorn exit the process non-zero.
    """
    settings = get_settings()
    configure_logging(settings)

    logger.info("Starting server on port %d...", settings.port)
    # No access log: requests are not logged.
    uvicorn.run(
        create_app(),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        access_log=False,
    )


if __name__ == "__main__":
    main()
