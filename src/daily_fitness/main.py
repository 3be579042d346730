"""Application entry point: serve the REST API with uvicorn."""

import logging

import uvicorn

from .config import SETTINGS
from .logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    logger.info("Starting API on %s:%s", SETTINGS.HOST, SETTINGS.PORT)
    uvicorn.run(
        "daily_fitness.server.main:app",
        host=SETTINGS.HOST,
        port=SETTINGS.PORT,
        log_config=None,  # keep the root logger configured above
    )


if __name__ == "__main__":
    main()
