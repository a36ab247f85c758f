"""Run the project info service with uvicorn.

Usage:
    PORT=8080 projectinfo
    PORT=8080 python -m projectinfo.server
"""
import logging

import uvicorn

from .config import load_settings
from .errors import ConfigurationError
from .main import app

LOG_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.critical(str(e))
        raise SystemExit(1)

    logging.getLogger().setLevel(settings.LOG_LEVEL.upper())
    logger.info("Listening on %s...", settings.listen_address)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
