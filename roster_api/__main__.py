"""Run the API with uvicorn: ``python -m roster_api``."""
from __future__ import annotations

import logging
import sys

import uvicorn

from roster_api.app import create_app
from roster_api.core.config import ConfigurationMissing, get_settings
from roster_api.core.logging_service import init_logging

logger = logging.getLogger("roster_api")


def main() -> None:
    settings = get_settings()
    init_logging(settings.log_level)
    try:
        app = create_app(settings)
    except ConfigurationMissing as exc:
        logger.error("configuration error: %s", exc)
        sys.exit(1)
    logger.info("backend running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
