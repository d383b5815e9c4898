#!/usr/bin/env python3
import logging
import sys

import uvicorn

from app.core.config import get_settings
from app.logging import setup_logging

if __name__ == "__main__":
    setup_logging()
    logger = logging.getLogger("start")
    settings = get_settings()

    logger.info(f"Starting PrintQuote Backend Server on port {settings.PORT}")

    try:
        uvicorn.run(
            "main:app",
            host=settings.HOST,
            port=settings.PORT,
            log_level="info"
        )
    except Exception:
        logger.exception("Error starting server")
        sys.exit(1)
