import logging.config
import os
from pathlib import Path

LOGGING_CONF = Path(__file__).resolve().parent.parent / "logging.conf"


def setup_logging(config_path: Path = LOGGING_CONF, log_dir: str = "logs") -> logging.Logger:
    """Configure logging from logging.conf, falling back to basicConfig when it is missing."""
    # Ensure logs directory exists
    os.makedirs(log_dir, exist_ok=True)

    if config_path.exists():
        logging.config.fileConfig(config_path, disable_existing_loggers=False)
    else:
        logging.basicConfig(level=logging.INFO)

    return logging.getLogger()
