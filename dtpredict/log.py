"""
Logging setup shared by the API and the CLI.
"""

import logging
import sys

from dtpredict.config import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "dtpredict"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure the ``dtpredict`` logger once; later calls only adjust the level."""
    logger = logging.getLogger("dtpredict")
    logger.setLevel((level or settings.log_level).upper())

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
