# receipt_processor/utils/logging.py
import logging
import sys

from ..config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

logger = logging.getLogger("receipt_processor")

if not logger.handlers:
    _handler = logging.StreamHandler(sys.stdout)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(_handler)
    logger.setLevel(settings.LOG_LEVEL.upper())
    # uvicorn installs its own root handlers; don't double-print
    logger.propagate = False
