import logging
import sys
from typing import Optional
from content_review.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """Returns a stdout logger, attaching the handler only once."""
    logger = logging.getLogger(name)
    log_level = logging.getLevelName((level or "INFO").upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(handler)
        # Keep records out of the root logger so uvicorn doesn't print them twice
        logger.propagate = False

    logger.setLevel(log_level)
    return logger

logger = setup_logger("content_review", settings.LOG_LEVEL)
