"""
Logging setup cho ứng dụng vẽ.
"""
import logging
import os
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER = "paint_qt"


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """Cấu hình logger gốc của package (stdout), không thêm handler trùng."""
    level = level or os.environ.get("PAINT_QT_LOG_LEVEL", "INFO")
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(log_level)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(handler)
    return logger
