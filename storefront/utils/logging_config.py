"""
Logging configuration for production
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from storefront.config import settings

log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
date_format = "%Y-%m-%d %H:%M:%S"


def configure_logging(log_dir=None, level=None) -> logging.Logger:
    """Attach console and rotating file handlers to the root logger.

    ``app.log`` receives everything at ``level`` and above, ``error.log``
    only errors. Calling it again does not add duplicate handlers.
    """
    logs_dir = Path(log_dir or settings.LOG_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    level = logging.getLevelName((level or settings.LOG_LEVEL).upper())
    formatter = logging.Formatter(log_format, date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        if getattr(handler, "_storefront", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    error_handler = RotatingFileHandler(
        logs_dir / "error.log", maxBytes=settings.LOG_MAX_BYTES, backupCount=settings.LOG_BACKUP_COUNT
    )
    error_handler.setLevel(logging.ERROR)

    file_handler = RotatingFileHandler(
        logs_dir / "app.log", maxBytes=settings.LOG_MAX_BYTES, backupCount=settings.LOG_BACKUP_COUNT
    )
    file_handler.setLevel(level)

    for handler in (console_handler, error_handler, file_handler):
        handler.setFormatter(formatter)
        handler._storefront = True
        root_logger.addHandler(handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return root_logger
