"""
Logging for the invoice dashboard.

Handlers go on the ``invoice_dashboard_api`` package logger, so uvicorn
keeps its own access and error logs while every module that calls
``logging.getLogger(__name__)`` inherits the dashboard's level and
format.  Records still propagate to the root logger.

The level and the optional log file come from ``LOG_LEVEL`` and
``LOG_FILE`` (see ``Settings``).  Handlers are named, so calling
``setup_logging`` again only adjusts the level.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import settings


PACKAGE_LOGGER = "invoice_dashboard_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER = "dashboard-console"
FILE_HANDLER = "dashboard-file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> logging.Logger:
    """Configure the package logger and return it.

    Parameters
    ----------
    level : Optional[str]
        Level name such as ``"DEBUG"``; case insensitive.  Defaults to
        ``settings.log_level``.  Unknown names fall back to ``INFO``.
    logfile : Optional[str]
        File to append records to.  Defaults to ``settings.log_file``;
        an empty value means console only.  Missing parent directories
        are created.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    level_name = (level or settings.log_level).upper()
    logger.setLevel(getattr(logging, level_name, logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    # Skip the console handler when the root logger already prints
    # (pytest capture, an embedding application).
    if not _has_handler(logger, CONSOLE_HANDLER) and not logging.getLogger().handlers:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logfile = settings.log_file if logfile is None else logfile
    if logfile and not _has_handler(logger, FILE_HANDLER):
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.set_name(FILE_HANDLER)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
