"""
Logging setup for the CSR service.

Only the ``utility_csr_api`` logger tree is configured; uvicorn keeps
its own handlers for access and server logs.  Records go to stderr
and, when ``LOG_FILE`` is set, to that file as well.  Calling
``setup_logging`` again (every ``create_app`` does) only updates the
level.
"""

import logging
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "utility_csr_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure and return the package logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names fall back to
        ``INFO``.
    logfile : Optional[str]
        File to append records to.  Parent directories are created.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if logger.handlers:
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
