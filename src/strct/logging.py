"""Logging setup for the strct command line.

The library modules only ever call ``get_logger``; nothing is emitted until
``setup_logging`` attaches handlers, which the CLI does once per run.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

_MAX_LOG_BYTES = 1024 * 1024  # 1 MB
_BACKUP_COUNT = 2

_STDERR_FORMAT = "%(levelname)s %(name)s: %(message)s"
_FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    stderr: bool = True,
) -> logging.Logger:
    """Configure and return the ``strct`` root logger.

    Parameters
    ----------
    level:
        Logging verbosity (DEBUG, INFO, WARNING, ERROR).  Unknown names
        fall back to WARNING.
    log_file:
        Append records to this file as well, rotating at 1 MB.  No file is
        written unless a path is given.
    stderr:
        Emit short ``LEVEL name: message`` lines on stderr.
    """
    logger = logging.getLogger("strct")

    # Re-running setup (tests, repeated CLI invocations) must not stack handlers
    for h in logger.handlers[:]:
        h.close()
    logger.handlers.clear()

    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    if stderr:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setFormatter(logging.Formatter(_STDERR_FORMAT))
        logger.addHandler(stderr_handler)

    if log_file:
        file_path = Path(log_file).expanduser()
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            str(file_path),
            maxBytes=_MAX_LOG_BYTES,
            backupCount=_BACKUP_COUNT,
        )
        file_handler.setFormatter(logging.Formatter(_FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the ``strct`` namespace."""
    return logging.getLogger(f"strct.{name}")
