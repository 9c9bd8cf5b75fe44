"""Opt-in file logging.

The interactive screen owns stdout/stderr, so nothing is logged unless a log
file is requested with ``--log-file`` or ``LAZYCD_LOG_FILE``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

LOG_FILE_ENV = "LAZYCD_LOG_FILE"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(log_file: Path | None = None, level: str = "info") -> Path | None:
    """Attach a file handler to the ``lazycd`` logger.

    Returns the log file in use, or ``None`` when logging stays disabled.
    Raises ``OSError`` when the log file cannot be created.
    """
    logger = logging.getLogger("lazycd")
    if log_file is None:
        env_file = os.environ.get(LOG_FILE_ENV, "").strip()
        if env_file:
            log_file = Path(env_file).expanduser()
    if log_file is None:
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        return None

    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.strip().upper(), logging.INFO))
    logger.propagate = False
    return log_file


__all__ = [
    "LOG_FILE_ENV",
    "configure_logging",
]
