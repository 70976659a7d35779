"""File logging bootstrap.

The TUI owns the terminal, so records only ever go to a rotating log file.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "treegrow"
DEFAULT_LOG_FILE = Path(user_log_dir(LOGGER_NAME, appauthor=False)) / "treegrow.log"


def setup_logging(log_file: Path | None = None, level: int = logging.DEBUG) -> logging.Logger:
    """Attach a rotating file handler to the package logger.

    Falls back to a ``NullHandler`` when the log file cannot be created.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    target = Path(log_file).expanduser() if log_file is not None else DEFAULT_LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.handlers.RotatingFileHandler(
            target,
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger
