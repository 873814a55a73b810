"""The ``shieldsvg`` logger tree.

Library modules only ever call :func:`get_logger`; handlers are installed by
the CLI through :func:`configure_logging`, so embedding applications keep
control of their own logging setup.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT_LOGGER = "shieldsvg"
CONSOLE_FORMAT = "shieldsvg: %(levelname)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(name)s] %(levelname)s %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str) -> None:
    handler.setLevel(logger.level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send shieldsvg records to stderr, and to ``log_file`` when given.

    Warnings and up by default, everything with ``verbose``. Calling this
    again replaces the previous handlers.
    """
    logger = get_logger()
    for old in logger.handlers[:]:
        logger.removeHandler(old)
        old.close()
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    _attach(logger, logging.StreamHandler(sys.stderr), CONSOLE_FORMAT)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), FILE_FORMAT)
    return logger
