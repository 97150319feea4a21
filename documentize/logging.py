"""Loggers for the documentize build and the diagnostics it reports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

_LOGGER_NAME = "documentize"

CONSOLE_FORMAT = "[documentize] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``documentize`` or one of its children, e.g. ``documentize.cli``."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def _attach(logger: logging.Logger, handler: logging.Handler, fmt: str, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    logger.addHandler(handler)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Point build output at stderr, and at ``log_file`` when one is given.

    ``verbose`` lowers the threshold to DEBUG. Calling this again replaces the
    handlers installed by the previous call.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    _attach(logger, logging.StreamHandler(), CONSOLE_FORMAT, level)
    if log_file is not None:
        _attach(logger, logging.FileHandler(log_file, encoding="utf-8"), FILE_FORMAT, level)
    return logger


class Reporter:
    """Diagnostic sink handed to each pipeline component.

    Messages only reach the wrapped logger when ``verbose`` is enabled.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, *, verbose: bool = False) -> None:
        self.logger = logger or get_logger()
        self.verbose = verbose

    def info(self, message: str, *args: Any) -> None:
        if self.verbose:
            self.logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        if self.verbose:
            self.logger.warning(message, *args)


__all__ = ["Reporter", "configure_logging", "get_logger"]
