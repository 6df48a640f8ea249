"""Logging for oedipus runs.

Per-module progress ("Creating <module> files.") is logged at INFO, each
written document and each missing module file at DEBUG, modules without a
usable file name at WARNING and failed modules at ERROR.
"""

from __future__ import annotations

import logging
from pathlib import Path

_LOGGER_NAME = "oedipus"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``oedipus.<name>``, or the package logger when no name is given."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(
    *, verbose: bool = False, log_file: Path | None = None
) -> logging.Logger:
    """Send oedipus records to stderr, and to ``log_file`` when given.

    ``verbose`` adds the per-document DEBUG lines.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    # Reset handlers so repeated CLI invocations in one process do not duplicate output.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[oedipus] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(file_handler)

    return logger


__all__ = ["configure_logging", "get_logger"]
