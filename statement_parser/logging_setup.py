"""Logging for the ``statement_parser`` package.

Library modules log through ``get_logger("statement_parser.<module>")`` and
stay silent until an application opts in; the CLI opts in by calling
:func:`configure_logging` from its root callback. Records go to stderr so
they never mix with JSON written to stdout.
"""

from __future__ import annotations

import logging
import os
import sys

_PKG_LOGGER_NAME = "statement_parser"
_LEVEL_ENV_VAR = "STATEMENT_PARSER_LOG_LEVEL"
_FORMAT = "%(levelname)-7s %(name)s: %(message)s"

logging.getLogger(_PKG_LOGGER_NAME).addHandler(logging.NullHandler())


class _StderrHandler(logging.StreamHandler):
    """Writes to whatever ``sys.stderr`` is when a record is emitted."""

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def resolve_level(level: int | str | None) -> int:
    """Turn a level given on the command line (or via the env) into an int.

    ``None`` reads ``STATEMENT_PARSER_LOG_LEVEL``; anything unrecognised is
    ``logging.INFO``.
    """

    if level is None:
        level = os.getenv(_LEVEL_ENV_VAR)
    if isinstance(level, int):
        return level
    if not level:
        return logging.INFO
    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    return logging.getLevelNamesMapping().get(name, logging.INFO)


def configure_logging(level: int | str | None = None) -> None:
    """Send package records to stderr at ``level``.

    Safe to call more than once; later calls only change the level.
    """

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    logger.setLevel(resolve_level(level))
    logger.propagate = False
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "resolve_level"]
