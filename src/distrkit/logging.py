"""Colorful console output for the ``distrkit`` loggers.

The distribution functions never print. They report through loggers below
``distrkit``, most notably the single ``NaNs produced`` warning emitted by a
call that met invalid parameters. Nothing is shown beyond Python's last-resort
handler until :func:`setup` attaches a colored handler, after which a call
such as ``distrkit.dlomax(1, -1, 1)`` shows up on stderr as
``distrkit.functions.broadcast [WARNING] NaNs produced``.

The level defaults to the ``DISTRKIT_LOGLEVEL`` environment variable, then to
``INFO``.
"""

from __future__ import annotations

import logging
import os

import colorlog

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING
ERROR = logging.ERROR
FATAL = logging.FATAL
CRITICAL = logging.CRITICAL

FORMAT = "%(log_color)s%(name)s [%(levelname)s] %(message)s"


def get_level(level: int | str | None = None) -> int:
    """Resolve a logging level given as a number or a name such as
    ``"warning"``. `None` reads ``DISTRKIT_LOGLEVEL``, defaulting to ``INFO``.
    """
    if level is None:
        level = os.getenv("DISTRKIT_LOGLEVEL", "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown logging level {level!r}")
        return resolved
    return level


def setup(level: int | str | None = None, logger: logging.Logger = None) -> None:
    """Setup a colorful logging output.

    If `logger` is None, sets up only the ``distrkit`` logger. Calling it again
    replaces the colored handler instead of stacking a second one, so repeated
    calls only change the level.

    Parameters
    ----------
    level
        logging level (see :mod:`logging` module), or its name.
    logger
        if not `None`, setup this logger.

    Examples
    --------
    >>> from distrkit import logging
    >>> logging.setup(level=logging.DEBUG)
    """
    if logger is None:
        logger = colorlog.getLogger("distrkit")

    for handler in list(logger.handlers):
        if isinstance(handler.formatter, colorlog.ColoredFormatter):
            logger.removeHandler(handler)

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(FORMAT))

    logger.setLevel(get_level(level))
    logger.addHandler(handler)
