"""Logging setup for perflite.

The library modules (``perflite.runner``, ``perflite.stats``,
``perflite.config``) only log through ``get_logger`` children and never
attach handlers.  Phase transitions and calibration outcomes go to DEBUG;
the empty-sample diagnostic goes to WARNING.  The CLI calls
``setup_logging`` once per invocation to get a console handler and,
optionally, a file handler that always logs at DEBUG.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

_LOGGER_NAME = "perflite"
_DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
_CONSOLE_FORMAT = "%(levelname)-8s %(message)s"
# Verbose output names the emitting module so runner and reducer lines can be told apart.
_VERBOSE_CONSOLE_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


def setup_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure and return the root perflite logger.

    Calling this again replaces (and closes) the handlers installed by a
    previous call, so repeated CLI invocations in one process do not
    leak file handles or write to stale streams.

    Args:
        verbose: If True, log DEBUG to the console, prefixed with the
            module logger name.
        quiet: If True, set console log level to WARNING. Ignored if *verbose* is True.
        log_file: If provided, add a file handler at DEBUG level to this path.
        stream: Console stream; defaults to ``sys.stderr`` so that benchmark
            output on stdout (including ``--json``) stays clean.

    Returns:
        The configured root logger for perflite.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(stream)
    if verbose:
        console.setLevel(logging.DEBUG)
        console.setFormatter(logging.Formatter(_VERBOSE_CONSOLE_FORMAT))
    else:
        console.setLevel(logging.WARNING if quiet else logging.INFO)
        console.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
    logger.addHandler(console)

    if log_file is not None:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
        logger.addHandler(fh)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a named child logger under the perflite namespace."""
    return logging.getLogger(f"{_LOGGER_NAME}.{name}")
