#  This file is part of SimpleCalc.
#
#  SPDX-FileCopyrightText: 2025 SimpleCalc Contributors
#
#  SPDX-License-Identifier: MIT
"""Logging utilities for SimpleCalc.

The library itself only emits records through module-level loggers.  Applications
embedding the calculator can use :func:`setup_logging` to get the same console or
file output the SimpleCalc developers use.
"""

from __future__ import annotations

import logging

from typing import TYPE_CHECKING
from typing import Final

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install


if TYPE_CHECKING:
    from pathlib import Path


DATE_LOG_FORMAT: Final[str] = "[%X]"
LOG_FORMAT: Final[str] = (
    "%(asctime)s [%(levelname)s](%(name)s:%(funcName)s:%(lineno)d): %(message)s"
)
RICH_LOG_FORMAT: Final[str] = "%(message)s"


_VERBOSITY_LEVELS: Final[tuple[int, ...]] = (logging.WARNING, logging.INFO, logging.DEBUG)


def _verbosity_to_level(verbosity: int, log_file: Path | None) -> int:
    level = _VERBOSITY_LEVELS[min(max(verbosity, 0), len(_VERBOSITY_LEVELS) - 1)]
    if log_file is not None:
        # A log file records at least the informational messages.
        return min(level, logging.INFO)
    return level


def _create_rich_handler() -> tuple[logging.Handler, Console]:
    install()
    console = Console(tab_size=4)
    handler = RichHandler(rich_tracebacks=True, log_time_format=DATE_LOG_FORMAT, console=console)
    handler.setFormatter(logging.Formatter(RICH_LOG_FORMAT))
    return handler, console


def setup_logging(
    verbosity: int,
    no_rich: bool = False,  # noqa: FBT001, FBT002
    log_file: Path | None = None,
) -> Console | None:
    """Configures the root logger.

    Records go to a file if a log file is given.  Otherwise they go to a rich
    console handler, or to a plain stream handler if rich is not wanted.  Only the
    rich variant installs rich's traceback hook.

    Args:
        verbosity: 0 logs warnings, 1 adds info messages, 2 and more add debug
            messages
        no_rich: Whether to use a plain stream handler instead of rich
        log_file: Path to an optional log file

    Returns:
        The rich console the handler writes to, or ``None`` if rich is not used
    """
    console: Console | None = None
    handler: logging.Handler
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file)
    elif no_rich:
        handler = logging.StreamHandler()
    else:
        handler, console = _create_rich_handler()

    logging.basicConfig(
        level=_verbosity_to_level(verbosity, log_file),
        format=LOG_FORMAT,
        datefmt=DATE_LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    return console
