"""
Logging for d3tree.

Every module logs through ``get_logger(__name__)`` under the ``d3tree``
namespace.  The package logger carries a ``NullHandler`` so that importing
the library never prints anything; scripts and notebooks that want output
call :func:`setup_logging`, which attaches a rich console handler (and an
optional file handler) to the ``d3tree`` logger only.  The root logger and
other libraries' loggers are left alone.
"""

import logging
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "d3tree"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())


def setup_logging(
    verbose: bool = False, quiet: bool = False, log_file: Optional[str] = None
) -> logging.Logger:
    """
    Send d3tree log records to the terminal, and optionally to a file.

    Calling it again replaces the handlers installed by the previous call,
    so a notebook can re-run its setup cell without duplicated lines.

    Args:
        verbose: Show DEBUG records (conversion and widget details)
        quiet: Only show errors; wins over ``verbose``
        log_file: Also append plain-text records to this path

    Returns:
        The ``d3tree`` package logger
    """
    level = _level_for(verbose, quiet)
    logger = logging.getLogger(LOGGER_NAME)

    for handler in [h for h in logger.handlers if getattr(h, "_d3tree", False)]:
        logger.removeHandler(handler)
        handler.close()

    handlers: List[logging.Handler] = [
        RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            tracebacks_show_locals=verbose,
            # Node labels and JSON snippets may contain square brackets.
            markup=False,
            show_path=verbose,
        )
    ]
    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        handlers.append(file_handler)

    for handler in handlers:
        handler._d3tree = True  # type: ignore[attr-defined]
        handler.setLevel(level)
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def _level_for(verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.DEBUG
    return logging.WARNING


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Logger for a d3tree module.

    ``get_logger(__name__)`` inside the package returns the module's own
    logger; names from outside the package are nested under ``d3tree.``.
    """
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    if name != LOGGER_NAME and not name.startswith(LOGGER_NAME + "."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
