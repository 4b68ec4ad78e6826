"""Logging setup shared by every module of the package.

Modules obtain their logger with ``get_logger(__name__)``; the CLI calls
``setup_logging`` once to attach a rich handler writing to stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "go_dataclass"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(debug: bool = False, console: Console | None = None) -> logging.Logger:
    """Configure the package root logger.

    Args:
        debug: Emit DEBUG records when True, only warnings and errors otherwise.
        console: Console to write to (defaults to stderr).

    Returns:
        The configured root package logger.
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    # Replace handlers from a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=debug,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("dataclass: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False

    logger.debug("Logging configured (debug=%s)", debug)
    return logger
