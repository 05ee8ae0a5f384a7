"""Logging with Rich console output."""
import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console(stderr=True)

ROOT_LOGGER = "spectr_cli"


def get_logger(name: str) -> logging.Logger:
    """Get a logger whose records are rendered through Rich.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger with a single RichHandler attached
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    return logger


def set_verbose(verbose: bool = True):
    """Switch every spectr_cli logger between DEBUG and WARNING."""
    level = logging.DEBUG if verbose else logging.WARNING
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
            if isinstance(logger, logging.Logger):
                logger.setLevel(level)
