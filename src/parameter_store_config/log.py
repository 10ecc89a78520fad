"""Logging helpers."""

import logging
from typing import Callable

LoggerFactory = Callable[[str], logging.Logger]

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def null_logger_factory(name: str) -> logging.Logger:
    """Return a detached logger that discards every record.

    The logger is not registered with the logging manager, so nothing here
    touches the global logger hierarchy.
    """
    logger = logging.Logger(name)
    logger.addHandler(logging.NullHandler())
    logger.propagate = False
    return logger


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging for command line use."""
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)

    if verbose:
        logging.getLogger().setLevel(logging.INFO)
        logging.getLogger('parameter_store_config').setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)
