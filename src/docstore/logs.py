"""Logging setup for the command line entrypoint"""

import logging


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("docstore")


def configure_logging(level: str = "WARNING") -> None:
    """Route docstore log records to stderr at the given level.

    Only the 'docstore' logger is touched; handlers from an earlier call are
    replaced so repeated calls never stack them. The root logger is left alone.
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
