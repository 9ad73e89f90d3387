"""Logging configuration helpers."""

import logging

LOGGER_NAME = "health_calculator"


def configure_logging(level: int | str = logging.INFO) -> None:
    """Attach a single stream handler to the calculator logger.

    The level is applied on every call so a reloaded app picks up changed
    settings; the handler is only added once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
