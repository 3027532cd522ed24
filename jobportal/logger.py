"""Logging helpers shared by the service modules."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_LOGGING_CONFIGURED = False


def configure_logging(level="INFO") -> None:
    """Configure the root logger once per process; later calls only change the level."""
    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        logging.getLogger().setLevel(level)
        return
    logging.basicConfig(level=level, format=LOG_FORMAT)
    _LOGGING_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
