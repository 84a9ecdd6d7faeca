import logging
import os

from rich.logging import RichHandler

LOG_FORMAT = "[%(name)s]  %(message)s"


def _log_level() -> int:
    return logging.DEBUG if os.getenv("DEBUG") else logging.INFO


def get_logger(name=None) -> logging.Logger:
    """
    Return a logger writing through a RichHandler.
    Handlers are attached once per logger name.
    """
    logger = logging.getLogger(name or "lessons")
    level = _log_level()
    logger.setLevel(level)

    if not logger.handlers:
        handler = RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,
            rich_tracebacks=True,
            log_time_format="[%X]",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler.setLevel(level)
        logger.addHandler(handler)
        logger.propagate = False

    return logger
