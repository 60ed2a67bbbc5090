# tokencrypt/util/logger.py
import logging
from typing import Union

logger = logging.getLogger("tokencrypt")
logger.addHandler(logging.NullHandler())


def log(message: str, level: int = logging.DEBUG) -> None:
    """Log a message on the package logger."""
    logger.log(level, message)


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """Set the package logger level, attaching a stream handler once."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")
    logger.setLevel(level)
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(handler)
