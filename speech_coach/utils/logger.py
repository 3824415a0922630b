import logging

from speech_coach.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str, level=None) -> logging.Logger:
    logger: logging.Logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level if level is not None else getattr(logging, LOG_LEVEL, logging.WARNING))
    return logger
