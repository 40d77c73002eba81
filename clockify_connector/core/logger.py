# clockify_connector/core/logger.py
import logging
import os
from typing import Optional

from dotenv import load_dotenv

# charge immédiatement le .env
load_dotenv()

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Logger standardisé pour le package.
    Niveau : `level` s'il est fourni, sinon LOG_LEVEL (INFO par défaut).
    """
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.setLevel(log_level)
    elif level:
        logger.setLevel(log_level)

    return logger
