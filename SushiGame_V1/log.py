import sys
from typing import Any

from loguru import logger

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def configure_logging(level: str = "INFO", sink: Any = sys.stderr) -> None:
    """Installe un unique sink loguru.

    Le code du moteur n'appelle jamais cette fonction : c'est le lanceur
    (`main.py`) qui choisit le niveau et la destination.
    """
    logger.remove()
    logger.add(sink, level=level, format=LOG_FORMAT, backtrace=True, diagnose=False)
    logger.debug("Logger configuré (niveau {})", level)
