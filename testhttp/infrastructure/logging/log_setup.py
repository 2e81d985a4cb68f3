import sys

from loguru import logger

_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{message}</cyan> {extra}"
)


def setup_console_logging(level: str = "INFO", sink=None) -> None:
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=_FORMAT)
    logger.enable("testhttp")
