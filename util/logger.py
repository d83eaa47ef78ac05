import functools
import logging
import sys
from config.setting import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@functools.lru_cache
def setup_logging(log_level: str = None) -> logging.Logger:
    """
        attaches a single stdout handler to the root logger,
        repeated calls return the already configured logger
    :param log_level: level name, defaults to settings.LOG_LEVEL
    :return: the root logger
    """
    logger = logging.getLogger()
    logger.setLevel(level=(log_level or settings.LOG_LEVEL).upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
