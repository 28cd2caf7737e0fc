import logging

from md5_config import LOG_FORMAT, STDERROR_LOG_LEVEL

LOGGER_NAME = "md5"


def get_logger():
    """
    Return a logger writing to stderr

    :return: (Logger) Logger.
    """
    # Initialize if this function is called at first.
    if not get_logger.initialized:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        echo = logging.StreamHandler()
        echo.setLevel(logging.getLevelName(STDERROR_LOG_LEVEL))
        echo.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(echo)

        get_logger.initialized = True

    return logging.getLogger(LOGGER_NAME)


get_logger.initialized = False
