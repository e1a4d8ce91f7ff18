import logging

import colorlog

LOGGER_NAME = "imperial"


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a coloured stream handler to the ``imperial`` logger.

    The root logger is left alone so that host applications keep control of
    their own logging. Repeated calls only update the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if any(
        isinstance(handler.formatter, colorlog.ColoredFormatter)
        for handler in logger.handlers
    ):
        return logger

    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }

    formatter = colorlog.ColoredFormatter(
        fmt="%(asctime)s | %(log_color)s%(levelname)-8s%(reset)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        log_colors=log_colors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger
