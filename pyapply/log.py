"""
Logger setup for the pyapply package
"""
import logging

LOGGER_NAME = "pyapply"

def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """
    Attach a single console handler to the pyapply logger
    and set its level. Safe to call more than once.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(isinstance(handler, logging.StreamHandler)
               for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
    for handler in logger.handlers:
        handler.setLevel(level)
    logger.propagate = False
    return logger
