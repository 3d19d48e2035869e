"""
Logging Configuration
Attaches handlers to the 'astrobind' logger for scripts and notebooks.
Registration of every binding is logged at DEBUG, kernel builds at INFO.
"""
import logging
import sys
from typing import Optional, TextIO

CONSOLE_FORMAT = '[astrobind] %(levelname)-7s %(module)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'


def setup_logging(level: int = logging.INFO,
                  log_file: Optional[str] = None,
                  stream: Optional[TextIO] = None,
                  append: bool = False) -> logging.Logger:
    """
    Configures the logger for the 'astrobind' namespace.

    Args:
        level: Logging level (logging.DEBUG lists every bound class and function)
        log_file: Optional path of a log file with timestamped records.
        stream: Console stream (default: sys.stderr, leaving stdout to the script)
        append: Append to log_file instead of overwriting it.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger("astrobind")
    logger.setLevel(level)

    # Only our own handlers are replaced on repeated calls
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a' if append else 'w',
                                           encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    logger.debug("Logging to %s", log_file or "console only")
    return logger
