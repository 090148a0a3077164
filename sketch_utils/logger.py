"""
Logging setup for Lil Fast.

One console (and optional file) handler set is shared by the app logger and
the sketch_core / sketch_utils module loggers, so core and UI messages land
in the same stream with the same format.
"""

import logging
import sys
from functools import wraps
import time


logger = logging.getLogger('lil_fast')

# Module loggers (logging.getLogger(__name__)) under these packages share the app handlers
PACKAGE_LOGGERS = ('sketch_core', 'sketch_utils')


def setup_logging(level=logging.INFO, log_file=None):
    """
    Attach handlers to the app logger and the package loggers.

    Safe to call on every Streamlit rerun: handlers are replaced, not stacked.

    Args:
        level: Threshold for all attached handlers
        log_file: Optional path that receives a copy of the console output

    Returns:
        logging.Logger: The 'lil_fast' app logger
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for target in [logger] + [logging.getLogger(name) for name in PACKAGE_LOGGERS]:
        target.handlers = list(handlers)
        target.setLevel(level)
        target.propagate = False

    return logger


def log_exceptions(func):
    """
    Log any exception escaping func with its traceback, then re-raise it.

    Used on the generation client so failed submissions leave a full trace
    in the server log while the UI shows only the short notice.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.error(f"{func.__name__} raised {type(e).__name__}: {e}", exc_info=True)
            raise
    return wrapper


def log_performance(func):
    """
    Time func and log the duration in milliseconds at DEBUG level.

    Wraps the compositor, which runs once per stroke segment, so timings
    stay silent unless DEBUG logging is switched on. Failures are logged at
    ERROR with the elapsed time and re-raised.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                elapsed = time.perf_counter() - start_time
                logger.debug(f"{func.__name__} completed in {elapsed * 1000:.2f}ms")
            return result
        except Exception as e:
            elapsed = time.perf_counter() - start_time
            logger.error(f"{func.__name__} failed after {elapsed * 1000:.2f}ms: {e}")
            raise
    return wrapper
