# catalog_server/core/utils.py

import time
from functools import wraps

from catalog_server.core.logger import logger


def timed(handler):
    """
    Logs how long a (sync) route handler took, including failed calls.
    """
    @wraps(handler)
    def wrapper(*args, **kwargs):
        started = time.perf_counter()
        try:
            return handler(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.debug(f"{handler.__name__} took {elapsed_ms:.1f} ms")
    return wrapper
