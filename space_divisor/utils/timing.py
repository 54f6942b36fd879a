import logging
import time
from contextlib import contextmanager


@contextmanager
def timed_stage(name: str, logger: logging.Logger):
    """
    Context manager that logs the start and duration of a build stage
    at DEBUG level.
    """
    logger.debug("[%s] started...", name)
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        logger.debug("[%s] finished in %.4f s", name, dt)
