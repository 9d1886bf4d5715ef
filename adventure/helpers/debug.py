import functools
import logging

logger = logging.getLogger(__name__)


def log_call(fn):
    """Log each call of ``fn`` and what it returned, at DEBUG level."""
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        logger.debug(f"Calling {fn.__qualname__}")
        result = fn(*args, **kwargs)
        logger.debug(f"{fn.__qualname__} -> {result!r}")
        return result
    return __wrapped
