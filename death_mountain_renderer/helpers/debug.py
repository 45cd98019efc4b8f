import functools
import logging

logger = logging.getLogger(__name__)


def log_call(fn):
    """Log calls at DEBUG with their plain integer arguments (token ids, page indices)."""
    @functools.wraps(fn)
    def __wrapped(*args, **kwargs):
        numbers = [arg for arg in args if type(arg) is int]
        numbers += [f"{key}={value}" for key, value in kwargs.items() if type(value) is int]
        logger.debug(f"Calling {fn.__name__} {numbers}")
        return fn(*args, **kwargs)
    return __wrapped
