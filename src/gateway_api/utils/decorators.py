"""Decorator utilities for timing vendor calls."""
import functools
import logging
import time
from typing import Any, Callable, Optional, TypeVar, cast

logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])


def log_vendor_call(operation: str, logger_name: Optional[str] = None) -> Callable[[F], F]:
    """Decorator to log how long a vendor call took and whether it succeeded.

    The wrapped function is expected to return an ``AdapterResult``.

    Args:
        operation: Human readable name of the vendor operation
        logger_name: Optional logger name (defaults to module logger)

    Returns:
        Decorator function
    """
    call_logger = logging.getLogger(logger_name) if logger_name else logger

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.time()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration = time.time() - start_time
                call_logger.error(f"{operation} raised after {duration:.2f}s: {str(e)}")
                raise
            duration = time.time() - start_time
            if getattr(result, "ok", True):
                call_logger.info(f"{operation} completed in {duration:.2f}s")
            else:
                call_logger.warning(f"{operation} failed after {duration:.2f}s: {result.error}")
            return result
        return cast(F, wrapper)

    return decorator
