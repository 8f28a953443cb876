import asyncio
from typing import Callable, Optional, TypeVar, Any
from functools import wraps

from config import logger

T = TypeVar('T')

class RetryConfig:
    MAX_ATTEMPTS = 3
    BASE_DELAY = 1.0
    MAX_DELAY = 10.0
    EXPONENTIAL_BASE = 2

def async_retry(
    max_attempts: int = RetryConfig.MAX_ATTEMPTS,
    base_delay: float = RetryConfig.BASE_DELAY,
    max_delay: float = RetryConfig.MAX_DELAY,
    exponential_base: float = RetryConfig.EXPONENTIAL_BASE,
    exceptions: tuple = (Exception,),
    give_up: Optional[Callable[[BaseException], bool]] = None
):
    """
    Retry an async callable with exponential backoff.

    Only `exceptions` are retried. `give_up` can veto a retry for a matching
    exception (for example a non-recoverable upstream error), in which case
    it is re-raised immediately.
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            for attempt in range(1, max_attempts + 1):
                try:
                    return await func(*args, **kwargs)
                except exceptions as e:
                    if give_up is not None and give_up(e):
                        raise
                    if attempt == max_attempts:
                        logger.error("%s failed after %d attempts: %s", func.__name__, max_attempts, e)
                        raise

                    delay = min(base_delay * (exponential_base ** (attempt - 1)), max_delay)
                    logger.warning(
                        "%s failed (attempt %d/%d), retrying in %.2fs: %s",
                        func.__name__, attempt, max_attempts, delay, e
                    )
                    await asyncio.sleep(delay)

        return wrapper
    return decorator
