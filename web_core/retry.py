# ================================================================================
# Retry Module
# ================================================================================
#
# Bounded retry for element access. A DOM node replaced between lookup and use
# raises StaleElementReferenceException; one fresh lookup is normally enough,
# and a second failure is handed to the caller.
#
# Usage:
#   element = STALE_RETRY.call(find_button)
#
#   @with_retry(STALE_RETRY)
#   def read_total(driver): ...
#
# ================================================================================

from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, Tuple, Type, TypeVar

from loguru import logger
from selenium.common.exceptions import StaleElementReferenceException


T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Configuration for retry behavior.

    Attributes:
        max_attempts: Total number of attempts, the first one included
        retryable_faults: Exception types that trigger another attempt
        message: Debug line logged before each retry
    """
    max_attempts: int = 2
    retryable_faults: Tuple[Type[BaseException], ...] = (StaleElementReferenceException,)
    message: str = "Retrying after stale element reference"

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1: {self.max_attempts}")

    def call(self, func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """
        Call ``func`` under this policy.

        Retryable faults on the final attempt, and any other fault at once,
        propagate to the caller.
        """
        for attempt in range(1, self.max_attempts + 1):
            try:
                return func(*args, **kwargs)
            except self.retryable_faults as e:
                if attempt == self.max_attempts:
                    raise
                logger.debug(
                    f"{self.message} (attempt {attempt}/{self.max_attempts} "
                    f"failed with {type(e).__name__})"
                )

    def with_message(self, message: str) -> "RetryPolicy":
        return RetryPolicy(self.max_attempts, self.retryable_faults, message)


STALE_RETRY = RetryPolicy()


def with_retry(policy: RetryPolicy = STALE_RETRY):
    """
    Decorator running the wrapped function under ``policy``.

    Args:
        policy: RetryPolicy controlling attempts and retryable faults
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            return policy.call(func, *args, **kwargs)

        return wrapper

    return decorator


__all__ = [
    "RetryPolicy",
    "STALE_RETRY",
    "with_retry",
]
