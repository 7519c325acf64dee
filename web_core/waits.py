# ================================================================================
# Wait Module
# ================================================================================
#
# This module provides the poll loop used for every UI synchronization point.
# A condition is evaluated on a fixed interval until it is satisfied or the
# timeout elapses.
#
# Key Features:
#   - Monotonic clock timeout accounting
#   - Tagged condition outcomes (ready / not ready / fatal)
#   - Plain callables supported, with an ignore-list of transient faults
#   - Allure integration for step reporting
#
# Usage:
#   element = wait_for(driver, element_is_visible(locator), timeout=10, interval=0.5)
#   policy = WaitPolicy.from_config(config)
#   policy.wait_for(driver, url_contains("/dashboard"))
#
# ================================================================================

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple, Type

import allure
from loguru import logger

from .expected_conditions import TRANSIENT_FAULTS
from .outcome import Outcome


class WaitTimeoutError(Exception):
    """
    Raised when a wait operation times out.

    Attributes:
        condition: The condition that was never satisfied
        timeout: Timeout in seconds
        last_error: Last ignored fault seen while polling, if any
    """

    def __init__(
        self,
        condition: Any,
        timeout: float,
        message: str = "",
        last_error: Optional[BaseException] = None,
    ):
        self.condition = condition
        self.timeout = timeout
        self.last_error = last_error

        text = f"Timed out after {timeout}s waiting for {condition!r}"
        if message:
            text = f"{text}: {message}"
        if last_error is not None:
            text = f"{text} (last error: {type(last_error).__name__}: {last_error})"
        super().__init__(text)


@dataclass(frozen=True)
class WaitPolicy:
    """
    Timing for a wait operation.

    Attributes:
        timeout: Total timeout in seconds
        interval: Delay between evaluations in seconds
        ignored_exceptions: Faults treated as "not ready" when raised by
            a plain callable
    """
    timeout: float
    interval: float
    ignored_exceptions: Tuple[Type[BaseException], ...] = TRANSIENT_FAULTS

    @classmethod
    def from_config(cls, config, timeout: Optional[float] = None) -> "WaitPolicy":
        """
        Build a policy from test configuration.

        Args:
            config: TestConfig instance
            timeout: Override for ``config.default_timeout``
        """
        return cls(
            timeout=config.default_timeout if timeout is None else timeout,
            interval=config.poll_interval,
        )

    def wait_for(self, driver: Any, condition: Callable[[Any], Any], message: str = "") -> Any:
        return wait_for(
            driver,
            condition,
            timeout=self.timeout,
            interval=self.interval,
            ignored_exceptions=self.ignored_exceptions,
            message=message,
        )


def _as_outcome(result: Any) -> Outcome:
    if isinstance(result, Outcome):
        return result
    if result:
        return Outcome.ready(result)
    return Outcome.not_ready(result)


def wait_for(
    driver: Any,
    condition: Callable[[Any], Any],
    timeout: float,
    interval: float,
    ignored_exceptions: Tuple[Type[BaseException], ...] = TRANSIENT_FAULTS,
    message: str = "",
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> Any:
    """
    Poll ``condition`` against ``driver`` until it is satisfied.

    Args:
        driver: WebDriver handed to the condition on every tick
        condition: A Condition from ``expected_conditions`` or any callable
            of the driver (a truthy return value means satisfied)
        timeout: Total timeout in seconds
        interval: Delay between evaluations in seconds
        ignored_exceptions: Faults raised by the condition that count as
            "not ready"
        message: Extra text for the timeout error
        clock: Monotonic time source
        sleep: Blocking sleep function

    Returns:
        The value carried by the first satisfied evaluation

    Raises:
        WaitTimeoutError: If the timeout elapses without success
        ValueError: On a negative timeout or a non-positive interval
        Exception: Fatal faults raised or reported by the condition
    """
    if timeout < 0:
        raise ValueError(f"timeout must not be negative: {timeout}")
    if interval <= 0:
        raise ValueError(f"interval must be positive: {interval}")

    with allure.step(f"Wait for {condition!r}"):
        deadline = clock() + timeout
        attempt = 0
        last_error: Optional[BaseException] = None

        while True:
            attempt += 1

            try:
                outcome = _as_outcome(condition(driver))
            except ignored_exceptions as e:
                last_error = e
                outcome = Outcome.not_ready()

            if outcome.is_fatal:
                raise outcome.error
            if outcome.is_ready:
                logger.debug(f"Condition met after {attempt} attempt(s): {condition!r}")
                return outcome.value

            remaining = deadline - clock()
            if remaining <= 0:
                error = WaitTimeoutError(condition, timeout, message, last_error)
                logger.debug(str(error))
                raise error

            sleep(min(interval, remaining))


__all__ = [
    "WaitPolicy",
    "WaitTimeoutError",
    "wait_for",
]
