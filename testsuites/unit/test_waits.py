import pytest
from selenium.common.exceptions import (
    InvalidArgumentException,
    NoSuchElementException,
)

from testsuites.support.fakes import FakeElement, StaticConfig
from web_core import expected_conditions as EC
from web_core.locator import Locator
from web_core.outcome import Outcome
from web_core.waits import WaitPolicy, WaitTimeoutError, wait_for


BUTTON = Locator.id("submit")


class CountingCondition:
    """Condition that becomes ready after a number of evaluations."""

    def __init__(self, ready_after: int, value="done"):
        self.ready_after = ready_after
        self.value = value
        self.calls = 0

    def __call__(self, driver):
        self.calls += 1
        if self.calls >= self.ready_after:
            return Outcome.ready(self.value)
        return Outcome.not_ready()

    def __repr__(self):
        return "counting_condition"


def test_satisfied_on_first_tick_returns_without_sleeping(driver, clock):
    result = wait_for(
        driver, EC.url_contains("/home"), timeout=10, interval=0.5,
        clock=clock.monotonic, sleep=clock.sleep,
    )

    assert result is True
    assert clock.sleeps == []


def test_polls_until_condition_is_met(driver, clock):
    condition = CountingCondition(ready_after=3)

    result = wait_for(driver, condition, timeout=10, interval=0.5, clock=clock.monotonic, sleep=clock.sleep)

    assert result == "done"
    assert condition.calls == 3
    assert clock.sleeps == [0.5, 0.5]


def test_timeout_is_bounded_by_timeout_plus_interval(driver, clock):
    start = clock.now
    condition = CountingCondition(ready_after=10_000)

    with pytest.raises(WaitTimeoutError) as exc_info:
        wait_for(driver, condition, timeout=2, interval=0.3, clock=clock.monotonic, sleep=clock.sleep)

    elapsed = clock.now - start
    assert 2 <= elapsed <= 2 + 0.3
    assert exc_info.value.condition is condition
    assert exc_info.value.timeout == 2
    assert "counting_condition" in str(exc_info.value)


def test_timeout_error_names_the_condition(driver, clock):
    with pytest.raises(WaitTimeoutError, match=r"url_to_be\('https://example.com/login'\)"):
        wait_for(
            driver, EC.url_to_be("https://example.com/login"), timeout=1, interval=0.25,
            clock=clock.monotonic, sleep=clock.sleep,
        )


def test_zero_timeout_evaluates_once(driver, clock):
    condition = CountingCondition(ready_after=2)

    with pytest.raises(WaitTimeoutError):
        wait_for(driver, condition, timeout=0, interval=1, clock=clock.monotonic, sleep=clock.sleep)

    assert condition.calls == 1
    assert clock.sleeps == []


def test_plain_callable_truthy_result(driver, clock):
    element = FakeElement()
    driver.queue_lookups(BUTTON, NoSuchElementException("not yet"), element)

    result = wait_for(
        driver, lambda d: d.find_element(*BUTTON), timeout=5, interval=1,
        clock=clock.monotonic, sleep=clock.sleep,
    )

    assert result is element
    assert len(driver.find_calls) == 2


def test_timeout_keeps_last_ignored_error(driver, clock):
    with pytest.raises(WaitTimeoutError) as exc_info:
        wait_for(
            driver, lambda d: d.find_element(*BUTTON), timeout=1, interval=0.5,
            clock=clock.monotonic, sleep=clock.sleep,
        )

    assert isinstance(exc_info.value.last_error, NoSuchElementException)


def test_fatal_outcome_is_raised_unmodified(driver, clock):
    error = InvalidArgumentException("invalid argument")
    driver.elements[BUTTON] = error

    with pytest.raises(InvalidArgumentException) as exc_info:
        wait_for(driver, EC.element_exists(BUTTON), timeout=5, interval=1, clock=clock.monotonic, sleep=clock.sleep)

    assert exc_info.value is error
    assert clock.sleeps == []


def test_exceptions_outside_ignore_list_propagate(driver, clock):
    def condition(d):
        raise NoSuchElementException("gone")

    with pytest.raises(NoSuchElementException):
        wait_for(driver, condition, timeout=5, interval=1, ignored_exceptions=(), clock=clock.monotonic, sleep=clock.sleep)


@pytest.mark.parametrize("timeout, interval", [(-1, 0.5), (5, 0), (5, -0.1)])
def test_invalid_timing_is_rejected(driver, timeout, interval):
    with pytest.raises(ValueError):
        wait_for(driver, EC.url_contains("/"), timeout=timeout, interval=interval)


def test_real_clock_returns_immediately(driver):
    assert wait_for(driver, EC.title_contains("Dashboard"), timeout=1, interval=0.05) is True


def test_policy_from_config():
    config = StaticConfig(default_timeout=12, poll_interval=0.2)

    policy = WaitPolicy.from_config(config)
    assert (policy.timeout, policy.interval) == (12, 0.2)
    assert policy.ignored_exceptions == EC.TRANSIENT_FAULTS

    assert WaitPolicy.from_config(config, timeout=3).timeout == 3


def test_policy_wait_for(driver):
    policy = WaitPolicy(timeout=1, interval=0.05)

    assert policy.wait_for(driver, EC.url_to_be("https://example.com/HOME")) is True
