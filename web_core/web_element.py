"""
================================================================================
Web Element Resolution
================================================================================

Element lookup with a single retry on stale element references.

A lookup waits for the element to be present (ignoring "no such element"),
and is retried once when the DOM node was replaced mid-read. A second
failure propagates to the caller.

Usage:
    >>> button = CustomWebElement(driver, Locator.id("submit"), config)
    >>> button.element.click()

    >>> rows = resolve_all(driver, Locator.css("tr.row"), WaitPolicy(10, 0.5))

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, List

from selenium.common.exceptions import NoSuchElementException
from selenium.webdriver.remote.webelement import WebElement

from .locator import LocatorLike
from .retry import STALE_RETRY, RetryPolicy
from .waits import WaitPolicy, wait_for


ELEMENT_RETRY = STALE_RETRY.with_message("Re-initialize web element since DOM has been refreshed")
ELEMENTS_RETRY = STALE_RETRY.with_message("Re-initialize web elements since DOM has been refreshed")


def _find_element(driver: Any, locator: LocatorLike, policy: WaitPolicy) -> WebElement:
    return wait_for(
        driver,
        lambda d: d.find_element(*locator),
        timeout=policy.timeout,
        interval=policy.interval,
        ignored_exceptions=(NoSuchElementException,),
        message=f"element {locator[0]}={locator[1]} to be present",
    )


def _find_elements(driver: Any, locator: LocatorLike, policy: WaitPolicy) -> List[WebElement]:
    return wait_for(
        driver,
        lambda d: d.find_elements(*locator),
        timeout=policy.timeout,
        interval=policy.interval,
        ignored_exceptions=(NoSuchElementException,),
        message=f"elements {locator[0]}={locator[1]} to be present",
    )


def resolve(
    driver: Any,
    locator: LocatorLike,
    wait_policy: WaitPolicy,
    retry_policy: RetryPolicy = ELEMENT_RETRY,
) -> WebElement:
    """
    Resolve a single element, retrying once on a stale reference.

    Args:
        driver: WebDriver
        locator: Locator for the element
        wait_policy: Timing for the presence wait
        retry_policy: Retry behavior (default: one retry on staleness)

    Raises:
        WaitTimeoutError: If the element never appears
        StaleElementReferenceException: If the retry goes stale too
    """
    return retry_policy.call(_find_element, driver, locator, wait_policy)


def resolve_all(
    driver: Any,
    locator: LocatorLike,
    wait_policy: WaitPolicy,
    retry_policy: RetryPolicy = ELEMENTS_RETRY,
) -> List[WebElement]:
    """Resolve all elements matching ``locator``; see :func:`resolve`."""
    return retry_policy.call(_find_elements, driver, locator, wait_policy)


class CustomWebElement:
    """
    Lazily resolved page element.

    The element is looked up on every access so that page objects can keep
    one instance across navigations and DOM refreshes.

    Args:
        driver: WebDriver
        locator: Locator for the element
        config: TestConfig supplying element timeout and poll interval
    """

    def __init__(self, driver: Any, locator: LocatorLike, config):
        self.driver = driver
        self.locator = locator
        self._policy = WaitPolicy(timeout=config.element_timeout, interval=config.poll_interval)

    @property
    def element(self) -> WebElement:
        return resolve(self.driver, self.locator, self._policy)

    @property
    def elements(self) -> List[WebElement]:
        return resolve_all(self.driver, self.locator, self._policy)

    def __repr__(self) -> str:
        return f"CustomWebElement({self.locator[0]}={self.locator[1]})"


__all__ = [
    "CustomWebElement",
    "resolve",
    "resolve_all",
]
