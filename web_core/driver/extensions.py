"""
================================================================================
WebDriver Helpers
================================================================================

Convenience functions over a Selenium WebDriver: script execution, window
sizing, navigation with timeout recovery, and composed user actions.

All functions take the driver as their first argument and, where it makes
sense, return it so calls can be chained.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Union
from urllib.parse import SplitResult, urlunsplit

import allure
from loguru import logger
from selenium.common.exceptions import NoAlertPresentException, TimeoutException
from selenium.webdriver.common.action_chains import ActionChains

from ..expected_conditions import page_is_loaded
from ..waits import WaitPolicy


def _check_not_none(value: Any, name: str) -> None:
    if value is None:
        raise ValueError(f"{name} must not be None")


def execute_script(driver: Any, script: str, *args: Any) -> Any:
    """Run JavaScript in the current page and return its result."""
    _check_not_none(driver, "driver")
    return driver.execute_script(script, *args)


# =============================================================================
# Window Management
# =============================================================================

def maximize(driver: Any) -> Any:
    _check_not_none(driver, "driver")
    driver.maximize_window()
    return driver


def try_maximize(driver: Any) -> None:
    """Maximize the window if the browser allows it; failures are ignored."""
    try:
        maximize(driver)
    except Exception as e:
        logger.debug(f"Window maximize skipped: {e}")


def set_size(driver: Any, width: int, height: int) -> Any:
    _check_not_none(driver, "driver")
    driver.set_window_size(width, height)
    return driver


def set_position(driver: Any, x: int, y: int) -> Any:
    _check_not_none(driver, "driver")
    driver.set_window_position(x, y)
    return driver


# =============================================================================
# Navigation
# =============================================================================

def wait_for_page_to_load(driver: Any, policy: WaitPolicy) -> None:
    """Block until ``document.readyState`` is ``complete``."""
    policy.wait_for(driver, page_is_loaded())


def refresh_page(driver: Any, policy: WaitPolicy) -> None:
    """
    Reload the page, confirming a "leave page" alert if one pops up.

    Args:
        driver: WebDriver
        policy: Timing for the page-load wait
    """
    with allure.step("Refresh page"):
        driver.refresh()

        try:
            driver.switch_to.alert.accept()
        except NoAlertPresentException:
            logger.info("No confirmation alert.")

        wait_for_page_to_load(driver, policy)


def navigate_to(driver: Any, url: Union[str, SplitResult], policy: WaitPolicy) -> None:
    """
    Open ``url``; a page-load timeout is recovered with a refresh.

    Args:
        driver: WebDriver
        url: Absolute URL, as text or as a parsed URI
        policy: Timing for the recovery page-load wait
    """
    if isinstance(url, SplitResult):
        url = urlunsplit(url)

    with allure.step(f"Navigate to {url}"):
        try:
            driver.get(url)
            logger.debug(f"Navigated to: {url}")
        except TimeoutException:
            logger.warning(f"Page load timed out, refreshing: {url}")
            refresh_page(driver, policy)


def title_contains(driver: Any, text: str) -> bool:
    """Return whether the page title contains ``text``; ``False`` without a driver."""
    if not text:
        raise ValueError("text must not be empty")
    if driver is None:
        return False
    return text in driver.title


# =============================================================================
# User Actions
# =============================================================================

def perform(driver: Any, actions: Callable[[ActionChains], ActionChains]) -> Any:
    """
    Build and perform an action chain.

    Example:
        >>> perform(driver, lambda chain: chain.move_to_element(menu).click(item))
    """
    _check_not_none(driver, "driver")
    _check_not_none(actions, "actions")

    chain = actions(ActionChains(driver))
    chain.perform()
    return driver


__all__ = [
    "execute_script",
    "maximize",
    "try_maximize",
    "set_size",
    "set_position",
    "wait_for_page_to_load",
    "refresh_page",
    "navigate_to",
    "title_contains",
    "perform",
]
