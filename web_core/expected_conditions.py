"""
================================================================================
Expected Conditions
================================================================================

Polling predicates for UI synchronization.

Every factory in this module returns a :class:`Condition`: a stateless callable
taking a WebDriver and returning an :class:`~web_core.outcome.Outcome`.
Conditions only observe the page; the frame conditions are the exception and
switch the driver's focused frame as their success effect.

Fault handling:
    - Faults in ``TRANSIENT_FAULTS`` mean "not ready yet" (or, for the
      invisibility/staleness checks, "satisfied by absence")
    - Any other WebDriverException is returned as ``Outcome.fatal``

Usage:
    >>> condition = url_contains("/dashboard")
    >>> condition(driver)
    Outcome(status=<OutcomeStatus.READY: 'ready'>, value=True, error=None)

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Union

from selenium.common.exceptions import (
    NoAlertPresentException,
    NoSuchElementException,
    NoSuchFrameException,
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.remote.webelement import WebElement

from .locator import LocatorLike, is_locator
from .outcome import Outcome


# Faults that signal "the page is not there yet" rather than a failure
TRANSIENT_FAULTS = (
    StaleElementReferenceException,
    NoSuchElementException,
    NoAlertPresentException,
    NoSuchFrameException,
)


class Condition:
    """
    A named, re-evaluable wait condition.

    Args:
        description: Human-readable identity used in timeout diagnostics
        probe: Function of the driver returning the raw check result
        not_ready: Value carried by a not-ready outcome (``False`` for
            boolean checks, ``None`` for element resolution)
        satisfied_by_absence: Treat transient faults as success
    """

    def __init__(
        self,
        description: str,
        probe: Callable[[Any], Any],
        not_ready: Any = None,
        satisfied_by_absence: bool = False,
    ):
        self.description = description
        self._probe = probe
        self._not_ready = not_ready
        self._satisfied_by_absence = satisfied_by_absence

    def __call__(self, driver: Any) -> Outcome:
        try:
            value = self._probe(driver)
        except TRANSIENT_FAULTS:
            if self._satisfied_by_absence:
                return Outcome.ready(True)
            return Outcome.not_ready(self._not_ready)
        except WebDriverException as e:
            return Outcome.fatal(e)

        if value:
            return Outcome.ready(value)
        return Outcome.not_ready(self._not_ready)

    def __repr__(self) -> str:
        return self.description


ElementOrLocator = Union[WebElement, LocatorLike]


def _element(driver: Any, target: ElementOrLocator) -> WebElement:
    if is_locator(target):
        return driver.find_element(*target)
    return target


def _describe(target: Any) -> str:
    if is_locator(target):
        return f"{target[0]}={target[1]}"
    if isinstance(target, (str, int)):
        return repr(target)
    return type(target).__name__


# =============================================================================
# Page State
# =============================================================================

def title_is(title: str) -> Condition:
    """An expectation for the page title to match ``title`` exactly."""
    return Condition(
        f"title_is({title!r})",
        lambda driver: driver.title == title,
        not_ready=False,
    )


def title_contains(title: str) -> Condition:
    """An expectation for the page title to contain a case-sensitive fragment."""
    return Condition(
        f"title_contains({title!r})",
        lambda driver: title in driver.title,
        not_ready=False,
    )


def url_to_be(url: str) -> Condition:
    """An expectation for the current URL to equal ``url``, ignoring case."""
    expected = url.lower()
    return Condition(
        f"url_to_be({url!r})",
        lambda driver: driver.current_url.lower() == expected,
        not_ready=False,
    )


def url_contains(fraction: str) -> Condition:
    """An expectation for the current URL to contain ``fraction``, ignoring case."""
    expected = fraction.lower()
    return Condition(
        f"url_contains({fraction!r})",
        lambda driver: expected in driver.current_url.lower(),
        not_ready=False,
    )


def page_is_loaded() -> Condition:
    """An expectation for ``document.readyState`` to reach ``complete``."""
    return Condition(
        "page_is_loaded()",
        lambda driver: driver.execute_script("return document.readyState") == "complete",
        not_ready=False,
    )


# =============================================================================
# Element Resolution
# =============================================================================

def element_exists(locator: LocatorLike) -> Condition:
    """
    An expectation for an element to be present on the DOM.

    This does not necessarily mean that the element is visible.

    Returns:
        Condition ready with the located WebElement
    """
    return Condition(
        f"element_exists({_describe(locator)})",
        lambda driver: driver.find_element(*locator),
    )


def element_is_visible(locator: LocatorLike) -> Condition:
    """
    An expectation for an element to be present on the DOM and displayed.

    Returns:
        Condition ready with the located WebElement
    """

    def probe(driver: Any) -> Optional[WebElement]:
        element = driver.find_element(*locator)
        return element if element.is_displayed() else None

    return Condition(f"element_is_visible({_describe(locator)})", probe)


def elements_present(locator: LocatorLike) -> Condition:
    """An expectation for at least one element matching ``locator``."""
    return Condition(
        f"elements_present({_describe(locator)})",
        lambda driver: driver.find_elements(*locator),
    )


def all_elements_located(
    locator: LocatorLike,
    elements_condition: Optional[Callable[[WebElement], bool]] = None,
) -> Condition:
    """
    An expectation for elements matching ``locator``, optionally filtered.

    Args:
        locator: The locator used to find the elements
        elements_condition: Per-element filter, e.g. ``WebElement.is_displayed``

    Returns:
        Condition ready with the non-empty list of matching elements
    """

    def probe(driver: Any) -> List[WebElement]:
        elements = driver.find_elements(*locator)
        if elements_condition is not None:
            elements = [element for element in elements if elements_condition(element)]
        return elements

    return Condition(f"all_elements_located({_describe(locator)})", probe)


def visibility_of_all_elements(elements: Iterable[WebElement]) -> Condition:
    """
    An expectation for every element of a collection to be displayed.

    An empty collection never satisfies the condition.
    """
    elements = list(elements)

    def probe(driver: Any) -> Optional[List[WebElement]]:
        if elements and all(element.is_displayed() for element in elements):
            return elements
        return None

    return Condition(f"visibility_of_all_elements({len(elements)} elements)", probe)


def element_to_be_clickable(target: ElementOrLocator) -> Condition:
    """
    An expectation for an element to be displayed and enabled.

    Args:
        target: A locator or an already resolved element
    """

    def probe(driver: Any) -> Optional[WebElement]:
        element = _element(driver, target)
        if element is not None and element.is_displayed() and element.is_enabled():
            return element
        return None

    return Condition(f"element_to_be_clickable({_describe(target)})", probe)


# =============================================================================
# Text and Selection
# =============================================================================

def text_to_be_present_in_element(element: WebElement, text: str) -> Condition:
    """An expectation for ``text`` to be part of the element's visible text."""
    return Condition(
        f"text_to_be_present_in_element({text!r})",
        lambda driver: text in element.text,
        not_ready=False,
    )


def text_to_be_present_in_element_located(locator: LocatorLike, text: str) -> Condition:
    """An expectation for ``text`` to be part of the located element's text."""
    return Condition(
        f"text_to_be_present_in_element_located({_describe(locator)}, {text!r})",
        lambda driver: text in driver.find_element(*locator).text,
        not_ready=False,
    )


def text_to_be_present_in_element_value(target: ElementOrLocator, text: str) -> Condition:
    """An expectation for ``text`` to be part of the element's value attribute."""

    def probe(driver: Any) -> bool:
        value = _element(driver, target).get_attribute("value") or ""
        return text in value

    return Condition(
        f"text_to_be_present_in_element_value({_describe(target)}, {text!r})",
        probe,
        not_ready=False,
    )


def element_selection_state_to_be(target: ElementOrLocator, selected: bool) -> Condition:
    """An expectation for the element's selection state to equal ``selected``."""
    return Condition(
        f"element_selection_state_to_be({_describe(target)}, {selected})",
        lambda driver: _element(driver, target).is_selected() == selected,
        not_ready=False,
    )


def element_to_be_selected(target: ElementOrLocator) -> Condition:
    """An expectation for the element to be selected."""
    return element_selection_state_to_be(target, True)


# =============================================================================
# Absence
# =============================================================================

def invisibility_of_element_located(locator: LocatorLike) -> Condition:
    """
    An expectation for an element to be either invisible or not on the DOM.

    A missing element and a stale reference both count as invisible.
    """
    return Condition(
        f"invisibility_of_element_located({_describe(locator)})",
        lambda driver: not driver.find_element(*locator).is_displayed(),
        not_ready=False,
        satisfied_by_absence=True,
    )


def invisibility_of_element_with_text(locator: LocatorLike, text: str) -> Condition:
    """
    An expectation for an element carrying ``text`` to be gone.

    Satisfied when the element is missing, stale, has no text, or shows a
    different text.
    """

    def probe(driver: Any) -> bool:
        element_text = driver.find_element(*locator).text
        if not element_text:
            return True
        return element_text != text

    return Condition(
        f"invisibility_of_element_with_text({_describe(locator)}, {text!r})",
        probe,
        not_ready=False,
        satisfied_by_absence=True,
    )


def staleness_of(element: Optional[WebElement]) -> Condition:
    """An expectation for an element to be detached from the DOM."""

    def probe(driver: Any) -> bool:
        if element is None:
            return True
        # Any call on the element forces a staleness check
        element.is_enabled()
        return False

    return Condition("staleness_of(element)", probe, not_ready=False, satisfied_by_absence=True)


# =============================================================================
# Alerts and Frames
# =============================================================================

def alert_is_present() -> Condition:
    """
    An expectation for a JavaScript alert to be open.

    Returns:
        Condition ready with the Alert handle
    """
    return Condition("alert_is_present()", lambda driver: driver.switch_to.alert)


def alert_state(state: bool) -> Condition:
    """An expectation for alert presence to equal ``state``."""

    def probe(driver: Any) -> bool:
        try:
            driver.switch_to.alert
            present = True
        except NoAlertPresentException:
            present = False
        return present == state

    return Condition(f"alert_state({state})", probe, not_ready=False)


def frame_to_be_available_and_switch_to_it(frame: Union[str, int, LocatorLike]) -> Condition:
    """
    An expectation for a frame to be available; switches the driver into it.

    Args:
        frame: Frame name or id, frame index, or a locator for the frame element

    Returns:
        Condition ready with the driver, now focused on the frame
    """

    def probe(driver: Any) -> Any:
        reference = driver.find_element(*frame) if is_locator(frame) else frame
        driver.switch_to.frame(reference)
        return driver

    return Condition(f"frame_to_be_available_and_switch_to_it({_describe(frame)})", probe)


__all__ = [
    "TRANSIENT_FAULTS",
    "Condition",
    "title_is",
    "title_contains",
    "url_to_be",
    "url_contains",
    "page_is_loaded",
    "element_exists",
    "element_is_visible",
    "elements_present",
    "all_elements_located",
    "visibility_of_all_elements",
    "element_to_be_clickable",
    "text_to_be_present_in_element",
    "text_to_be_present_in_element_located",
    "text_to_be_present_in_element_value",
    "element_selection_state_to_be",
    "element_to_be_selected",
    "invisibility_of_element_located",
    "invisibility_of_element_with_text",
    "staleness_of",
    "alert_is_present",
    "alert_state",
    "frame_to_be_available_and_switch_to_it",
]
