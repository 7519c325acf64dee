"""
================================================================================
Selenium Test Doubles
================================================================================

Minimal in-memory stand-ins for WebDriver objects, enough to exercise
conditions, waits and element resolution without a browser.

================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from selenium.common.exceptions import (
    NoAlertPresentException,
    NoSuchElementException,
    NoSuchFrameException,
    StaleElementReferenceException,
)


class FakeElement:
    """Element handle; every accessor raises once the element is stale."""

    def __init__(
        self,
        text: str = "",
        displayed: bool = True,
        enabled: bool = True,
        selected: bool = False,
        value: Optional[str] = None,
        stale: bool = False,
    ):
        self._text = text
        self._displayed = displayed
        self._enabled = enabled
        self._selected = selected
        self._value = value
        self.stale = stale

    def _check(self) -> None:
        if self.stale:
            raise StaleElementReferenceException("element is not attached to the page document")

    @property
    def text(self) -> str:
        self._check()
        return self._text

    def is_displayed(self) -> bool:
        self._check()
        return self._displayed

    def is_enabled(self) -> bool:
        self._check()
        return self._enabled

    def is_selected(self) -> bool:
        self._check()
        return self._selected

    def get_attribute(self, name: str) -> Optional[str]:
        self._check()
        return self._value if name == "value" else None


class FakeAlert:

    def __init__(self, text: str = ""):
        self.text = text
        self.accepted = False

    def accept(self) -> None:
        self.accepted = True


class FakeSwitchTo:

    def __init__(self, driver: "FakeDriver"):
        self._driver = driver

    @property
    def alert(self) -> FakeAlert:
        if self._driver.alert is None:
            raise NoAlertPresentException("no such alert")
        return self._driver.alert

    def frame(self, reference: Any) -> None:
        if reference not in self._driver.frames:
            raise NoSuchFrameException(f"no such frame: {reference!r}")
        self._driver.current_frame = reference


class FakeDriver:
    """
    WebDriver double.

    ``elements`` maps ``(by, value)`` to a list of elements or to an
    exception instance raised on lookup. A list entry may also be an
    exception, raised when that call is reached (see ``queue_lookups``).
    """

    def __init__(self, title: str = "", current_url: str = "about:blank"):
        self.title = title
        self.current_url = current_url
        self.elements: Dict[Tuple[str, str], Any] = {}
        self.lookups: Dict[Tuple[str, str], List[Any]] = {}
        self.find_calls: List[Tuple[str, str]] = []
        self.alert: Optional[FakeAlert] = None
        self.frames: List[Any] = []
        self.current_frame: Any = None
        self.ready_state = "complete"
        self.calls: List[Tuple[Any, ...]] = []
        self.switch_to = FakeSwitchTo(self)

    def add(self, locator: Tuple[str, str], *elements: Any) -> None:
        self.elements[tuple(locator)] = list(elements)

    def queue_lookups(self, locator: Tuple[str, str], *results: Any) -> None:
        """Queue per-call results (element, list or exception) for a locator."""
        self.lookups[tuple(locator)] = list(results)

    def _lookup(self, by: str, value: str) -> Any:
        key = (by, value)
        self.find_calls.append(key)
        queue = self.lookups.get(key)
        result = queue.pop(0) if queue else self.elements.get(key, [])
        if isinstance(result, BaseException):
            raise result
        return result

    def find_element(self, by: str, value: str) -> Any:
        result = self._lookup(by, value)
        if isinstance(result, list):
            if not result:
                raise NoSuchElementException(f"Unable to locate element: {value}")
            return result[0]
        return result

    def find_elements(self, by: str, value: str) -> List[Any]:
        result = self._lookup(by, value)
        return result if isinstance(result, list) else [result]

    def execute_script(self, script: str, *args: Any) -> Any:
        self.calls.append(("execute_script", script) + args)
        if "readyState" in script:
            return self.ready_state
        return None

    def get(self, url: str) -> None:
        self.calls.append(("get", url))
        self.current_url = url

    def refresh(self) -> None:
        self.calls.append(("refresh",))

    def maximize_window(self) -> None:
        self.calls.append(("maximize_window",))

    def set_window_size(self, width: int, height: int) -> None:
        self.calls.append(("set_window_size", width, height))

    def set_window_position(self, x: int, y: int) -> None:
        self.calls.append(("set_window_position", x, y))

    def set_page_load_timeout(self, seconds: int) -> None:
        self.calls.append(("set_page_load_timeout", seconds))

    def quit(self) -> None:
        self.calls.append(("quit",))


class FakeClock:
    """Monotonic clock whose ``sleep`` advances time instantly."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps: List[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class StaticConfig:
    """TestConfig stand-in exposing fixed typed settings."""

    def __init__(self, **values: Any):
        self.default_timeout = values.pop("default_timeout", 5)
        self.element_timeout = values.pop("element_timeout", 2)
        self.poll_interval = values.pop("poll_interval", 0.01)
        self.page_load_timeout = values.pop("page_load_timeout", 30)
        self.browser = values.pop("browser", "chrome")
        self.headless = values.pop("headless", True)
        self.remote_url = values.pop("remote_url", None)
        self.base_url = values.pop("base_url", None)
        self.data = values

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
