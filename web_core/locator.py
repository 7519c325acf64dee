"""
Element locators.

A locator is a ``(by, value)`` pair understood by Selenium, e.g.
``Locator(By.ID, "username")``. Plain tuples are accepted everywhere a
``Locator`` is.
"""

from __future__ import annotations

from typing import Any, NamedTuple, Tuple, Union

from selenium.webdriver.common.by import By


class Locator(NamedTuple):
    """Immutable selection strategy + value pair."""
    by: str
    value: str

    @classmethod
    def id(cls, value: str) -> "Locator":
        return cls(By.ID, value)

    @classmethod
    def css(cls, value: str) -> "Locator":
        return cls(By.CSS_SELECTOR, value)

    @classmethod
    def xpath(cls, value: str) -> "Locator":
        return cls(By.XPATH, value)

    @classmethod
    def name(cls, value: str) -> "Locator":
        return cls(By.NAME, value)

    def __str__(self) -> str:
        return f"{self.by}={self.value}"


LocatorLike = Union[Locator, Tuple[str, str]]


def is_locator(target: Any) -> bool:
    """Tell a locator pair apart from an element handle."""
    return (
        isinstance(target, tuple)
        and len(target) == 2
        and all(isinstance(part, str) for part in target)
    )


__all__ = [
    "Locator",
    "LocatorLike",
    "is_locator",
]
