"""
URL path markers for page classes.

    @url_part("/login")
    class LoginPage(BasePage):
        ...

    get_url_part(LoginPage)  # "/login"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional, Type, TypeVar


T = TypeVar("T")

_MARKER_ATTRIBUTE = "__url_part__"


@dataclass(frozen=True)
class UrlPart:
    """Path of a page relative to the application base URL."""
    url_part: str


def url_part(path: str) -> Callable[[Type[T]], Type[T]]:
    """Class decorator attaching a :class:`UrlPart` marker."""

    def decorator(cls: Type[T]) -> Type[T]:
        setattr(cls, _MARKER_ATTRIBUTE, UrlPart(path))
        return cls

    return decorator


def get_marker(cls: type) -> Optional[UrlPart]:
    """Return the marker declared on ``cls`` or inherited from a base class."""
    for klass in cls.__mro__:
        marker = klass.__dict__.get(_MARKER_ATTRIBUTE)
        if marker is not None:
            return marker
    return None


def get_url_part(cls: type) -> Optional[str]:
    marker = get_marker(cls)
    return marker.url_part if marker else None
