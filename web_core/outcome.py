"""
================================================================================
Condition Outcome
================================================================================

Tagged result returned by every polling condition.

    Ready(value)   - the condition is satisfied, ``value`` is handed back
    NotReady       - not satisfied yet, the poll loop should try again
    Fatal(error)   - an unexpected fault, the poll loop re-raises ``error``

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OutcomeStatus(Enum):
    """Evaluation status of a condition."""

    READY = "ready"
    NOT_READY = "not_ready"
    FATAL = "fatal"


@dataclass(frozen=True)
class Outcome:
    """
    Result of evaluating a condition against a driver.

    Attributes:
        status: Evaluation status
        value: Satisfying value when ready; the "not ready" placeholder
            (``False`` or ``None``) otherwise
        error: The fault carried by a fatal outcome
    """
    status: OutcomeStatus
    value: Any = None
    error: Optional[BaseException] = None

    @classmethod
    def ready(cls, value: Any = True) -> "Outcome":
        return cls(OutcomeStatus.READY, value)

    @classmethod
    def not_ready(cls, value: Any = None) -> "Outcome":
        return cls(OutcomeStatus.NOT_READY, value)

    @classmethod
    def fatal(cls, error: BaseException) -> "Outcome":
        return cls(OutcomeStatus.FATAL, None, error)

    @property
    def is_ready(self) -> bool:
        return self.status is OutcomeStatus.READY

    @property
    def is_fatal(self) -> bool:
        return self.status is OutcomeStatus.FATAL

    def unwrap(self) -> Any:
        """
        Return the carried value, re-raising the error of a fatal outcome.

        Raises:
            The stored exception when the outcome is fatal
        """
        if self.is_fatal:
            raise self.error
        return self.value

    def __bool__(self) -> bool:
        return self.is_ready


__all__ = [
    "Outcome",
    "OutcomeStatus",
]
