"""
================================================================================
Web Core
================================================================================

Selenium helpers for UI test automation.

Modules:
    - expected_conditions: Polling predicates returning tagged outcomes
    - waits: Poll loop with monotonic timeout accounting
    - retry / web_element: Element lookup with a single stale-element retry
    - driver: Driver factory, session lifecycle and WebDriver helpers
    - pages: Page object base class and URL part markers
    - common: Layered YAML configuration and Loguru setup

Example:
    from web_core import TestConfig, WaitPolicy, Locator
    from web_core import expected_conditions as EC
    from web_core.driver import DriverSession, navigate_to

    config = TestConfig.load()
    policy = WaitPolicy.from_config(config)

    with DriverSession(config) as session:
        navigate_to(session.driver, config.base_url, policy)
        policy.wait_for(session.driver, EC.element_is_visible(Locator.id("main")))

================================================================================
"""

__version__ = "1.0.0"

from .common import ConfigurationError, TestConfig, init_logger
from .expected_conditions import TRANSIENT_FAULTS, Condition
from .locator import Locator
from .outcome import Outcome, OutcomeStatus
from .retry import STALE_RETRY, RetryPolicy, with_retry
from .waits import WaitPolicy, WaitTimeoutError, wait_for
from .web_element import CustomWebElement, resolve, resolve_all

__all__ = [
    "TestConfig",
    "ConfigurationError",
    "init_logger",
    "TRANSIENT_FAULTS",
    "Condition",
    "Locator",
    "Outcome",
    "OutcomeStatus",
    "RetryPolicy",
    "STALE_RETRY",
    "with_retry",
    "WaitPolicy",
    "WaitTimeoutError",
    "wait_for",
    "CustomWebElement",
    "resolve",
    "resolve_all",
]
