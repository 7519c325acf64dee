"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - Navigation to the page's URL part under the configured base URL
    - Lazily resolved page elements
    - Wait helpers bound to the configured timeouts

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Optional
from urllib.parse import urljoin, urlunsplit

import allure
from loguru import logger

from ..driver.extensions import navigate_to
from ..expected_conditions import Condition, url_contains
from ..locator import LocatorLike
from ..waits import WaitPolicy
from ..web_element import CustomWebElement
from .url_part import get_url_part


class BasePage:
    """
    Base class for all page objects.

    Usage:
        @url_part("/login")
        class LoginPage(BasePage):
            USERNAME = Locator.id("username")

            def login(self, username: str, password: str) -> None:
                self.element(self.USERNAME).element.send_keys(username)
                ...
    """

    def __init__(self, driver: Any, config):
        """
        Initialize page object.

        Args:
            driver: WebDriver
            config: TestConfig instance
        """
        self.driver = driver
        self.config = config
        self.policy = WaitPolicy.from_config(config)

    @property
    def path(self) -> str:
        return get_url_part(type(self)) or "/"

    @property
    def url(self) -> str:
        """Get full page URL."""
        base = urlunsplit(self.config.base_url)
        return urljoin(base if base.endswith("/") else base + "/", self.path.lstrip("/"))

    def open(self) -> "BasePage":
        """Navigate to this page and wait until the browser is on it."""
        with allure.step(f"Open {type(self).__name__}"):
            navigate_to(self.driver, self.url, self.policy)
            self.wait_for(self._on_page())
            logger.debug(f"Opened page: {self.url}")
        return self

    def _on_page(self) -> Condition:
        # Without a url_part every path contains "/", so match the full URL
        if get_url_part(type(self)) is None:
            return url_contains(self.url)
        return url_contains(self.path)

    def is_opened(self) -> bool:
        return self._on_page()(self.driver).is_ready

    def element(self, locator: LocatorLike) -> CustomWebElement:
        return CustomWebElement(self.driver, locator, self.config)

    def wait_for(
        self,
        condition: Callable[[Any], Any],
        timeout: Optional[float] = None,
        message: str = "",
    ) -> Any:
        """
        Wait for a condition using the configured poll interval.

        Args:
            condition: Condition or callable of the driver
            timeout: Override for the configured default timeout
            message: Extra text for the timeout error
        """
        policy = self.policy if timeout is None else WaitPolicy.from_config(self.config, timeout)
        return policy.wait_for(self.driver, condition, message=message)
