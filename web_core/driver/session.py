"""
================================================================================
Driver Session
================================================================================

WebDriver lifecycle management for UI testing.

Features:
    - Driver creation from test configuration
    - Page-load timeout and best-effort window maximize on start
    - Guaranteed quit on exit

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Callable, Optional

from loguru import logger

from .extensions import try_maximize
from .factory import create_driver


class DriverSession:
    """
    Owns one WebDriver for the duration of a test (or test session).

    The driver is single-owner: it must not be shared between threads.

    Usage:
        with DriverSession(config) as session:
            navigate_to(session.driver, config.base_url, policy)
    """

    def __init__(
        self,
        config,
        driver_factory: Callable[[Any], Any] = create_driver,
    ):
        """
        Initialize driver session.

        Args:
            config: TestConfig instance
            driver_factory: Callable creating a driver from the config
        """
        self.config = config
        self._driver_factory = driver_factory
        self._driver: Optional[Any] = None

    def __enter__(self) -> "DriverSession":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def start(self) -> Any:
        """Create and prepare the driver."""
        if self._driver is not None:
            return self._driver

        driver = self._driver = self._driver_factory(self.config)
        try:
            driver.set_page_load_timeout(self.config.page_load_timeout)
            try_maximize(driver)
        except BaseException:
            self.close()
            raise

        logger.debug(f"Driver started: {self.config.browser}")
        return driver

    def close(self) -> None:
        """Quit the driver."""
        if self._driver is None:
            return

        try:
            self._driver.quit()
        finally:
            self._driver = None
            logger.debug("Driver closed")

    @property
    def driver(self) -> Any:
        if self._driver is None:
            raise RuntimeError("Driver not started. Call start() first.")
        return self._driver


__all__ = [
    "DriverSession",
]
