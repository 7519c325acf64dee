"""
================================================================================
Driver Factory
================================================================================

Creates local or remote Selenium WebDriver instances for the configured
browser.

Supported browsers:
    - edge: InPrivate window, English UI language
    - chrome: Incognito window, English UI language
    - firefox: Private window, English UI language

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

from loguru import logger
from selenium import webdriver
from selenium.webdriver.chrome.options import Options as ChromeOptions
from selenium.webdriver.common.options import ArgOptions
from selenium.webdriver.edge.options import Options as EdgeOptions
from selenium.webdriver.firefox.options import Options as FirefoxOptions

from ..common.test_config import ConfigurationError


ACCEPT_LANGUAGES = "en"


class DriverCreator(ABC):
    """
    Builds WebDriver instances for one browser.

    Args:
        headless: Run the browser without a visible window
    """

    def __init__(self, headless: bool = True):
        self.headless = headless

    @abstractmethod
    def get_options(self) -> ArgOptions:
        """Browser options shared by local and remote drivers."""

    @abstractmethod
    def get_local_driver(self) -> webdriver.Remote:
        """Start a browser on this machine."""

    def get_remote_driver(self, remote_url: str) -> webdriver.Remote:
        """Start a browser on a Selenium Grid / remote endpoint."""
        logger.debug(f"Connecting to remote WebDriver: {remote_url}")
        return webdriver.Remote(command_executor=remote_url, options=self.get_options())


class EdgeDriverCreator(DriverCreator):

    def get_options(self) -> EdgeOptions:
        options = EdgeOptions()
        options.add_argument("--inprivate")
        if self.headless:
            options.add_argument("--headless=new")
        options.add_experimental_option("prefs", {"intl.accept_languages": ACCEPT_LANGUAGES})
        return options

    def get_local_driver(self) -> webdriver.Edge:
        return webdriver.Edge(options=self.get_options())


class ChromeDriverCreator(DriverCreator):

    def get_options(self) -> ChromeOptions:
        options = ChromeOptions()
        options.add_argument("--incognito")
        if self.headless:
            options.add_argument("--headless=new")
        options.add_argument("--no-sandbox")
        options.add_argument("--disable-dev-shm-usage")
        options.add_argument("--disable-notifications")
        options.add_experimental_option("prefs", {"intl.accept_languages": ACCEPT_LANGUAGES})
        return options

    def get_local_driver(self) -> webdriver.Chrome:
        return webdriver.Chrome(options=self.get_options())


class FirefoxDriverCreator(DriverCreator):

    def get_options(self) -> FirefoxOptions:
        options = FirefoxOptions()
        options.add_argument("-private")
        if self.headless:
            options.add_argument("-headless")
        options.set_preference("intl.accept_languages", ACCEPT_LANGUAGES)
        return options

    def get_local_driver(self) -> webdriver.Firefox:
        return webdriver.Firefox(options=self.get_options())


DRIVER_CREATORS: Dict[str, Type[DriverCreator]] = {
    "edge": EdgeDriverCreator,
    "chrome": ChromeDriverCreator,
    "firefox": FirefoxDriverCreator,
}


def get_driver_creator(browser: str, headless: bool = True) -> DriverCreator:
    """
    Look up the creator for a browser name.

    Raises:
        ConfigurationError: For an unsupported browser
    """
    try:
        creator_class = DRIVER_CREATORS[browser.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported browser: {browser!r}. "
            f"Expected one of: {', '.join(sorted(DRIVER_CREATORS))}"
        ) from None
    return creator_class(headless=headless)


def create_driver(config, remote_url: Optional[str] = None) -> webdriver.Remote:
    """
    Create a WebDriver for ``config.browser``.

    Args:
        config: TestConfig instance
        remote_url: Remote endpoint; defaults to ``config.remote_url``.
            A local browser is started when neither is set.
    """
    creator = get_driver_creator(config.browser, headless=config.headless)
    remote_url = remote_url or config.remote_url

    if remote_url:
        return creator.get_remote_driver(remote_url)

    logger.debug(f"Starting local {config.browser} driver (headless={config.headless})")
    return creator.get_local_driver()


__all__ = [
    "DriverCreator",
    "EdgeDriverCreator",
    "ChromeDriverCreator",
    "FirefoxDriverCreator",
    "DRIVER_CREATORS",
    "get_driver_creator",
    "create_driver",
]
