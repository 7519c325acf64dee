"""
================================================================================
Login Page Object
================================================================================

Selectors are intentionally generic. Real projects should prefer stable
`data-testid` attributes.

================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from web_core import expected_conditions as EC
from web_core.locator import Locator
from web_core.pages import BasePage, url_part
from web_core.waits import WaitTimeoutError


@url_part("/login")
class LoginPage(BasePage):
    """Login page object."""

    USERNAME_INPUT = Locator.css("[data-testid='username-input'], input[name='username']")
    PASSWORD_INPUT = Locator.css("[data-testid='password-input'], input[type='password']")
    LOGIN_BUTTON = Locator.css("[data-testid='login-button'], button[type='submit']")
    ERROR_MESSAGE = Locator.css("[data-testid='error-message'], .error-message, .alert-danger")

    @allure.step("Verify login form is displayed")
    def verify_form_displayed(self) -> bool:
        for locator in (self.USERNAME_INPUT, self.PASSWORD_INPUT, self.LOGIN_BUTTON):
            if not EC.element_is_visible(locator)(self.driver).is_ready:
                return False
        return True

    @allure.step("Login (username={username})")
    def login(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
        wait_dashboard: bool = True,
    ) -> None:
        """
        Fill in the form and submit it.

        Args:
            username: Defaults to the configured ``user_name``
            password: Defaults to the configured ``user_password``
            wait_dashboard: Wait for the dashboard URL after submitting
        """
        if not self.is_opened():
            self.open()

        username = self.config.user_name if username is None else username
        password = self.config.user_password if password is None else password

        self.element(self.USERNAME_INPUT).element.send_keys(username)
        self.element(self.PASSWORD_INPUT).element.send_keys(password)
        self.wait_for(EC.element_to_be_clickable(self.LOGIN_BUTTON)).click()
        logger.info(f"Submitted login form for {username}")

        if wait_dashboard:
            self.wait_for(EC.url_contains("/dashboard"), message="dashboard after login")

    @allure.step("Verify login error is displayed")
    def verify_error_displayed(self, timeout: float = 5) -> bool:
        try:
            self.wait_for(EC.element_is_visible(self.ERROR_MESSAGE), timeout=timeout)
        except WaitTimeoutError:
            return False
        return True
