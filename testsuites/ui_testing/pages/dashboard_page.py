"""
Dashboard page object.
"""

from __future__ import annotations

import allure

from web_core import expected_conditions as EC
from web_core.locator import Locator
from web_core.pages import BasePage, url_part


@url_part("/dashboard")
class DashboardPage(BasePage):

    HEADER = Locator.css("[data-testid='dashboard-header'], header, h1")

    @allure.step("Verify dashboard loaded")
    def verify_dashboard_loaded(self) -> None:
        self.wait_for(EC.page_is_loaded())
        self.wait_for(EC.element_is_visible(self.HEADER), message="dashboard header")
        assert self.is_opened(), f"Expected dashboard URL, got {self.driver.current_url}"
