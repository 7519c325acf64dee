"""
Page objects for the browser smoke suite.
"""

from .dashboard_page import DashboardPage
from .login_page import LoginPage

__all__ = [
    "DashboardPage",
    "LoginPage",
]
