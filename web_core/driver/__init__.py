"""
================================================================================
WebDriver Layer
================================================================================

Components:
    - factory: Local and remote driver creation per browser
    - extensions: Window, navigation and action helpers
    - session: Driver lifecycle management

Author: Automation Team
License: MIT
================================================================================
"""

from .extensions import (
    execute_script,
    maximize,
    navigate_to,
    perform,
    refresh_page,
    set_position,
    set_size,
    title_contains,
    try_maximize,
    wait_for_page_to_load,
)
from .factory import DriverCreator, create_driver, get_driver_creator
from .session import DriverSession

__all__ = [
    "DriverCreator",
    "DriverSession",
    "create_driver",
    "get_driver_creator",
    "execute_script",
    "maximize",
    "try_maximize",
    "set_size",
    "set_position",
    "navigate_to",
    "refresh_page",
    "wait_for_page_to_load",
    "title_contains",
    "perform",
]
