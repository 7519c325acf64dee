"""
================================================================================
Page Objects
================================================================================

Page Object Model building blocks.

Author: Automation Team
License: MIT
================================================================================
"""

from .base_page import BasePage
from .url_part import UrlPart, get_url_part, url_part

__all__ = [
    "BasePage",
    "UrlPart",
    "get_url_part",
    "url_part",
]
