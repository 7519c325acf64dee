"""
================================================================================
Common Utilities
================================================================================

Shared configuration and logging setup.

Exports:
    - TestConfig: Layered YAML test configuration
    - ConfigurationError: Raised on missing or malformed settings
    - init_logger: Installs the Loguru sinks for a test run

Usage:
    from web_core.common import TestConfig, init_logger

    config = TestConfig.load()
    init_logger(config)

================================================================================
"""

from .logger import init_logger, reset_logger
from .test_config import ConfigurationError, TestConfig

__all__ = [
    "TestConfig",
    "ConfigurationError",
    "init_logger",
    "reset_logger",
]
