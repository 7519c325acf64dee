"""
================================================================================
Root Pytest Configuration
================================================================================

Registers project-wide markers and tags tests by suite directory.

================================================================================
"""

import pytest


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )

    # Suite markers
    config.addinivalue_line(
        "markers", "unit: Browser-free tests against fake drivers"
    )
    config.addinivalue_line(
        "markers", "ui: Browser tests against a running application"
    )


def pytest_collection_modifyitems(config, items):
    """Auto-add suite markers based on the test's directory."""
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "web_core Selenium Automation Helpers",
        "=" * 60,
        "",
    ]
