"""
================================================================================
Root Pytest Configuration
================================================================================

This module provides the root pytest configuration for the entire test suite.
It registers common markers and tags tests by directory.

================================================================================
"""

import pytest

from ui_automation.config import EnvConfig


E2E_DISABLED_REASON = "End-to-end UI tests are disabled (set RUN_E2E=true to enable)"


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
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "unit: Framework tests against in-memory fakes"
    )
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests against a live browser"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: UI-specific tests"
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the directory-derived markers so suites can be selected with -m, and
    skips e2e tests before any browser fixture is set up unless RUN_E2E=true.
    """
    run_e2e = EnvConfig.should_run_e2e()

    for item in items:
        path = str(item.fspath)

        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)

        if "unit" in path.replace("\\", "/").split("/"):
            item.add_marker(pytest.mark.unit)

        if not run_e2e and item.get_closest_marker("e2e") is not None:
            item.add_marker(pytest.mark.skip(reason=E2E_DISABLED_REASON))


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "the-internet UI Automation Framework",
        "=" * 60,
        "",
    ]
