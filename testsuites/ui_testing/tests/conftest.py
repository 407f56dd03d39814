"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for end-to-end UI tests, providing fixtures for
browser management, page objects, and test setup/teardown.

Key Features:
- One Playwright browser per session, one isolated context per test
- Page Object fixtures for the-internet example pages
- Screenshot capture on failure (SAVE_SCREENSHOTS=true)
- Tests are skipped at collection unless RUN_E2E=true (see testsuites/conftest.py)

================================================================================
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger

from testsuites.ui_testing.pages import (
    AddRemoveElementsPage,
    CheckboxesPage,
    DropdownPage,
    LoginPage,
    MainPage,
    SecureAreaPage,
    TablesPage,
)
from ui_automation.browser import Browser
from ui_automation.browser_manager import BrowserManager
from ui_automation.config import EnvConfig


# ================================================================================
# Pytest Configuration
# ================================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "ui: mark test as UI test"
    )
    config.addinivalue_line(
        "markers", "e2e: mark test as end-to-end test"
    )
    config.addinivalue_line(
        "markers", "smoke: mark test as smoke test"
    )
    config.addinivalue_line(
        "markers", "regression: mark test as regression test"
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Expose each phase's report on the item so fixtures can see failures."""
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single launched browser for all tests in the session,
    reducing browser launch overhead.
    """
    async with BrowserManager() as manager:
        yield manager


@pytest_asyncio.fixture(loop_scope="session")
async def browser(browser_manager: BrowserManager, request) -> AsyncGenerator[Browser, None]:
    """
    Function-scoped browser facade fixture.

    Attaches a page from a fresh context to the Browser facade and opens the
    main page. On failure a screenshot is saved when SAVE_SCREENSHOTS is enabled.
    """
    browser = await browser_manager.open_session()
    context = browser.page.context
    await browser.maximize_window()
    await browser.navigate_to("/")

    yield browser

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed and browser.is_attached and EnvConfig.should_save_screenshots():
        path = EnvConfig.get_report_path() / "screenshots" / f"{request.node.name}.png"
        await browser.take_screenshot(str(path), full_page=True)
        logger.info(f"Failure screenshot saved: {path}")

    await browser_manager.close_context(context)
    Browser.reset()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest.fixture
def main_page(browser: Browser) -> MainPage:
    return MainPage()


@pytest.fixture
def add_remove_elements_page(browser: Browser) -> AddRemoveElementsPage:
    return AddRemoveElementsPage()


@pytest.fixture
def login_page(browser: Browser) -> LoginPage:
    return LoginPage()


@pytest.fixture
def secure_area_page(browser: Browser) -> SecureAreaPage:
    return SecureAreaPage()


@pytest.fixture
def checkboxes_page(browser: Browser) -> CheckboxesPage:
    return CheckboxesPage()


@pytest.fixture
def dropdown_page(browser: Browser) -> DropdownPage:
    return DropdownPage()


@pytest.fixture
def tables_page(browser: Browser) -> TablesPage:
    return TablesPage()


# ================================================================================
# Utility Fixtures
# ================================================================================

@pytest.fixture
def test_data():
    """
    Provides common test data for UI tests.
    """
    return {
        "valid_user": {
            "username": EnvConfig.get_username(),
            "password": EnvConfig.get_password(),
        },
        "invalid_user": {
            "username": "invaliduser",
            "password": "invalidpass",
        },
        "messages": {
            "login_success": "You logged into a secure area!",
            "login_invalid_username": "Your username is invalid!",
            "logout_success": "You logged out of the secure area!",
        },
    }
