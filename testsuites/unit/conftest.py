"""
================================================================================
Unit Test Configuration
================================================================================

Fixtures for exercising the framework against in-memory Playwright fakes.

Key Features:
- Fresh Browser facade and ConfigLoader singletons per test
- A fake page attached to the facade
- Loguru message capture for log assertions

================================================================================
"""

from typing import Generator, List

import pytest
from loguru import logger

from testsuites.unit.fakes import FakeFrame, FakePage
from ui_automation.browser import Browser
from ui_automation.config import ConfigLoader


@pytest.fixture(autouse=True)
def _fresh_singletons() -> Generator[None, None, None]:
    """Every test starts with unconfigured singletons."""
    Browser.reset()
    ConfigLoader.reset()
    yield
    Browser.reset()
    ConfigLoader.reset()


@pytest.fixture
def page() -> FakePage:
    return FakePage(title="The Internet", url="https://the-internet.herokuapp.com/")


@pytest.fixture
def frame(page: FakePage) -> FakeFrame:
    """Main document of the fake page."""
    return page.main_frame


@pytest.fixture
def browser(page: FakePage) -> Browser:
    return Browser().attach(page)


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collect every message logged through loguru during the test."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
