"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

A page object owns its element wrappers plus one "unique element" whose
visibility means the page has loaded. Callers invoke ``is_page_opened``
before relying on any other page action.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional

import allure
from loguru import logger

from .browser import Browser
from .elements import BaseElement
from .waits import WaitOptions


PAGE_LOAD_TIMEOUT_MS = 30000


class BasePage:
    """
    Base class for all page objects.
    
    Usage:
        class LoginPage(BasePage):
            URL_PATH = "/login"

            def __init__(self):
                super().__init__(Label("h2", "Login Page Heading"), "Login Page")
                self.username_input = Input("#username", "Username Input")
    """

    # Override in subclasses
    URL_PATH: str = "/"

    def __init__(self, unique_element: BaseElement, name: str):
        """
        Args:
            unique_element: Element whose visibility identifies the loaded page
            name: Page name for logging
        """
        self.unique_element = unique_element
        self.name = name

    @property
    def browser(self) -> Browser:
        return Browser()

    def get_page_name(self) -> str:
        return self.name

    def get_page_unique_element(self) -> BaseElement:
        return self.unique_element

    async def is_page_opened(self, options: Optional[WaitOptions] = None) -> bool:
        """
        Wait for the unique element to be displayed.

        Args:
            options: Wait options; defaults to a raising 30s wait

        Returns:
            True when opened; False only for non-raising options

        Raises:
            WaitTimeoutError: When the wait is raising and the page did not open
        """
        options = options or WaitOptions(timeout_ms=PAGE_LOAD_TIMEOUT_MS)
        logger.info(f'Waiting for page "{self.name}" to load')
        with allure.step(f"Verify page opened: {self.name}"):
            is_opened = await self.unique_element.state.wait_for_displayed(options)
        logger.info(f'Page "{self.name}" is opened - "{is_opened}"')
        return is_opened

    async def open(self, path: Optional[str] = None) -> "BasePage":
        """
        Navigate to this page.

        Args:
            path: Path relative to the base URL (defaults to URL_PATH)
        """
        await self.browser.navigate_to(path if path is not None else self.URL_PATH)
        return self

    async def get_title(self) -> str:
        return await self.browser.get_title()


__all__ = [
    "BasePage",
    "PAGE_LOAD_TIMEOUT_MS",
]
