"""
================================================================================
Main Page Object
================================================================================

Landing page of the demo application: a heading plus one link per example.

================================================================================
"""

from __future__ import annotations

import allure

from ui_automation.elements import Label, Link
from ui_automation.locators import precise_text_locator
from ui_automation.page_base import BasePage


class MainPage(BasePage):
    """Landing page (async)."""

    URL_PATH = "/"

    def __init__(self) -> None:
        super().__init__(
            Label(precise_text_locator("Welcome to the-internet"), "The Internet Label"),
            "The Internet Page",
        )

    def link(self, link_name: str) -> Link:
        """Link to an example page, located by its exact text."""
        return Link(precise_text_locator(link_name), f"{link_name} Link")

    async def click_link(self, link_name: str) -> None:
        with allure.step(f"Open example: {link_name}"):
            await self.link(link_name).click()
