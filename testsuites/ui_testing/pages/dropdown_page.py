"""Dropdown List example page."""

from __future__ import annotations

from ui_automation.elements import Dropdown, Label
from ui_automation.locators import precise_text_locator
from ui_automation.page_base import BasePage


class DropdownPage(BasePage):
    URL_PATH = "/dropdown"

    def __init__(self) -> None:
        super().__init__(Label(precise_text_locator("Dropdown List"), "Dropdown Heading"), "Dropdown Page")
        self.dropdown = Dropdown("#dropdown", "Options Dropdown")

    async def choose(self, option_text: str) -> str:
        """Select an option by its text and return the selected value."""
        await self.dropdown.select_by_text(option_text)
        return await self.dropdown.get_selected_value()
