"""Checkboxes example page."""

from __future__ import annotations

from ui_automation.elements import Checkbox, Label
from ui_automation.locators import precise_text_locator
from ui_automation.page_base import BasePage


class CheckboxesPage(BasePage):
    URL_PATH = "/checkboxes"

    def __init__(self) -> None:
        super().__init__(Label(precise_text_locator("Checkboxes"), "Checkboxes Heading"), "Checkboxes Page")
        self.first_checkbox = Checkbox("#checkboxes input:nth-of-type(1)", "Checkbox 1")
        self.second_checkbox = Checkbox("#checkboxes input:nth-of-type(2)", "Checkbox 2")

    async def set_checkboxes(self, first: bool, second: bool) -> None:
        await self.first_checkbox.set_state(first)
        await self.second_checkbox.set_state(second)

    async def get_states(self) -> tuple[bool, bool]:
        return await self.first_checkbox.is_checked(), await self.second_checkbox.is_checked()
