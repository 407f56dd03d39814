"""
================================================================================
Add/Remove Elements Page Object
================================================================================

Each click on "Add Element" appends one "Delete" button; each "Delete"
click removes one.

================================================================================
"""

from __future__ import annotations

import allure

from ui_automation.elements import Button, Label
from ui_automation.locators import precise_text_locator
from ui_automation.page_base import BasePage
from ui_automation.waits import WaitOptions


class AddRemoveElementsPage(BasePage):
    """Add/Remove Elements page (async)."""

    URL_PATH = "/add_remove_elements/"

    def __init__(self) -> None:
        super().__init__(
            Label(precise_text_locator("Add/Remove Elements"), "Add/Remove Elements Label"),
            "Add/Remove Elements Page",
        )
        self.add_element_button = Button('//button[@onclick="addElement()"]', "Add Element Button")
        self.delete_button = Button('//button[@onclick="deleteElement()"]', "Delete Button")

    async def get_delete_button_quantity(self) -> int:
        return await self.delete_button.count()

    async def is_add_button_displayed(self) -> bool:
        return await self.add_element_button.state.wait_for_displayed()

    async def click_add_element_button(self) -> None:
        await self.add_element_button.click()

    @allure.step("Click 'Add Element' {times} times")
    async def click_add_element_button_times(self, times: int) -> int:
        """Click "Add Element" ``times`` times and return the resulting Delete button count."""
        for _ in range(times):
            await self.click_add_element_button()
        return await self.get_delete_button_quantity()

    async def is_delete_button_displayed(self) -> bool:
        return await self.delete_button.state.wait_for_displayed()

    async def click_delete_button(self) -> None:
        await self.delete_button.click()

    async def is_delete_button_not_displayed(self) -> bool:
        return await self.delete_button.state.wait_for_displayed(WaitOptions(reverse=True))
