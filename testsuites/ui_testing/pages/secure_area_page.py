"""Secure Area page shown after a successful login."""

from __future__ import annotations

import allure

from ui_automation.elements import Label, Link
from ui_automation.locators import partial_text_locator
from ui_automation.page_base import BasePage


class SecureAreaPage(BasePage):
    """Secure area (async)."""

    URL_PATH = "/secure"

    def __init__(self) -> None:
        super().__init__(Label(partial_text_locator("Secure Area"), "Secure Area Heading"), "Secure Area Page")
        self.logout_link = Link("a[href='/logout']", "Logout Link")
        self.flash_message = Label("#flash", "Flash Message")

    @allure.step("Logout")
    async def logout(self) -> None:
        await self.logout_link.click()
