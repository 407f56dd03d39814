"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Form authentication example. After submitting, the application shows a
flash message: on the secure area for valid credentials, on the login page
otherwise.

================================================================================
"""

from __future__ import annotations

import allure

from ui_automation.elements import Button, Input, Label
from ui_automation.locators import precise_text_locator
from ui_automation.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/login"

    def __init__(self) -> None:
        super().__init__(Label(precise_text_locator("Login Page"), "Login Page Heading"), "Login Page")
        self.username_input = Input("#username", "Username Input")
        self.password_input = Input("#password", "Password Input")
        self.login_button = Button("button[type='submit']", "Login Button")
        self.flash_message = Label("#flash", "Flash Message")

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        await self.username_input.set_value(username)
        await self.password_input.set_value(password)
        await self.login_button.click()

    async def get_flash_message(self) -> str:
        await self.flash_message.state.wait_for_displayed()
        return await self.flash_message.get_text()
