"""
================================================================================
Frame Element
================================================================================

<iframe>/<frame> wrapper with scoped context switching.

The current frame is owned by the Browser facade, never by this wrapper:
``is_currently_in_frame`` compares the facade's current frame with this
wrapper's content frame, so it stays correct when other code switches frames.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import inspect
from typing import Any, Callable, Optional

from loguru import logger
from playwright.async_api import Frame as PlaywrightFrame
from playwright.async_api import Locator

from ..exceptions import ElementNotFoundError
from ..waits import WaitOptions
from .base_element import BaseElement
from .button import Button
from .input import Input


class Frame(BaseElement):
    """
    Frame element.

    Usage:
        editor = Frame("#mce_0_ifr", "Editor frame")
        text = await editor.get_text_in_frame("#tinymce")

        async def fill_form():
            await Input("#name").set_value("Ann")
        await editor.execute_in_frame(fill_form)
    """

    DEFAULT_NAME = "Frame"

    def __init__(self, selector: str, name: str = ""):
        super().__init__(selector, name)
        self._frame: Optional[PlaywrightFrame] = None

    async def _content_frame(self) -> PlaywrightFrame:
        handle = await self.resolve().element_handle()
        frame = await handle.content_frame()
        if frame is None:
            raise ElementNotFoundError(f'Element "{self.name}" is not a frame')
        return frame

    async def switch_to(self) -> None:
        logger.info(f'Switching to frame "{self.name}"')
        await self.state.wait_for_exist()
        self._frame = await self._content_frame()
        self.browser.switch_to_frame(self._frame)

    async def switch_to_parent(self) -> None:
        logger.info(f'Switching to parent from frame "{self.name}"')
        self.browser.switch_to_parent_frame()

    async def switch_to_default(self) -> None:
        logger.info(f'Switching to default content from frame "{self.name}"')
        self.browser.switch_to_default_content()

    async def execute_in_frame(self, action: Callable[[], Any]) -> Any:
        """
        Run ``action`` inside this frame.

        The previous frame context is restored afterwards, whether the action
        returns or raises.

        Args:
            action: Sync or async callable run with this frame as context

        Returns:
            The action's result
        """
        logger.info(f'Executing action in frame "{self.name}"')
        previous = self.browser.current_frame
        try:
            await self.switch_to()
            result = action()
            if inspect.isawaitable(result):
                result = await result
            return result
        finally:
            self.browser.switch_to_frame(previous)

    def is_currently_in_frame(self) -> bool:
        """True when the facade currently targets the frame this wrapper last switched into."""
        return self._frame is not None and self.browser.current_frame is self._frame

    async def get_src(self) -> Optional[str]:
        logger.debug(f'Getting src from frame "{self.name}"')
        return await self.get_attribute("src")

    async def get_frame_name(self) -> Optional[str]:
        return await self.get_attribute("name")

    async def get_frame_title(self) -> str:
        return await self.execute_in_frame(lambda: self.browser.current_frame.title())

    async def is_loaded(self) -> bool:
        return await self.state.wait_for_exist(WaitOptions(raise_on_timeout=False))

    async def wait_for_load(self, timeout: int = 10000) -> bool:
        logger.debug(f'Waiting for frame "{self.name}" to load')
        return await self.state.wait_for_exist(WaitOptions(timeout_ms=timeout))

    async def get_element_in_frame(self, selector: str) -> Locator:
        """Locator bound to this frame's document; stays valid after switching back."""
        return await self.execute_in_frame(
            lambda: self.browser.current_frame.locator(selector).first
        )

    async def click_element_in_frame(self, selector: str) -> None:
        logger.info(f'Clicking element "{selector}" in frame "{self.name}"')
        await self.execute_in_frame(Button(selector, f"{self.name} > {selector}").click)

    async def set_value_in_frame(self, selector: str, value: str) -> None:
        logger.info(f'Setting value in element "{selector}" in frame "{self.name}"')
        target = Input(selector, f"{self.name} > {selector}")
        await self.execute_in_frame(lambda: target.set_value(value))

    async def get_text_in_frame(self, selector: str) -> str:
        logger.debug(f'Getting text from element "{selector}" in frame "{self.name}"')
        return await self.execute_in_frame(BaseElement(selector, f"{self.name} > {selector}").get_text)


__all__ = ["Frame"]
