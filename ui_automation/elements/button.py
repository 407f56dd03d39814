"""Button element wrapper."""

from __future__ import annotations

from typing import Any

from loguru import logger

from ..waits import DEFAULT_TIMEOUT_MS, WaitOptions
from .base_element import BaseElement


class Button(BaseElement):
    """Button with click helpers; every click waits for the button to be clickable."""

    DEFAULT_NAME = "Button"

    async def click(self, **options: Any) -> None:
        """
        Click the button.

        Args:
            **options: Playwright click options (button, modifiers, position...)
        """
        logger.info(f'Clicking button "{self.name}"')
        await self._click(**options)

    async def double_click(self) -> None:
        logger.info(f'Double clicking button "{self.name}"')
        await self.state.wait_for_clickable()
        await self.resolve().dblclick()

    async def is_enabled(self) -> bool:
        return await self.state.is_enabled()

    async def is_disabled(self) -> bool:
        return not await self.is_enabled()

    async def wait_for_enabled(self, timeout: int = DEFAULT_TIMEOUT_MS) -> bool:
        logger.debug(f'Waiting for button "{self.name}" to be enabled')
        return await self.state.wait_for_enabled(WaitOptions(timeout_ms=timeout))


__all__ = ["Button"]
