"""
Text input wrapper.

Every mutation waits for the input to be displayed first.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .base_element import BaseElement


class Input(BaseElement):
    """Single-line input field."""

    DEFAULT_NAME = "Input"

    async def set_value(self, value: str) -> None:
        """Replace the current value."""
        logger.info(f'Setting value "{value}" in input "{self.name}"')
        await self.state.wait_for_displayed()
        await self.resolve().fill(value)

    async def add_value(self, value: str) -> None:
        """Append to the current value."""
        logger.info(f'Adding value "{value}" to input "{self.name}"')
        await self.state.wait_for_displayed()
        locator = self.resolve()
        current = await locator.input_value()
        await locator.fill(current + value)

    async def clear(self) -> None:
        logger.info(f'Clearing input "{self.name}"')
        await self.state.wait_for_displayed()
        await self.resolve().clear()

    async def get_value(self) -> str:
        logger.debug(f'Getting value from input "{self.name}"')
        return await self.resolve().input_value()

    async def type_slowly(self, value: str, delay: int = 100) -> None:
        """
        Clear the field and type ``value`` one key at a time.

        Args:
            value: Text to type
            delay: Delay between keystrokes in milliseconds
        """
        logger.info(f'Typing value in input "{self.name}"')
        await self.clear()
        await self.resolve().press_sequentially(value, delay=delay)

    async def is_read_only(self) -> bool:
        return await self.get_attribute("readonly") is not None

    async def get_placeholder(self) -> Optional[str]:
        return await self.get_attribute("placeholder")


__all__ = ["Input"]
