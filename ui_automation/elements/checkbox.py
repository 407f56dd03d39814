"""Checkbox element wrapper."""

from __future__ import annotations

from loguru import logger

from .base_element import BaseElement


class Checkbox(BaseElement):
    """
    Checkbox input.

    check/uncheck read the current state first and only click when the state
    has to change, so repeated calls are no-ops.
    """

    DEFAULT_NAME = "Checkbox"

    async def is_checked(self) -> bool:
        return await self.resolve().is_checked()

    async def check(self) -> None:
        if not await self.is_checked():
            logger.info(f'Checking checkbox "{self.name}"')
            await self._click()
        else:
            logger.debug(f'Checkbox "{self.name}" is already checked')

    async def uncheck(self) -> None:
        if await self.is_checked():
            logger.info(f'Unchecking checkbox "{self.name}"')
            await self._click()
        else:
            logger.debug(f'Checkbox "{self.name}" is already unchecked')

    async def toggle(self) -> None:
        logger.info(f'Toggling checkbox "{self.name}"')
        await self._click()

    async def set_state(self, should_be_checked: bool) -> None:
        if should_be_checked:
            await self.check()
        else:
            await self.uncheck()


__all__ = ["Checkbox"]
