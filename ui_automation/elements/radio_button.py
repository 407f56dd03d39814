"""Radio button element wrapper."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .base_element import BaseElement


class RadioButton(BaseElement):
    """Radio input; select() is a no-op when already selected."""

    DEFAULT_NAME = "RadioButton"

    async def is_selected(self) -> bool:
        return await self.resolve().is_checked()

    async def select(self) -> None:
        if not await self.is_selected():
            logger.info(f'Selecting radio button "{self.name}"')
            await self._click()
        else:
            logger.debug(f'Radio button "{self.name}" is already selected')

    async def get_value(self) -> Optional[str]:
        return await self.get_attribute("value")

    async def get_group_name(self) -> Optional[str]:
        return await self.get_attribute("name")


__all__ = ["RadioButton"]
