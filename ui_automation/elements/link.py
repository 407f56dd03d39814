"""Hyperlink element wrapper."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .base_element import BaseElement


class Link(BaseElement):
    """Anchor element."""

    DEFAULT_NAME = "Link"

    async def click(self) -> None:
        logger.info(f'Clicking link "{self.name}"')
        await self._click()

    async def right_click(self) -> None:
        logger.info(f'Right clicking link "{self.name}"')
        await self._click(button="right")

    async def get_href(self) -> Optional[str]:
        logger.debug(f'Getting href from link "{self.name}"')
        return await self.get_attribute("href")

    async def get_target(self) -> Optional[str]:
        return await self.get_attribute("target")

    async def opens_in_new_tab(self) -> bool:
        return await self.get_target() == "_blank"

    async def get_link_text(self) -> str:
        return await self.get_text()


__all__ = ["Link"]
