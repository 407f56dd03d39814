"""Label element wrapper."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .base_element import BaseElement
from .input import Input


class Label(BaseElement):
    """
    Text label.

    Also used for plain text nodes (headings, flash messages) that identify a
    page or carry a message.
    """

    DEFAULT_NAME = "Label"

    async def get_for_attribute(self) -> Optional[str]:
        logger.debug(f"Getting 'for' attribute from label \"{self.name}\"")
        return await self.get_attribute("for")

    async def click(self) -> None:
        logger.info(f'Clicking label "{self.name}"')
        await self._click()

    async def get_associated_input(self) -> Input:
        """
        Input bound to this label: the element whose id matches ``for``,
        otherwise the first input nested inside the label.
        """
        for_id = await self.get_for_attribute()
        if for_id:
            return Input(f"#{for_id}", f"{self.name} input")
        return Input(f"{self.selector} >> input", f"{self.name} nested input")

    async def is_required(self, indicator: str = "*") -> bool:
        return indicator in await self.get_text()

    async def contains_text(self, text: str) -> bool:
        return text in await self.get_text()


__all__ = ["Label"]
