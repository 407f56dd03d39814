"""Multi-line text area wrapper."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from .input import Input


class TextArea(Input):
    """
    Textarea element.

    Shares the waiting and mutation contract of Input and adds the
    textarea-specific attribute accessors.
    """

    DEFAULT_NAME = "TextArea"

    async def set_value(self, value: str) -> None:
        logger.info(f'Setting value in textarea "{self.name}"')
        await self.state.wait_for_displayed()
        await self.resolve().fill(value)

    async def get_rows(self) -> Optional[str]:
        return await self.get_attribute("rows")

    async def get_cols(self) -> Optional[str]:
        return await self.get_attribute("cols")

    async def get_max_length(self) -> Optional[str]:
        return await self.get_attribute("maxlength")

    async def get_character_count(self) -> int:
        value = await self.get_value()
        return len(value)


__all__ = ["TextArea"]
