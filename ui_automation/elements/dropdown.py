"""Select/dropdown element wrapper."""

from __future__ import annotations

from typing import List, Optional

from loguru import logger

from ..exceptions import ElementNotFoundError, IndexOutOfBoundsError
from .base_element import BaseElement


class Dropdown(BaseElement):
    """
    Native <select> element.

    Selections wait for the dropdown to be displayed. Option listings are
    read live on every call.
    """

    DEFAULT_NAME = "Dropdown"

    async def select_by_text(self, text: str) -> None:
        """
        Select the option whose visible text matches exactly.

        Raises:
            ElementNotFoundError: If no option has that text
        """
        logger.info(f'Selecting option "{text}" in dropdown "{self.name}"')
        await self.state.wait_for_displayed()
        options = await self.get_all_options()
        if text not in options:
            raise ElementNotFoundError(
                f'Option with text "{text}" not found in dropdown "{self.name}". '
                f"Available options: {options}"
            )
        await self.resolve().select_option(label=text)

    async def select_by_value(self, value: str) -> None:
        logger.info(f'Selecting option with value "{value}" in dropdown "{self.name}"')
        await self.state.wait_for_displayed()
        values = await self.get_all_option_values()
        if value not in values:
            raise ElementNotFoundError(
                f'Option with value "{value}" not found in dropdown "{self.name}". '
                f"Available values: {values}"
            )
        await self.resolve().select_option(value=value)

    async def select_by_index(self, index: int) -> None:
        logger.info(f'Selecting option at index {index} in dropdown "{self.name}"')
        await self.state.wait_for_displayed()
        count = await self.resolve().locator("option").count()
        if index < 0 or index >= count:
            raise IndexOutOfBoundsError(
                f"Option index {index} is out of bounds. "
                f'Dropdown "{self.name}" has {count} options (valid range 0..{count - 1}).',
                index=index,
                count=count,
            )
        await self.resolve().select_option(index=index)

    async def get_selected_text(self) -> Optional[str]:
        """Text of the selected option, or None when nothing is selected."""
        logger.debug(f'Getting selected text from dropdown "{self.name}"')
        selected = self.resolve().locator("option:checked")
        if await selected.count() == 0:
            return None
        text = await selected.first.inner_text()
        return text.strip()

    async def get_selected_value(self) -> str:
        logger.debug(f'Getting selected value from dropdown "{self.name}"')
        return await self.resolve().input_value()

    async def get_all_options(self) -> List[str]:
        logger.debug(f'Getting all options from dropdown "{self.name}"')
        options = await self.resolve().locator("option").all()
        return [(await option.inner_text()).strip() for option in options]

    async def get_all_option_values(self) -> List[Optional[str]]:
        logger.debug(f'Getting all option values from dropdown "{self.name}"')
        options = await self.resolve().locator("option").all()
        return [await option.get_attribute("value") for option in options]

    async def has_option(self, text: str) -> bool:
        return text in await self.get_all_options()


__all__ = ["Dropdown"]
