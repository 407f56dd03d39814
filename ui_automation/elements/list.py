"""Ordered/unordered list element wrapper."""

from __future__ import annotations

from loguru import logger
from playwright.async_api import Locator

from ..exceptions import ElementNotFoundError, IndexOutOfBoundsError
from .base_element import BaseElement


class List(BaseElement):
    """
    <ol>/<ul> element.

    Items are re-queried from the live list on every call.
    """

    DEFAULT_NAME = "List"

    async def get_items(self) -> list[Locator]:
        logger.debug(f'Getting all items from list "{self.name}"')
        return await self.resolve().locator("li").all()

    async def get_item_count(self) -> int:
        logger.debug(f'Getting item count from list "{self.name}"')
        return len(await self.get_items())

    async def get_item_texts(self) -> list[str]:
        logger.debug(f'Getting all item texts from list "{self.name}"')
        return [(await item.inner_text()).strip() for item in await self.get_items()]

    async def get_item(self, index: int) -> Locator:
        """
        Item at a 0-based index.

        Raises:
            IndexOutOfBoundsError: If index is negative or >= item count
        """
        logger.debug(f'Getting item at index {index} from list "{self.name}"')
        items = await self.get_items()
        if not 0 <= index < len(items):
            raise IndexOutOfBoundsError(
                f'List item index {index} is out of bounds. '
                f'List "{self.name}" has {len(items)} items.',
                index=index,
                count=len(items),
            )
        return items[index]

    async def get_item_text(self, index: int) -> str:
        logger.debug(f'Getting text from item at index {index} in list "{self.name}"')
        item = await self.get_item(index)
        return (await item.inner_text()).strip()

    async def click_item(self, index: int) -> None:
        logger.info(f'Clicking item at index {index} in list "{self.name}"')
        item = await self.get_item(index)
        await item.click()

    async def find_item_by_text(self, text: str, exact: bool = True) -> int:
        """
        Index of the first item matching ``text``, or -1.

        Args:
            text: Text to search for
            exact: Match the whole item text (otherwise substring match)
        """
        logger.debug(f'Finding item with text "{text}" in list "{self.name}"')
        for index, item_text in enumerate(await self.get_item_texts()):
            matched = item_text == text if exact else text in item_text
            if matched:
                return index
        return -1

    async def click_item_by_text(self, text: str, exact: bool = True) -> None:
        """
        Raises:
            ElementNotFoundError: If no item matches
        """
        logger.info(f'Clicking item with text "{text}" in list "{self.name}"')
        index = await self.find_item_by_text(text, exact)
        if index == -1:
            raise ElementNotFoundError(
                f'List item with text "{text}" not found in list "{self.name}"'
            )
        await self.click_item(index)

    async def has_item(self, text: str, exact: bool = True) -> bool:
        return await self.find_item_by_text(text, exact) != -1

    async def get_list_type(self) -> str:
        """'ordered' for <ol>, 'unordered' otherwise."""
        return "ordered" if await self.get_tag_name() == "ol" else "unordered"

    async def get_first_item(self) -> Locator:
        return await self.get_item(0)

    async def get_last_item(self) -> Locator:
        count = await self.get_item_count()
        return await self.get_item(count - 1)


__all__ = ["List"]
