"""Image element wrapper."""

from __future__ import annotations

from typing import Dict, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError

from ..waits import WaitOptions
from .base_element import BaseElement


IMAGE_LOADED_SCRIPT = "el => el.complete && el.naturalHeight > 0"
IMAGE_DIMENSIONS_SCRIPT = "el => ({ width: el.naturalWidth, height: el.naturalHeight })"


class Image(BaseElement):
    """<img> element with load-state checks based on natural dimensions."""

    DEFAULT_NAME = "Image"

    async def get_src(self) -> Optional[str]:
        logger.debug(f'Getting src from image "{self.name}"')
        return await self.get_attribute("src")

    async def get_alt_text(self) -> Optional[str]:
        return await self.get_attribute("alt")

    async def get_title(self) -> Optional[str]:
        return await self.get_attribute("title")

    async def is_loaded(self) -> bool:
        """True when the image finished loading with a non-zero natural height."""
        try:
            return bool(await self.resolve().evaluate(IMAGE_LOADED_SCRIPT))
        except PlaywrightError:
            return False

    async def get_dimensions(self) -> Dict[str, int]:
        return await self.resolve().evaluate(IMAGE_DIMENSIONS_SCRIPT)

    async def click(self) -> None:
        logger.info(f'Clicking image "{self.name}"')
        await self._click()

    async def wait_for_load(self, timeout: int = 10000) -> bool:
        logger.debug(f'Waiting for image "{self.name}" to load')
        return await self.browser.wait_until(
            self.is_loaded,
            WaitOptions(
                timeout_ms=timeout,
                timeout_message=f'Image "{self.name}" did not load within {timeout}ms',
            ),
        )


__all__ = [
    "Image",
    "IMAGE_DIMENSIONS_SCRIPT",
    "IMAGE_LOADED_SCRIPT",
]
