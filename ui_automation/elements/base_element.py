"""
================================================================================
Base Element
================================================================================

Foundation class for all typed element wrappers.

A wrapper is just {selector, name}. It never caches a live handle: every call
resolves the selector against the browser facade's current frame, so wrappers
survive navigation and can be declared once and reused for the whole run.

Provides:
    - Lazy resolution (resolve / resolve_all / count)
    - The ElementState bundle of waits and instantaneous probes
    - Generic accessors (text, attribute, CSS property, tag name)
    - Scroll and hover

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator

from ..browser import Browser
from ..waits import WaitOptions, wait_until


PROBE_TIMEOUT_MS = 100
CSS_PROPERTY_SCRIPT = "(el, name) => window.getComputedStyle(el).getPropertyValue(name)"
TAG_NAME_SCRIPT = "el => el.tagName"


class ElementState:
    """
    State queries for one element.

    Waits return True on success and raise WaitTimeoutError (or return False
    when the options are non-raising) after ``timeout_ms``. Probes answer
    immediately and never raise.
    """

    def __init__(self, element: "BaseElement"):
        self._element = element

    @property
    def _name(self) -> str:
        return self._element.name

    async def _wait(self, probe, options: Optional[WaitOptions], state: str) -> bool:
        options = options or WaitOptions()
        negation = "not " if options.reverse else ""
        description = f'element "{self._name}" to be {negation}{state}'
        if options.timeout_message is None:
            options = replace(
                options,
                timeout_message=(
                    f'Element "{self._name}" was {"still" if options.reverse else "not"} '
                    f"{state} after {options.timeout_ms}ms"
                ),
            )
        return await wait_until(probe, options, description=description)

    async def wait_for_displayed(self, options: Optional[WaitOptions] = None) -> bool:
        logger.debug(f'Waiting for element "{self._name}" to be displayed')
        return await self._wait(self.is_displayed, options, "displayed")

    async def wait_for_clickable(self, options: Optional[WaitOptions] = None) -> bool:
        logger.debug(f'Waiting for element "{self._name}" to be clickable')
        return await self._wait(self.is_clickable, options, "clickable")

    async def wait_for_exist(self, options: Optional[WaitOptions] = None) -> bool:
        logger.debug(f'Waiting for element "{self._name}" to exist')
        return await self._wait(self.is_existing, options, "existing")

    async def wait_for_enabled(self, options: Optional[WaitOptions] = None) -> bool:
        logger.debug(f'Waiting for element "{self._name}" to be enabled')
        return await self._wait(self.is_enabled, options, "enabled")

    async def is_displayed(self) -> bool:
        try:
            return await self._element.resolve().is_visible()
        except PlaywrightError:
            return False

    async def is_existing(self) -> bool:
        try:
            return await self._element.count() > 0
        except PlaywrightError:
            return False

    async def is_enabled(self) -> bool:
        try:
            if not await self.is_existing():
                return False
            return await self._element.resolve().is_enabled(timeout=PROBE_TIMEOUT_MS)
        except PlaywrightError:
            return False

    async def is_clickable(self) -> bool:
        return await self.is_displayed() and await self.is_enabled()


class BaseElement:
    """
    Base class for all element wrappers.

    Usage:
        heading = BaseElement("h1", "Page heading")
        await heading.state.wait_for_displayed()
        text = await heading.get_text()
    """

    DEFAULT_NAME = ""

    def __init__(self, selector: str, name: str = ""):
        """
        Args:
            selector: CSS or XPath selector
            name: Display name for logging; defaults to the wrapper type's name
                or the selector
        """
        self.selector = selector
        self.name = name or self.DEFAULT_NAME or selector
        self._state = ElementState(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(selector={self.selector!r}, name={self.name!r})"

    @property
    def browser(self) -> Browser:
        return Browser()

    @property
    def state(self) -> ElementState:
        return self._state

    def resolve(self) -> Locator:
        """Live handle for the first match in the current frame (never cached)."""
        return self.browser.current_frame.locator(self.selector).first

    async def resolve_all(self) -> List[Locator]:
        """Live handles for every match in the current frame."""
        return await self.browser.current_frame.locator(self.selector).all()

    async def count(self) -> int:
        return await self.browser.current_frame.locator(self.selector).count()

    async def get_text(self) -> str:
        """Wait for the element to be displayed and return its trimmed visible text."""
        logger.debug(f'Getting text from element "{self.name}"')
        await self.state.wait_for_displayed()
        text = await self.resolve().inner_text()
        return text.strip()

    async def get_attribute(self, attribute_name: str) -> Optional[str]:
        """Attribute value, or None when the attribute is not set."""
        logger.debug(f'Getting attribute "{attribute_name}" from element "{self.name}"')
        return await self.resolve().get_attribute(attribute_name)

    async def get_css_property(self, property_name: str) -> str:
        """Computed CSS value, or an empty string when not set."""
        logger.debug(f'Getting CSS property "{property_name}" from element "{self.name}"')
        value = await self.resolve().evaluate(CSS_PROPERTY_SCRIPT, property_name)
        return value or ""

    async def get_tag_name(self) -> str:
        tag = await self.resolve().evaluate(TAG_NAME_SCRIPT)
        return str(tag).lower()

    async def scroll_into_view(self) -> None:
        logger.debug(f'Scrolling element "{self.name}" into view')
        await self.resolve().scroll_into_view_if_needed()

    async def hover(self) -> None:
        logger.debug(f'Moving to element "{self.name}"')
        await self.resolve().hover()

    async def _click(self, **options) -> None:
        """Wait for clickable, then click."""
        await self.state.wait_for_clickable()
        await self.resolve().click(**options)


__all__ = [
    "BaseElement",
    "ElementState",
    "CSS_PROPERTY_SCRIPT",
    "TAG_NAME_SCRIPT",
]
