"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - Browser selection from configuration (chrome/edge -> chromium,
      safari -> webkit, firefox)
    - Isolated contexts per test
    - Pages attached to the process-wide Browser facade

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser as PlaywrightBrowser,
    BrowserContext,
    Page,
    Playwright,
)

from .browser import Browser, DEFAULT_WINDOW_SIZE
from .config import EnvConfig


# Configured browser name -> Playwright engine
BROWSER_ENGINES: Dict[str, str] = {
    "chrome": "chromium",
    "chromium": "chromium",
    "edge": "chromium",
    "firefox": "firefox",
    "safari": "webkit",
    "webkit": "webkit",
}


class BrowserManager:
    """
    Manages the Playwright browser and contexts for a test session.

    Usage:
        async with BrowserManager() as manager:
            browser = await manager.open_session()
            await browser.navigate_to("/")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "args": [
            "--disable-gpu",
            "--no-sandbox",
            "--disable-dev-shm-usage",
        ],
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": dict(DEFAULT_WINDOW_SIZE),
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        default_timeout: Optional[int] = None,
    ):
        """
        Initialize browser manager.

        Args:
            headless: Run browser in headless mode (defaults to config)
            browser_type: 'chrome', 'firefox', 'safari'... (defaults to config)
            default_timeout: Playwright default timeout in ms (defaults to config)
        """
        self.headless = EnvConfig.is_headless() if headless is None else headless
        self.browser_type = (browser_type or EnvConfig.get_browser()).lower()
        self.default_timeout = default_timeout or EnvConfig.get_default_timeout()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[PlaywrightBrowser] = None
        self._contexts: list[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    @property
    def engine(self) -> str:
        engine = BROWSER_ENGINES.get(self.browser_type)
        if engine is None:
            raise ValueError(
                f"Unsupported browser: {self.browser_type}. "
                f"Choose one of: {', '.join(sorted(BROWSER_ENGINES))}"
            )
        return engine

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        engine = self.engine
        self._playwright = await async_playwright().start()
        browser_launcher = getattr(self._playwright, engine)

        launch_options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
        }
        if engine != "chromium":
            launch_options.pop("args")

        self._browser = await browser_launcher.launch(**launch_options)
        logger.debug(
            f"Browser started: {self.browser_type} ({engine}, headless={self.headless})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            try:
                await context.close()
            except Exception as e:
                logger.warning(f"Failed to close browser context: {e}")
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    async def new_context(self, **options: Any) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context_options = {**self.DEFAULT_CONTEXT_OPTIONS, **options}
        context = await self._browser.new_context(**context_options)
        context.set_default_timeout(self.default_timeout)
        self._contexts.append(context)

        return context

    async def close_context(self, context: BrowserContext) -> None:
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    async def open_session(self, **context_options: Any) -> Browser:
        """
        Open a page in a fresh context and attach it to the Browser facade.

        Returns:
            The attached Browser facade
        """
        page = await self.new_page(**context_options)
        return Browser().attach(page)

    @property
    def browser(self) -> Optional[PlaywrightBrowser]:
        """Get Playwright browser instance."""
        return self._browser


__all__ = [
    "BrowserManager",
    "BROWSER_ENGINES",
]
