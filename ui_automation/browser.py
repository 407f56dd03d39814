"""
================================================================================
Browser Facade
================================================================================

Process-wide convenience wrapper over session-level Playwright operations.

Features:
    - Navigation (relative paths resolve against the configured base URL)
    - Window/tab management with stable string handles
    - Frame context ownership (the single authoritative "current frame")
    - Alert, cookie, script, screenshot and console-log helpers
    - Generic polling wait used as the building block for custom waits

Every method logs before acting; none retries internally.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import asyncio
from dataclasses import replace
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import urljoin

import allure
from loguru import logger
from playwright.async_api import ConsoleMessage, Dialog, Frame, Page

from .config import EnvConfig
from .exceptions import ElementNotFoundError
from .waits import WaitOptions, wait_until


DEFAULT_WINDOW_SIZE: Dict[str, int] = {"width": 1920, "height": 1080}

SCROLL_TO_SCRIPT = "([x, y]) => window.scrollTo(x, y)"


class Browser:
    """
    Facade over the attached Playwright page.

    The facade is a process-wide singleton: element wrappers and page objects
    call ``Browser()`` and always act on whatever page and frame the facade
    currently targets.

    Usage:
        browser = Browser()
        browser.attach(page)
        await browser.navigate_to("/login")
        await browser.wait_until(lambda: some_probe(), WaitOptions(timeout_ms=3000))
    """

    _instance: Optional["Browser"] = None

    def __new__(cls) -> "Browser":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if getattr(self, "_initialized", False):
            return

        self._page: Optional[Page] = None
        self._frame: Optional[Frame] = None
        self._handles: Dict[str, Page] = {}
        self._handle_counter = 0
        self._alert_action: Optional[tuple] = None
        self._last_alert_text: Optional[str] = None
        self._console_messages: List[Dict[str, str]] = []
        self._listening: List[Page] = []
        self._initialized = True

    @classmethod
    def reset(cls) -> None:
        """Drop the singleton (used between test sessions)."""
        cls._instance = None

    # =========================================================================
    # Session Binding
    # =========================================================================

    def attach(self, page: Page) -> "Browser":
        """
        Target a Playwright page.

        Installs the dialog and console listeners once per page and resets the
        current frame to the page's main frame.
        """
        self._page = page
        self._frame = page.main_frame
        self._handle_for(page)
        if page not in self._listening:
            page.on("dialog", self._on_dialog)
            page.on("console", self._on_console)
            self._listening.append(page)
        logger.debug(f"Browser attached to page: {page.url}")
        return self

    @property
    def page(self) -> Page:
        """Currently targeted page."""
        if self._page is None:
            raise RuntimeError("Browser not started. Call attach() first.")
        return self._page

    @property
    def is_attached(self) -> bool:
        return self._page is not None

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(self, url: str) -> None:
        """
        Navigate to a URL.

        Args:
            url: Absolute URL, or a path resolved against the base URL
        """
        full_url = urljoin(f"{EnvConfig.get_base_url()}/", url)
        logger.info(f"Navigating to URL: {full_url}")
        with allure.step(f"Navigate to {full_url}"):
            await self.page.goto(full_url)
        self._frame = self.page.main_frame

    async def get_url(self) -> str:
        url = self.page.url
        logger.debug(f"Current URL: {url}")
        return url

    async def get_title(self) -> str:
        title = await self.page.title()
        logger.debug(f"Page title: {title}")
        return title

    async def refresh(self) -> None:
        logger.info("Refreshing page")
        await self.page.reload()
        self._frame = self.page.main_frame

    async def back(self) -> None:
        logger.info("Navigating back")
        await self.page.go_back()
        self._frame = self.page.main_frame

    async def forward(self) -> None:
        logger.info("Navigating forward")
        await self.page.go_forward()
        self._frame = self.page.main_frame

    # =========================================================================
    # Windows and Tabs
    # =========================================================================

    async def maximize_window(self) -> None:
        """Playwright has no OS window; maximizing sets the largest default viewport."""
        logger.info("Maximizing window")
        await self.page.set_viewport_size(dict(DEFAULT_WINDOW_SIZE))

    async def set_window_size(self, width: int, height: int) -> None:
        logger.info(f"Setting window size to {width}x{height}")
        await self.page.set_viewport_size({"width": width, "height": height})

    async def get_window_size(self) -> Dict[str, int]:
        size = self.page.viewport_size or {}
        logger.debug(f"Window size: {size.get('width')}x{size.get('height')}")
        return dict(size)

    def _handle_for(self, page: Page) -> str:
        for handle, known in self._handles.items():
            if known is page:
                return handle
        self._handle_counter += 1
        handle = f"window-{self._handle_counter}"
        self._handles[handle] = page
        return handle

    async def get_window_handles(self) -> List[str]:
        """Handles for all open pages in the current browser context."""
        logger.debug("Getting window handles")
        handles = [self._handle_for(page) for page in self.page.context.pages]
        logger.debug(f"Total windows: {len(handles)}")
        return handles

    async def get_current_window_handle(self) -> str:
        logger.debug("Getting current window handle")
        return self._handle_for(self.page)

    async def switch_to_window(self, handle: str) -> None:
        """
        Switch to a window/tab by handle.

        Raises:
            ElementNotFoundError: If the handle is unknown or its page is closed
        """
        logger.info(f"Switching to window: {handle}")
        page = self._handles.get(handle)
        if page is None or page not in self.page.context.pages:
            raise ElementNotFoundError(
                f"Window handle \"{handle}\" not found. "
                f"Available handles: {await self.get_window_handles()}"
            )
        await page.bring_to_front()
        self.attach(page)

    async def new_window(self, window_type: str = "tab") -> str:
        """
        Open a blank window/tab and switch to it.

        Playwright opens every new page as a tab of the current context, so
        ``window_type`` is informational only.

        Returns:
            Handle of the new window
        """
        logger.info(f"Creating new {window_type}")
        page = await self.page.context.new_page()
        await page.goto("about:blank")
        self.attach(page)
        return self._handle_for(page)

    async def close_window(self) -> None:
        """Close the current window/tab and switch to a remaining one, if any."""
        logger.info("Closing current window")
        page = self.page
        context = page.context
        await page.close()
        self._handles = {h: p for h, p in self._handles.items() if p is not page}
        if page in self._listening:
            self._listening.remove(page)

        remaining = list(context.pages)
        if remaining:
            self.attach(remaining[-1])
        else:
            self._page = None
            self._frame = None

    # =========================================================================
    # Frames
    # =========================================================================

    @property
    def current_frame(self) -> Frame:
        """The frame every element lookup and script is resolved against."""
        if self._frame is None:
            self._frame = self.page.main_frame
        return self._frame

    def switch_to_frame(self, frame: Union[Frame, str, int, None]) -> None:
        """
        Switch the current frame context.

        Args:
            frame: A Playwright Frame, a frame name, a child-frame index of the
                current frame, or None for the main document

        Raises:
            ElementNotFoundError: If a name or index does not match a frame
        """
        logger.info(f"Switching to frame: {frame if frame is not None else 'default content'}")
        if frame is None:
            self._frame = self.page.main_frame
        elif isinstance(frame, str):
            target = self.page.frame(name=frame)
            if target is None:
                raise ElementNotFoundError(f"Frame named \"{frame}\" not found")
            self._frame = target
        elif isinstance(frame, int):
            children = self.current_frame.child_frames
            if not 0 <= frame < len(children):
                raise ElementNotFoundError(
                    f"Frame index {frame} not found. Current frame has {len(children)} child frames."
                )
            self._frame = children[frame]
        else:
            self._frame = frame

    def switch_to_parent_frame(self) -> None:
        logger.info("Switching to parent frame")
        self._frame = self.current_frame.parent_frame or self.page.main_frame

    def switch_to_default_content(self) -> None:
        logger.info("Switching to default content")
        self._frame = self.page.main_frame

    # =========================================================================
    # Alerts
    # =========================================================================

    async def _on_dialog(self, dialog: Dialog) -> None:
        self._last_alert_text = dialog.message
        action, text = self._alert_action or ("dismiss", None)
        self._alert_action = None
        logger.debug(f"Handling {dialog.type} dialog \"{dialog.message}\" with action: {action}")
        if action == "accept":
            if text is None:
                await dialog.accept()
            else:
                await dialog.accept(text)
        else:
            await dialog.dismiss()

    async def accept_alert(self) -> None:
        """Accept the next alert/confirm/prompt dialog."""
        logger.info("Accepting alert")
        self._alert_action = ("accept", None)

    async def dismiss_alert(self) -> None:
        """Dismiss the next dialog."""
        logger.info("Dismissing alert")
        self._alert_action = ("dismiss", None)

    async def send_alert_text(self, text: str) -> None:
        """Accept the next prompt dialog with the given text."""
        logger.info(f"Sending text to alert: {text}")
        self._alert_action = ("accept", text)

    async def get_alert_text(self) -> str:
        """
        Message of the most recent dialog.

        Raises:
            ElementNotFoundError: If no dialog has been shown yet
        """
        if self._last_alert_text is None:
            raise ElementNotFoundError("No alert has been shown in this session")
        logger.debug(f"Alert text: {self._last_alert_text}")
        return self._last_alert_text

    # =========================================================================
    # Cookies
    # =========================================================================

    async def get_cookies(self) -> List[Dict[str, Any]]:
        logger.debug("Getting cookies")
        cookies = await self.page.context.cookies()
        logger.debug(f"Total cookies: {len(cookies)}")
        return cookies

    async def set_cookie(self, cookie: Dict[str, Any]) -> None:
        """Set a cookie; scoped to the current page URL unless url/domain is given."""
        logger.info(f"Setting cookie: {cookie.get('name')}")
        cookie = dict(cookie)
        if "url" not in cookie and "domain" not in cookie:
            cookie["url"] = self.page.url
        await self.page.context.add_cookies([cookie])

    async def delete_all_cookies(self) -> None:
        logger.info("Deleting all cookies")
        await self.page.context.clear_cookies()

    # =========================================================================
    # Scripts, Screenshots, Logs
    # =========================================================================

    async def execute(self, script: str, *args: Any) -> Any:
        """
        Execute JavaScript in the current frame.

        A single argument is passed as-is; several are passed as a list.
        """
        logger.debug("Executing JavaScript in browser")
        if not args:
            return await self.current_frame.evaluate(script)
        arg = args[0] if len(args) == 1 else list(args)
        return await self.current_frame.evaluate(script, arg)

    async def scroll(self, x: int, y: int) -> None:
        logger.debug(f"Scrolling to coordinates: ({x}, {y})")
        await self.current_frame.evaluate(SCROLL_TO_SCRIPT, [x, y])

    async def pause(self, milliseconds: int) -> None:
        logger.debug(f"Pausing for {milliseconds}ms")
        await asyncio.sleep(milliseconds / 1000)

    async def take_screenshot(
        self,
        filename: Optional[str] = None,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            filename: Target path; defaults to <report_path>/screenshots/screenshot-<ts>.png
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        if filename:
            filepath = Path(filename)
        else:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
            filepath = EnvConfig.get_report_path() / "screenshots" / f"screenshot-{timestamp}.png"
        logger.info(f"Taking screenshot: {filepath}")
        filepath.parent.mkdir(parents=True, exist_ok=True)

        screenshot = await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach(
                screenshot,
                name=filepath.stem,
                attachment_type=allure.attachment_type.PNG,
            )
        return filepath

    def _on_console(self, message: ConsoleMessage) -> None:
        self._console_messages.append({
            "timestamp": datetime.now().isoformat(),
            "level": message.type,
            "message": message.text,
        })

    async def get_logs(self, log_type: str = "browser") -> List[Dict[str, str]]:
        """
        Console messages captured since attach.

        Only the "browser" log type exists under Playwright; other types
        return an empty list.
        """
        logger.debug(f"Getting {log_type} logs")
        if log_type != "browser":
            return []
        return list(self._console_messages)

    # =========================================================================
    # Waits
    # =========================================================================

    async def wait_until(
        self,
        condition: Callable[[], Any],
        options: Optional[WaitOptions] = None,
    ) -> bool:
        """
        Wait until a sync or async condition holds.

        Raises:
            WaitTimeoutError: When the condition is not met in time
        """
        options = options or WaitOptions()
        if options.timeout_message is None:
            options = replace(options, timeout_message="Condition was not met in time")
        logger.debug("Waiting until condition is met")
        return await wait_until(condition, options, description="custom condition")


__all__ = [
    "Browser",
    "DEFAULT_WINDOW_SIZE",
    "SCROLL_TO_SCRIPT",
]
