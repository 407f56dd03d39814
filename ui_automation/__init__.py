"""
================================================================================
UI Automation Framework
================================================================================

Page-object-model framework over async Playwright.

Components:
    - elements: typed element wrappers (Button, Input, Table, Frame...)
    - page_base: base page object
    - browser: process-wide browser facade
    - browser_manager: Playwright session lifecycle
    - config: YAML + environment configuration
    - waits: polling waits

Author: Automation Team
License: MIT
================================================================================
"""

from .browser import Browser
from .browser_manager import BrowserManager
from .config import ConfigLoader, EnvConfig
from .exceptions import (
    ConfigurationError,
    ElementNotFoundError,
    IndexOutOfBoundsError,
    MissingConfigurationError,
    UIAutomationError,
    WaitTimeoutError,
)
from .locators import partial_text_locator, precise_text_locator
from .logging_config import init_logger, step
from .page_base import BasePage
from .waits import WaitOptions, wait_until

__all__ = [
    "Browser",
    "BrowserManager",
    "BasePage",
    "ConfigLoader",
    "EnvConfig",
    "ConfigurationError",
    "ElementNotFoundError",
    "IndexOutOfBoundsError",
    "MissingConfigurationError",
    "UIAutomationError",
    "WaitTimeoutError",
    "WaitOptions",
    "wait_until",
    "init_logger",
    "step",
    "precise_text_locator",
    "partial_text_locator",
]
