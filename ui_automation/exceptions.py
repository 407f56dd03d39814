"""
================================================================================
Framework Exceptions
================================================================================

Error taxonomy shared by element wrappers, page objects and the browser facade.

    - WaitTimeoutError: a wait condition was not met within its timeout
    - ElementNotFoundError: a named lookup had no match
    - IndexOutOfBoundsError: a positional lookup exceeded the collection size
    - MissingConfigurationError: a required environment value is absent

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Optional


class UIAutomationError(Exception):
    """Base class for all framework errors."""
    pass


class WaitTimeoutError(UIAutomationError):
    """Raised when a wait operation times out."""

    def __init__(self, message: str, timeout_ms: Optional[int] = None):
        super().__init__(message)
        self.timeout_ms = timeout_ms


class ElementNotFoundError(UIAutomationError):
    """Raised when a list item, table cell, option, window or frame lookup has no match."""
    pass


class IndexOutOfBoundsError(UIAutomationError, IndexError):
    """Raised when a positional lookup exceeds the current collection size."""

    def __init__(self, message: str, index: int, count: int):
        super().__init__(message)
        self.index = index
        self.count = count


class ConfigurationError(UIAutomationError):
    """Raised when configuration loading or access fails."""
    pass


class MissingConfigurationError(ConfigurationError):
    """Raised when a required environment-derived value is absent."""

    def __init__(self, env_var: str):
        super().__init__(f"{env_var} environment variable is required")
        self.env_var = env_var


__all__ = [
    "UIAutomationError",
    "WaitTimeoutError",
    "ElementNotFoundError",
    "IndexOutOfBoundsError",
    "ConfigurationError",
    "MissingConfigurationError",
]
