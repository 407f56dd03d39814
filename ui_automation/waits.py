# ================================================================================
# Wait Helpers Module
# ================================================================================
#
# Polling waits used by element wrappers and the browser facade.
#
# Key Features:
#   - Per-call wait options (timeout, interval, message, reverse)
#   - Sync or async conditions
#   - Raising or non-raising timeout behaviour
#
# Usage:
#   await wait_until(lambda: locator.is_visible(), WaitOptions(timeout_ms=3000))
#
# ================================================================================

from __future__ import annotations

import asyncio
import inspect
from dataclasses import dataclass
from typing import Any, Callable, Optional

from loguru import logger

from .exceptions import WaitTimeoutError


DEFAULT_TIMEOUT_MS = 5000
DEFAULT_INTERVAL_MS = 500


@dataclass
class WaitOptions:
    """
    Options for a single wait call.

    Attributes:
        timeout_ms: Total wait time in milliseconds
        interval_ms: Delay between polls in milliseconds
        timeout_message: Message used when the wait times out
        reverse: Wait for the condition to become false instead
        raise_on_timeout: Raise WaitTimeoutError on timeout (otherwise return False)
    """
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    interval_ms: int = DEFAULT_INTERVAL_MS
    timeout_message: Optional[str] = None
    reverse: bool = False
    raise_on_timeout: bool = True


async def wait_until(
    condition: Callable[[], Any],
    options: Optional[WaitOptions] = None,
    description: str = "condition",
) -> bool:
    """
    Poll a condition until it holds or the timeout is reached.

    Args:
        condition: Sync or async callable; its truthiness is the wait result
        options: Wait options (defaults to WaitOptions())
        description: Human-readable description for logging and errors

    Returns:
        True when the condition was met, False on a non-raising timeout

    Raises:
        WaitTimeoutError: If the timeout is reached and raise_on_timeout is set
    """
    options = options or WaitOptions()
    loop = asyncio.get_running_loop()
    deadline = loop.time() + options.timeout_ms / 1000
    interval = options.interval_ms / 1000
    attempt = 0
    last_error: Optional[Exception] = None

    while True:
        attempt += 1
        try:
            result = condition()
            if inspect.isawaitable(result):
                result = await result
            if bool(result) != options.reverse:
                logger.debug(f"Wait successful after {attempt} attempts: {description}")
                return True
        except Exception as e:
            last_error = e
            logger.debug(f"Attempt {attempt} failed with error: {e}")

        remaining = deadline - loop.time()
        if remaining <= 0:
            break
        await asyncio.sleep(min(interval, remaining))

    message = options.timeout_message or (
        f"Timed out after {options.timeout_ms}ms waiting for {description}"
    )
    if last_error is not None:
        message = f"{message}. Last error: {last_error}"

    if not options.raise_on_timeout:
        logger.warning(message)
        return False

    logger.error(message)
    raise WaitTimeoutError(message, timeout_ms=options.timeout_ms)


__all__ = [
    "DEFAULT_INTERVAL_MS",
    "DEFAULT_TIMEOUT_MS",
    "WaitOptions",
    "wait_until",
]
