"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the UI automation suite.

Features:
    - Single initialization per process
    - Level from configuration, forced to DEBUG when DEBUG=true
    - Optional rotating file sink
    - STEP lines paired with Allure steps

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import allure
from loguru import logger

from .config import ConfigLoader


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(level: Optional[str] = None, format_str: Optional[str] = None) -> None:
    """
    Initializes the global Loguru logger with consistent configuration.
    
    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to config value.
        format_str: Custom log format string. Defaults to config value.
    """
    global _logger_initialized
    
    if _logger_initialized:
        return
    
    config = ConfigLoader()
    log_level = level or config.get("logging.level", "INFO")
    if os.getenv("DEBUG", "").lower() == "true":
        log_level = "DEBUG"
    log_format = format_str or config.get("logging.format", DEFAULT_LOG_FORMAT)
    
    logger.remove()
    logger.add(
        sys.stderr,
        level=str(log_level).upper(),
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )
    
    log_file = config.get("logging.file", None)
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=str(log_level).upper(),
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=config.get("logging.rotation", "10 MB"),
            retention=config.get("logging.retention", "7 days"),
            compression="zip",
        )
    
    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def step(title: str):
    """
    Log a test step and open the matching Allure step.

    Usage:
        with step("Login with valid credentials"):
            await login_page.login(username, password)
    """
    logger.info(f"STEP: {title}")
    return allure.step(title)


__all__ = [
    "init_logger",
    "step",
]
