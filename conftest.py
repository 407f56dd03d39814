"""
Repository-level pytest configuration (demo-safe).

Why this exists:
  - Provide safe defaults for the public demo site (no real secrets embedded)
  - Make the repo "plug-and-play" for reviewers cloning from GitHub
  - Initialize logging once per test process

Important:
  The credentials below are the public demo account published on
  the-internet.herokuapp.com. Real projects should load secrets from a secure
  secret manager in CI/CD.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Generator

import pytest

from ui_automation.logging_config import init_logger


DEMO_ENV_DEFAULTS = {
    "TEST_USERNAME": "tomsmith",
    "TEST_PASSWORD": "SuperSecretPassword!",
}


def pytest_configure(config):
    for key, value in DEMO_ENV_DEFAULTS.items():
        os.environ.setdefault(key, value)
    init_logger()


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent


@pytest.fixture(scope="session", autouse=True)
def _demo_safe_env_defaults() -> Generator[None, None, None]:
    """
    Re-assert demo-safe environment defaults for the session.

    Values already provided by the user/CI always win.
    """
    for key, value in DEMO_ENV_DEFAULTS.items():
        os.environ.setdefault(key, value)

    yield
