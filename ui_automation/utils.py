"""Small helpers shared by page objects and tests."""

from __future__ import annotations

import random
import string
from datetime import date, datetime
from typing import Optional


def generate_random_string(length: int = 10) -> str:
    """Random alphanumeric string of the given length."""
    characters = string.ascii_letters + string.digits
    return "".join(random.choice(characters) for _ in range(length))


def generate_random_email() -> str:
    return f"test_{generate_random_string(8)}@test.com"


def get_timestamp() -> str:
    """Current time in ISO 8601 format."""
    return datetime.now().isoformat()


def format_date(value: Optional[date] = None) -> str:
    """Format a date as YYYY-MM-DD (defaults to today)."""
    value = value or date.today()
    return value.strftime("%Y-%m-%d")


__all__ = [
    "generate_random_string",
    "generate_random_email",
    "get_timestamp",
    "format_date",
]
