"""
Text-based locator builders.

Both helpers return XPath expressions, which Playwright accepts anywhere a
selector is expected.
"""


def precise_text_locator(text: str) -> str:
    """
    Locator for an element whose own text equals ``text``.

    >>> precise_text_locator("Login")
    "//*[text()='Login']"
    """
    return f"//*[text()='{text}']"


def partial_text_locator(partial_text: str) -> str:
    """
    Locator for an element whose own text contains ``partial_text``.

    >>> partial_text_locator("Log")
    "//*[contains(text(),'Log')]"
    """
    return f"//*[contains(text(),'{partial_text}')]"


__all__ = [
    "precise_text_locator",
    "partial_text_locator",
]
