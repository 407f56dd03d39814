"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the demo application pages.

Each page class encapsulates:
    - Element wrappers
    - The unique element identifying the loaded page
    - Page-specific actions

================================================================================
"""

from .add_remove_elements_page import AddRemoveElementsPage
from .checkboxes_page import CheckboxesPage
from .dropdown_page import DropdownPage
from .login_page import LoginPage
from .main_page import MainPage
from .secure_area_page import SecureAreaPage
from .tables_page import TablesPage

__all__ = [
    "AddRemoveElementsPage",
    "CheckboxesPage",
    "DropdownPage",
    "LoginPage",
    "MainPage",
    "SecureAreaPage",
    "TablesPage",
]
