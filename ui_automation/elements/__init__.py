"""
================================================================================
Element Wrappers
================================================================================

Typed wrappers over Playwright locators, one per control family.

Author: Automation Team
License: MIT
================================================================================
"""

from .base_element import BaseElement, ElementState
from .button import Button
from .checkbox import Checkbox
from .dropdown import Dropdown
from .file_upload import FileUpload
from .frame import Frame
from .image import Image
from .input import Input
from .label import Label
from .link import Link
from .list import List
from .radio_button import RadioButton
from .table import Table
from .text_area import TextArea

__all__ = [
    "BaseElement",
    "ElementState",
    "Button",
    "Checkbox",
    "Dropdown",
    "FileUpload",
    "Frame",
    "Image",
    "Input",
    "Label",
    "Link",
    "List",
    "RadioButton",
    "Table",
    "TextArea",
]
