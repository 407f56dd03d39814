"""Sortable Data Tables example page."""

from __future__ import annotations

from typing import Dict, List

from ui_automation.elements import Label, Table
from ui_automation.exceptions import ElementNotFoundError
from ui_automation.locators import precise_text_locator
from ui_automation.page_base import BasePage


class TablesPage(BasePage):
    URL_PATH = "/tables"

    def __init__(self) -> None:
        super().__init__(Label(precise_text_locator("Data Tables"), "Data Tables Heading"), "Tables Page")
        self.example_table = Table("#table1", "Example 1 Table")

    async def get_users(self) -> List[Dict[str, str]]:
        return await self.example_table.get_all_data()

    async def get_due_for(self, last_name: str) -> str:
        """Value of the "Due" column for the row whose last name matches."""
        row = await self.example_table.find_row_by_value(0, last_name)
        if row == -1:
            raise ElementNotFoundError(
                f'No row with last name "{last_name}" in table "{self.example_table.name}"'
            )
        headers = await self.example_table.get_headers()
        return await self.example_table.get_cell_value(row, headers.index("Due"))
