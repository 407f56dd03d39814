"""Table element wrapper."""

from __future__ import annotations

from typing import Dict, List

from loguru import logger
from playwright.async_api import Locator

from ..exceptions import IndexOutOfBoundsError
from .base_element import BaseElement


class Table(BaseElement):
    """
    <table> element with header, row and cell access.

    Rows are the ``tbody tr`` elements; cells are their ``td`` children.
    Positions are 0-based and re-read from the live table on every call.
    """

    DEFAULT_NAME = "Table"

    async def get_headers(self) -> List[str]:
        logger.debug(f'Getting headers from table "{self.name}"')
        headers = await self.resolve().locator("th").all()
        return [(await header.inner_text()).strip() for header in headers]

    async def get_rows(self) -> List[Locator]:
        return await self.resolve().locator("tbody tr").all()

    async def get_row_count(self) -> int:
        return len(await self.get_rows())

    async def get_row(self, index: int) -> Locator:
        rows = await self.get_rows()
        if not 0 <= index < len(rows):
            raise IndexOutOfBoundsError(
                f'Row index {index} is out of bounds. Table "{self.name}" has {len(rows)} rows.',
                index=index,
                count=len(rows),
            )
        return rows[index]

    async def _get_cell(self, row_index: int, col_index: int) -> Locator:
        row = await self.get_row(row_index)
        cells = await row.locator("td").all()
        if not 0 <= col_index < len(cells):
            raise IndexOutOfBoundsError(
                f'Column index {col_index} is out of bounds. '
                f'Row {row_index} of table "{self.name}" has {len(cells)} cells.',
                index=col_index,
                count=len(cells),
            )
        return cells[col_index]

    async def get_cell_value(self, row_index: int, col_index: int) -> str:
        logger.debug(
            f'Getting cell value at row {row_index}, col {col_index} from table "{self.name}"'
        )
        cell = await self._get_cell(row_index, col_index)
        return (await cell.inner_text()).strip()

    async def get_column_values(self, col_index: int) -> List[str]:
        """Values of one column; rows too short for the column are skipped."""
        logger.debug(f'Getting all values from column {col_index} in table "{self.name}"')
        values = []
        for row in await self.get_rows():
            cells = await row.locator("td").all()
            if 0 <= col_index < len(cells):
                values.append((await cells[col_index].inner_text()).strip())
        return values

    async def get_all_data(self) -> List[Dict[str, str]]:
        """
        One record per body row keyed by header text, in header order.

        Each record holds min(header count, cell count) entries.
        """
        logger.debug(f'Getting all data from table "{self.name}"')
        headers = await self.get_headers()
        data = []
        for row in await self.get_rows():
            cells = await row.locator("td").all()
            record = {}
            for header, cell in zip(headers, cells):
                record[header] = (await cell.inner_text()).strip()
            data.append(record)
        return data

    async def find_row_by_value(self, col_index: int, value: str) -> int:
        """Index of the first row whose cell in ``col_index`` equals ``value``, or -1."""
        logger.debug(
            f'Finding row with value "{value}" in column {col_index} in table "{self.name}"'
        )
        for index, row in enumerate(await self.get_rows()):
            cells = await row.locator("td").all()
            if 0 <= col_index < len(cells) and (await cells[col_index].inner_text()).strip() == value:
                return index
        return -1

    async def click_cell(self, row_index: int, col_index: int) -> None:
        logger.info(f'Clicking cell at row {row_index}, col {col_index} in table "{self.name}"')
        cell = await self._get_cell(row_index, col_index)
        await cell.click()


__all__ = ["Table"]
