"""File input element wrapper."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from loguru import logger

from .base_element import BaseElement


def _absolute(file_path: Union[str, Path]) -> str:
    """Relative paths are resolved against the process working directory."""
    path = Path(file_path)
    if not path.is_absolute():
        path = Path.cwd() / path
    return str(path.resolve())


class FileUpload(BaseElement):
    """<input type="file"> element."""

    DEFAULT_NAME = "FileUpload"

    async def upload_file(self, file_path: Union[str, Path]) -> None:
        logger.info(f'Uploading file "{file_path}" to "{self.name}"')
        await self.state.wait_for_exist()
        await self.resolve().set_input_files(_absolute(file_path))

    async def upload_multiple_files(self, file_paths: List[Union[str, Path]]) -> None:
        logger.info(f'Uploading {len(file_paths)} files to "{self.name}"')
        await self.state.wait_for_exist()
        await self.resolve().set_input_files([_absolute(p) for p in file_paths])

    async def get_file_name(self) -> str:
        """Base name of the selected file (browsers report a fake directory)."""
        value = await self.resolve().input_value()
        return value.replace("\\", "/").rsplit("/", 1)[-1]

    async def has_file(self) -> bool:
        return await self.resolve().input_value() != ""

    async def get_allowed_file_types(self) -> Optional[str]:
        return await self.get_attribute("accept")

    async def allows_multiple(self) -> bool:
        return await self.get_attribute("multiple") is not None


__all__ = ["FileUpload"]
