"""File-system contract consumed by the orchestrator."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..models.files import FileStat


@runtime_checkable
class FileSystem(Protocol):
    async def exists(self, file_path: str | Path) -> bool: ...

    async def stat(self, file_path: str | Path) -> FileStat: ...

    async def create_directory(self, dir_path: str | Path) -> None:
        """Create *dir_path* and its parents; no error if it already exists."""
        ...

    async def write_file(self, file_path: str | Path, content: str) -> None:
        """Write *content*, creating missing parent directories."""
        ...

    async def read_file(self, file_path: str | Path) -> str: ...
