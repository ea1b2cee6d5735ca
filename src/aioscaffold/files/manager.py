"""Async file manager backing template scaffolding.

Optionally bound to a *root* directory: when set, every path (relative or
absolute) must resolve inside it. Writes go to a temporary sibling file that
is then moved over the target, so a failed write never leaves a truncated
file behind.
"""

from __future__ import annotations

import contextlib
import logging
import uuid
from pathlib import Path

import aiofiles
import aiofiles.os

from ..exceptions import FileError, PathSecurityError
from ..models.files import FileStat

logger = logging.getLogger(__name__)


class AsyncFileManager:
    """aiofiles implementation of :class:`~aioscaffold.files.base.FileSystem`."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root.resolve() if root is not None else None

    # ------------------------------------------------------------------
    # Path helpers
    # ------------------------------------------------------------------

    def _get_full_path(self, file_path: str | Path) -> Path:
        """Return the absolute path, ensuring it stays within *root*.

        Relative paths are taken relative to *root* (or the working
        directory when unbound).
        """
        path = Path(file_path)
        if self.root is None:
            return path.resolve()

        full_path = (self.root / path).resolve()
        if full_path != self.root and self.root not in full_path.parents:
            raise PathSecurityError(
                f"Path outside root directory: {file_path}",
                {"path": str(file_path), "root": str(self.root)},
            )
        return full_path

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def exists(self, file_path: str | Path) -> bool:
        full_path = self._get_full_path(file_path)
        return await aiofiles.os.path.exists(full_path)

    async def stat(self, file_path: str | Path) -> FileStat:
        """Return size and mtime; a missing path yields ``exists=False``."""
        full_path = self._get_full_path(file_path)
        try:
            result = await aiofiles.os.stat(full_path)
        except FileNotFoundError:
            return FileStat(exists=False)
        except OSError as exc:
            logger.error("Error reading metadata of %s: %s", file_path, exc)
            raise FileError(str(exc)) from exc

        return FileStat(exists=True, size=result.st_size, modified=result.st_mtime)

    async def create_directory(self, dir_path: str | Path) -> None:
        full_path = self._get_full_path(dir_path)
        try:
            await aiofiles.os.makedirs(full_path, exist_ok=True)
        except OSError as exc:
            logger.error("Error creating directory %s: %s", dir_path, exc)
            raise FileError(str(exc)) from exc

    async def read_file(self, file_path: str | Path) -> str:
        """Read and return the UTF-8 contents of *file_path*."""
        full_path = self._get_full_path(file_path)
        if not await aiofiles.os.path.exists(full_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        try:
            async with aiofiles.open(full_path, encoding="utf-8") as fh:
                content = await fh.read()
        except OSError as exc:
            logger.error("Error reading file %s: %s", file_path, exc)
            raise FileError(str(exc)) from exc

        logger.debug("Read file: %s (%d chars)", file_path, len(content))
        return content

    async def write_file(self, file_path: str | Path, content: str) -> None:
        """Atomically replace *file_path* with *content*.

        Parent directories are created as needed.
        """
        full_path = self._get_full_path(file_path)
        await self.create_directory(full_path.parent)

        tmp_path = full_path.with_name(f".{full_path.name}.{uuid.uuid4().hex}.tmp")
        try:
            async with aiofiles.open(tmp_path, "w", encoding="utf-8", newline="") as fh:
                await fh.write(content)
            await aiofiles.os.replace(tmp_path, full_path)
        except (OSError, UnicodeError) as exc:
            with contextlib.suppress(OSError):
                await aiofiles.os.remove(tmp_path)
            logger.error("Error writing file %s: %s", file_path, exc)
            raise FileError(str(exc)) from exc

        logger.debug("Wrote file: %s (%d chars)", file_path, len(content))
