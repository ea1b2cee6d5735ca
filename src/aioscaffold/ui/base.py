"""User-interaction contract consumed by the orchestrator.

Hosts (editor extensions, CLIs, tests) provide the implementation.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..models.conflicts import ConflictResolution
from ..models.templates import TemplateDef


@runtime_checkable
class UIService(Protocol):
    async def prompt_for_folder_name(self) -> str | None:
        """Return the new folder name, or ``None`` if the user cancelled."""
        ...

    async def select_template(self, templates: Sequence[TemplateDef]) -> TemplateDef | None:
        """Return the chosen template, or ``None`` if the user cancelled."""
        ...

    async def prompt_for_conflict_resolution(
        self, file_path: str, file_size: int
    ) -> ConflictResolution: ...

    async def show_success(self, message: str, created_files: Sequence[str]) -> None: ...

    async def show_error(self, error: BaseException) -> None: ...

    async def show_warning(self, message: str) -> None: ...

    async def show_info(self, message: str) -> None: ...
