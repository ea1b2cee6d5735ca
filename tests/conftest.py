"""Shared fixtures and in-memory collaborators for aioscaffold tests."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from aioscaffold.models import ConflictResolution, FileStat, TemplateDef, TemplateFile
from aioscaffold.models.conflicts import cancel


class FakeFileSystem:
    """In-memory file system keyed by absolute path string."""

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.directories: set[str] = set()
        self.stat_calls: list[str] = []
        self.fail_on: dict[str, Exception] = {}

    def add_file(self, path: str | Path, content: str) -> None:
        self.files[str(path)] = content
        self.directories.update(str(parent) for parent in Path(path).parents)

    async def exists(self, file_path: str | Path) -> bool:
        key = str(file_path)
        return key in self.files or key in self.directories

    async def stat(self, file_path: str | Path) -> FileStat:
        key = str(file_path)
        self.stat_calls.append(key)
        if key in self.files:
            return FileStat(exists=True, size=len(self.files[key].encode("utf-8")))
        if key in self.directories:
            return FileStat(exists=True)
        return FileStat(exists=False)

    async def create_directory(self, dir_path: str | Path) -> None:
        self.directories.add(str(dir_path))
        self.directories.update(str(parent) for parent in Path(dir_path).parents)

    async def write_file(self, file_path: str | Path, content: str) -> None:
        key = str(file_path)
        if key in self.fail_on:
            raise self.fail_on[key]
        await self.create_directory(Path(file_path).parent)
        self.files[key] = content

    async def read_file(self, file_path: str | Path) -> str:
        try:
            return self.files[str(file_path)]
        except KeyError:
            raise FileNotFoundError(f"File not found: {file_path}") from None


class FakeUIService:
    """Scripted UI: answers prompts from preset values and records output."""

    def __init__(self) -> None:
        self.folder_name: str | None = "MyComponent"
        self.template: TemplateDef | None = None
        self.cancel_template = False
        self.resolutions: list[ConflictResolution | dict[str, object]] = []
        self.conflict_prompts: list[tuple[str, int]] = []
        self.successes: list[tuple[str, list[str]]] = []
        self.errors: list[BaseException] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []

    async def prompt_for_folder_name(self) -> str | None:
        return self.folder_name

    async def select_template(self, templates: Sequence[TemplateDef]) -> TemplateDef | None:
        if self.cancel_template:
            return None
        return self.template or templates[0]

    async def prompt_for_conflict_resolution(
        self, file_path: str, file_size: int
    ) -> ConflictResolution | dict[str, object]:
        self.conflict_prompts.append((file_path, file_size))
        if not self.resolutions:
            return cancel()
        return self.resolutions.pop(0)

    async def show_success(self, message: str, created_files: Sequence[str]) -> None:
        self.successes.append((message, list(created_files)))

    async def show_error(self, error: BaseException) -> None:
        self.errors.append(error)

    async def show_warning(self, message: str) -> None:
        self.warnings.append(message)

    async def show_info(self, message: str) -> None:
        self.infos.append(message)


def make_template(*files: tuple[str, str | None], name: str = "Test Template") -> TemplateDef:
    return TemplateDef(
        name=name,
        description="A test template",
        files=[TemplateFile(path=path, content=content) for path, content in files],
    )


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    fs = FakeFileSystem()
    fs.directories.add("/workspace")
    return fs


@pytest.fixture
def fake_ui() -> FakeUIService:
    return FakeUIService()


@pytest.fixture
def workspace_dir(tmp_path: Path) -> Path:
    """A real workspace directory with one pre-existing component."""
    workspace = tmp_path / "workspace"
    existing = workspace / "Existing"
    existing.mkdir(parents=True)
    (existing / "index.ts").write_text("export const keep = true;\n")
    return workspace
