"""Template definition and planning models."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

MEBIBYTE = 1024 * 1024


class TemplateFile(BaseModel):
    """A single file entry of a template.

    Both *path* and *content* may contain ``${name}`` tokens.
    """

    model_config = ConfigDict(frozen=True)

    path: str
    content: str | None = None


class TemplateDef(BaseModel):
    """A named template; *files* order is the creation order."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    files: list[TemplateFile] = Field(default_factory=list)


class TemplateCollection(BaseModel):
    """Persisted template document: ``{"templates": [...]}``."""

    templates: list[TemplateDef] = Field(default_factory=list)


class ResourceLimits(BaseModel):
    """Upper bounds a template must respect before anything is planned."""

    model_config = ConfigDict(frozen=True)

    max_files_per_template: PositiveInt = 100
    max_file_size_bytes: PositiveInt = 10 * MEBIBYTE
    max_total_size_bytes: PositiveInt = 100 * MEBIBYTE


class OperationContext(BaseModel):
    """Inputs of one planning run."""

    model_config = ConfigDict(frozen=True)

    target_root: Path
    folder_name: str
    template: TemplateDef


class FileOperation(BaseModel):
    """A planned write of *content* to *absolute_path*."""

    model_config = ConfigDict(frozen=True)

    absolute_path: Path
    relative_path: str
    content: str
    source_file: TemplateFile
