"""Pydantic models for aioscaffold."""

from .common import ScaffoldResult
from .conflicts import (
    ApplyResolution,
    CancelResolution,
    ConflictPolicy,
    ConflictResolution,
    conflict_resolution_adapter,
)
from .files import FileStat
from .templates import (
    FileOperation,
    OperationContext,
    ResourceLimits,
    TemplateCollection,
    TemplateDef,
    TemplateFile,
)

__all__ = [
    "ApplyResolution",
    "CancelResolution",
    "ConflictPolicy",
    "ConflictResolution",
    "FileOperation",
    "FileStat",
    "OperationContext",
    "ResourceLimits",
    "ScaffoldResult",
    "TemplateCollection",
    "TemplateDef",
    "TemplateFile",
    "conflict_resolution_adapter",
]
