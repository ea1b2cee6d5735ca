"""aioscaffold — Async Python library for scaffolding folders from templates."""

from ._version import __version__
from .exceptions import (
    FileError,
    PathSecurityError,
    ScaffoldError,
    TemplateError,
    TemplateValidationError,
    UserCancelledError,
)
from .files import AsyncFileManager, FileSystem
from .models import (
    ApplyResolution,
    CancelResolution,
    ConflictPolicy,
    ConflictResolution,
    FileOperation,
    FileStat,
    OperationContext,
    ResourceLimits,
    ScaffoldResult,
    TemplateCollection,
    TemplateDef,
    TemplateFile,
)
from .paths import PathValidator
from .scaffold import CreateFromTemplateCommand
from .templates import TemplateLoader, TemplateProcessor
from .text import VariableSubstitution, to_camel, to_kebab, to_pascal
from .ui import UIService

__all__ = [
    "ApplyResolution",
    "AsyncFileManager",
    "CancelResolution",
    "ConflictPolicy",
    "ConflictResolution",
    "CreateFromTemplateCommand",
    "FileError",
    "FileOperation",
    "FileStat",
    "FileSystem",
    "OperationContext",
    "PathSecurityError",
    "PathValidator",
    "ResourceLimits",
    "ScaffoldError",
    "ScaffoldResult",
    "TemplateCollection",
    "TemplateDef",
    "TemplateError",
    "TemplateFile",
    "TemplateLoader",
    "TemplateProcessor",
    "TemplateValidationError",
    "UIService",
    "UserCancelledError",
    "VariableSubstitution",
    "__version__",
    "to_camel",
    "to_kebab",
    "to_pascal",
]
