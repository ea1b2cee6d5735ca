"""Path validation and sanitization."""

from .validator import MAX_FOLDER_NAME_BYTES, PathValidator

__all__ = ["MAX_FOLDER_NAME_BYTES", "PathValidator"]
