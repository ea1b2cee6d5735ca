"""File-system access for scaffolding."""

from .base import FileSystem
from .manager import AsyncFileManager

__all__ = ["AsyncFileManager", "FileSystem"]
