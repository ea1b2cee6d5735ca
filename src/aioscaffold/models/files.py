"""File-related models."""

from __future__ import annotations

from pydantic import BaseModel


class FileStat(BaseModel):
    """Existence and size of a path; *size* is 0 when it does not exist."""

    exists: bool
    size: int = 0
    modified: float | None = None
