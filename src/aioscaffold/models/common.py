"""Common result model."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class ScaffoldResult(BaseModel):
    """Outcome of one create-from-template invocation."""

    status: Literal["completed", "cancelled", "failed"]
    target_root: str | None = None
    created_files: list[str] = Field(default_factory=list)
    error: str | None = None
    error_code: str | None = None
