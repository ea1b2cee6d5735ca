"""Conflict-resolution models.

A resolution is a tagged union on ``action``: either an
:class:`ApplyResolution` (overwrite or skip, optionally for every remaining
conflict) or a :class:`CancelResolution`.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class ConflictPolicy(str, Enum):
    """Session-wide handling of existing files."""

    ASK = "ask"
    OVERWRITE_ALL = "overwrite_all"
    SKIP_ALL = "skip_all"


class ApplyResolution(BaseModel):
    """Overwrite or skip the conflicting file."""

    model_config = ConfigDict(frozen=True)

    action: Literal["overwrite", "skip"]
    apply_to_all: bool = False


class CancelResolution(BaseModel):
    """Stop the whole operation."""

    model_config = ConfigDict(frozen=True)

    action: Literal["cancel"] = "cancel"


ConflictResolution = Annotated[
    ApplyResolution | CancelResolution,
    Field(discriminator="action"),
]

conflict_resolution_adapter: TypeAdapter[ConflictResolution] = TypeAdapter(ConflictResolution)


def overwrite(apply_to_all: bool = False) -> ApplyResolution:
    return ApplyResolution(action="overwrite", apply_to_all=apply_to_all)


def skip(apply_to_all: bool = False) -> ApplyResolution:
    return ApplyResolution(action="skip", apply_to_all=apply_to_all)


def cancel() -> CancelResolution:
    return CancelResolution()
