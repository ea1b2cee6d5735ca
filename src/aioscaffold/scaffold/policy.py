"""Conflict-policy transitions.

The policy starts at ``ASK`` and can only move once, to ``OVERWRITE_ALL`` or
``SKIP_ALL``, when the user picks an "apply to all" resolution.
"""

from __future__ import annotations

from ..models.conflicts import ApplyResolution, ConflictPolicy, ConflictResolution


def resolve_from_policy(policy: ConflictPolicy) -> ApplyResolution | None:
    """Return the resolution implied by *policy*, or ``None`` to ask the user."""
    if policy is ConflictPolicy.OVERWRITE_ALL:
        return ApplyResolution(action="overwrite")
    if policy is ConflictPolicy.SKIP_ALL:
        return ApplyResolution(action="skip")
    return None


def next_policy(policy: ConflictPolicy, resolution: ConflictResolution) -> ConflictPolicy:
    if policy is not ConflictPolicy.ASK:
        return policy
    if isinstance(resolution, ApplyResolution) and resolution.apply_to_all:
        if resolution.action == "overwrite":
            return ConflictPolicy.OVERWRITE_ALL
        return ConflictPolicy.SKIP_ALL
    return policy
