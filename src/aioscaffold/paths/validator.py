"""Folder-name validation and path containment checks.

Guards against path traversal (``..``), absolute path injection, characters
that are invalid on common file systems, and reserved Windows device names.

Fullwidth look-alikes (``U+FF0E``, ``U+FF0F``) and URL-encoded sequences are
not normalized and pass through as ordinary characters.
"""

from __future__ import annotations

import os
import re

MAX_FOLDER_NAME_BYTES = 255

_INVALID_CHARS = re.compile(r'[<>:"|?*\x00-\x1f]')
_RESERVED_NAMES = re.compile(r"^(CON|PRN|AUX|NUL|COM[1-9]|LPT[1-9])(\.|$)", re.IGNORECASE)
_SEPARATORS = ("/", "\\")
_SEPARATOR_SPLIT = re.compile(r"[/\\]")


class PathValidator:
    """Validates user-supplied names and template-derived paths."""

    def validate_folder_name(self, folder_name: str | None) -> str | None:
        """Return an error message for *folder_name*, or ``None`` if valid.

        Surrounding whitespace is trimmed before any check.
        """
        if not folder_name or not folder_name.strip():
            return "Folder name cannot be empty"

        trimmed = folder_name.strip()

        if ".." in trimmed:
            return 'Folder name cannot contain ".."'

        if os.path.isabs(trimmed):
            return "Folder name cannot be an absolute path"

        if any(sep in trimmed for sep in _SEPARATORS):
            return "Folder name cannot contain path separators (/ or \\)"

        if _INVALID_CHARS.search(trimmed):
            return 'Folder name contains invalid characters: < > : " | ? *'

        if _RESERVED_NAMES.match(trimmed):
            return "This is a reserved system folder name"

        if len(trimmed.encode("utf-8")) > MAX_FOLDER_NAME_BYTES:
            return f"Folder name too long (max {MAX_FOLDER_NAME_BYTES} bytes)"

        if trimmed.startswith((".", " ")) or trimmed.endswith((".", " ")):
            return "Folder name cannot start or end with dots or spaces"

        return None

    def sanitize_path(self, relative_path: str) -> str:
        """Degrade *relative_path* into a safe relative path.

        Never fails: every ``..`` is removed, leading separators are
        stripped and empty or dot segments are dropped.
        """
        cleaned = relative_path.replace("..", "").lstrip("/\\")
        segments = [
            segment
            for segment in _SEPARATOR_SPLIT.split(cleaned)
            if segment and segment not in (".", "..")
        ]
        return os.sep.join(segments)

    def is_safe(self, resolved_path: str | os.PathLike[str], target_root: str | os.PathLike[str]) -> bool:
        """Return ``True`` if *resolved_path* lies within *target_root*.

        Both paths are normalized lexically; nothing touches the disk.
        """
        path = os.path.normpath(os.fspath(resolved_path))
        root = os.path.normpath(os.fspath(target_root))

        if not path.startswith(root):
            return False

        # /workspace/project2 must not count as inside /workspace/project
        rest = path[len(root):]
        return not rest or rest.startswith(_SEPARATORS) or root.endswith(_SEPARATORS)
