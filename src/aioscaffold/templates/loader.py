"""Template source: workspace file, then user config, then a built-in default."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models.templates import TemplateCollection, TemplateDef, TemplateFile

logger = logging.getLogger(__name__)

WORKSPACE_TEMPLATES_FILE = Path(".vscode") / "folder-maker.json"

DEFAULT_TEMPLATE = TemplateDef(
    name="Basic TypeScript",
    description="Creates index.ts with a starter export",
    files=[
        TemplateFile(
            path="index.ts",
            content="export const name = '${folderName|camelCase}';\n",
        )
    ],
)


class TemplateLoader:
    """Resolves the list of available templates.

    Workspace definitions win over user-level ones; when neither yields a
    template, :data:`DEFAULT_TEMPLATE` is returned. Sources that cannot be
    read or parsed are logged and skipped.
    """

    def __init__(
        self,
        workspace_root: Path | None = None,
        *,
        user_config_path: Path | None = None,
    ) -> None:
        self.workspace_root = workspace_root
        self.user_config_path = user_config_path

    def load_templates(self) -> list[TemplateDef]:
        workspace = self.load_workspace_templates()
        if workspace:
            logger.info("Loaded %d workspace template(s)", len(workspace))
            return workspace

        user = self.load_user_templates()
        if user:
            logger.info("Loaded %d user template(s)", len(user))
            return user

        logger.info("No configured templates found, using built-in default")
        return [DEFAULT_TEMPLATE]

    async def async_load_templates(self) -> list[TemplateDef]:
        """Async variant of :meth:`load_templates` (runs in a worker thread)."""
        return await asyncio.to_thread(self.load_templates)

    def load_workspace_templates(self) -> list[TemplateDef]:
        """Read ``.vscode/folder-maker.json`` under the workspace root."""
        if self.workspace_root is None:
            return []

        file_path = self.workspace_root / WORKSPACE_TEMPLATES_FILE
        if not file_path.is_file():
            return []

        try:
            collection = TemplateCollection.model_validate_json(file_path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.warning("Ignoring workspace templates in %s: %s", file_path, exc)
            return []
        return collection.templates

    def load_user_templates(self) -> list[TemplateDef]:
        """Read the user-level YAML (or JSON) template file."""
        if self.user_config_path is None or not self.user_config_path.is_file():
            return []

        try:
            data = yaml.safe_load(self.user_config_path.read_text(encoding="utf-8"))
            collection = TemplateCollection.model_validate(data or {})
        except (OSError, UnicodeDecodeError, yaml.YAMLError, ValidationError) as exc:
            logger.warning("Ignoring user templates in %s: %s", self.user_config_path, exc)
            return []
        return collection.templates
