"""Create-from-template workflow.

Coordinates the three layers: the pure :class:`TemplateProcessor`, the
:class:`FileSystem` and :class:`UIService` collaborators, and this
orchestration, which gathers inputs, applies the plan one file at a time and
reports the outcome.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path

from ..exceptions import FileError, PathSecurityError, TemplateError, UserCancelledError
from ..files.base import FileSystem
from ..files.manager import AsyncFileManager
from ..models.common import ScaffoldResult
from ..models.conflicts import CancelResolution, ConflictPolicy, conflict_resolution_adapter
from ..models.templates import FileOperation, OperationContext
from ..paths.validator import PathValidator
from ..templates.loader import TemplateLoader
from ..templates.processor import TemplateProcessor
from ..ui.base import UIService
from .policy import next_policy, resolve_from_policy

logger = logging.getLogger(__name__)


class CreateFromTemplateCommand:
    """Scaffolds a new folder from a user-selected template."""

    def __init__(
        self,
        ui: UIService,
        *,
        processor: TemplateProcessor | None = None,
        file_system: FileSystem | None = None,
        template_loader: TemplateLoader | None = None,
        path_validator: PathValidator | None = None,
    ) -> None:
        self.ui = ui
        self.path_validator = path_validator or PathValidator()
        self.processor = processor or TemplateProcessor(self.path_validator)
        self.file_system = file_system or AsyncFileManager()
        self.template_loader = template_loader

    async def execute(
        self,
        target_base: Path | None,
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> ScaffoldResult:
        """Run the whole workflow below *target_base*.

        Never raises: every failure is logged, shown through the UI and
        reflected in the returned :class:`ScaffoldResult`.
        """
        logger.info("Starting template creation")
        created: list[Path] = []
        target_root: Path | None = None

        try:
            if target_base is None:
                await self.ui.show_warning("No workspace folder found.")
                return ScaffoldResult(status="failed", error="No workspace folder found.")

            context = await self.gather_inputs(target_base)
            target_root = context.target_root
            logger.info("Target: %s", target_root)
            logger.info("Template: %s", context.template.name)
            logger.info("Files to create: %d", len(context.template.files))

            operations = self.processor.plan_file_operations(context)
            await self._run_operations(operations, created, cancel_event)
            await self.show_results(created, target_root)
        except Exception as err:
            return await self.handle_error(err, created, target_root)

        return ScaffoldResult(
            status="completed",
            target_root=str(target_root),
            created_files=[str(p) for p in created],
        )

    async def gather_inputs(self, target_base: Path) -> OperationContext:
        """Prompt for the folder name and template.

        Raises :class:`UserCancelledError` if either prompt is dismissed.
        """
        folder_name = await self.ui.prompt_for_folder_name()
        if folder_name is None:
            raise UserCancelledError()

        error = self.path_validator.validate_folder_name(folder_name)
        if error is not None:
            raise TemplateError(error, "INVALID_FOLDER_NAME", {"folder_name": folder_name})
        folder_name = folder_name.strip()

        loader = self.template_loader or TemplateLoader(target_base)
        templates = await loader.async_load_templates()
        template = await self.ui.select_template(templates)
        if template is None:
            raise UserCancelledError()

        return OperationContext(
            target_root=target_base / folder_name,
            folder_name=folder_name,
            template=template,
        )

    async def execute_operations(
        self,
        operations: Sequence[FileOperation],
        *,
        cancel_event: asyncio.Event | None = None,
    ) -> list[Path]:
        """Apply *operations* in order and return the paths written."""
        created: list[Path] = []
        await self._run_operations(operations, created, cancel_event)
        return created

    async def _run_operations(
        self,
        operations: Sequence[FileOperation],
        created: list[Path],
        cancel_event: asyncio.Event | None,
    ) -> None:
        policy = ConflictPolicy.ASK
        total = len(operations)

        for index, operation in enumerate(operations, start=1):
            if cancel_event is not None and cancel_event.is_set():
                raise UserCancelledError()

            logger.debug("%d/%d: %s", index, total, operation.relative_path)
            stat = await self.file_system.stat(operation.absolute_path)

            if stat.exists:
                resolution = resolve_from_policy(policy)
                if resolution is None:
                    answer = await self.ui.prompt_for_conflict_resolution(
                        operation.relative_path, stat.size
                    )
                    resolution = conflict_resolution_adapter.validate_python(answer)

                if isinstance(resolution, CancelResolution):
                    raise UserCancelledError()

                updated = next_policy(policy, resolution)
                if updated is not policy:
                    logger.debug("Conflict policy changed: %s -> %s", policy.value, updated.value)
                    policy = updated

                if resolution.action == "skip":
                    logger.info("Skipped: %s", operation.relative_path)
                    continue

            await self.file_system.write_file(operation.absolute_path, operation.content)
            created.append(operation.absolute_path)
            logger.info("Created: %s", operation.relative_path)

    async def show_results(self, created_files: Sequence[Path], target_root: Path) -> None:
        if not created_files:
            await self.ui.show_warning("No files were created.")
            return

        relative_files = [os.path.relpath(path, target_root) for path in created_files]
        logger.info("Created files:\n%s", "\n".join(f"  - {f}" for f in relative_files))
        await self.ui.show_success(
            f"Successfully created {len(created_files)} files", relative_files
        )

    async def handle_error(
        self,
        err: Exception,
        created: Sequence[Path],
        target_root: Path | None,
    ) -> ScaffoldResult:
        """Log *err* in full, show it to the user and build the result."""
        created_files = [str(p) for p in created]
        root = str(target_root) if target_root is not None else None

        if isinstance(err, UserCancelledError):
            logger.info("%s (%d file(s) already written)", err, len(created_files))
            await self.ui.show_info(str(err))
            return ScaffoldResult(status="cancelled", target_root=root, created_files=created_files)

        code: str | None = None
        if isinstance(err, TemplateError):
            code = err.code
            label = "Security Error" if isinstance(err, PathSecurityError) else "Template Error"
            logger.error("%s [%s]: %s", label, err.code, err.message)
            if err.context:
                logger.error("Context: %s", json.dumps(err.context, indent=2, default=str))
        elif isinstance(err, (FileError, OSError)):
            logger.error("File System Error: %s", err)
        else:
            logger.exception("Unexpected error: %s", err)

        await self.ui.show_error(err)
        return ScaffoldResult(
            status="failed",
            target_root=root,
            created_files=created_files,
            error=str(err),
            error_code=code,
        )
