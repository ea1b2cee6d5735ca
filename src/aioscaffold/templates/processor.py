"""Template processor: turns a template into an ordered list of file writes.

Planning is pure: no file system access and no UI. Everything that can be
rejected (resource limits, unsafe paths) is rejected here, before the first
byte is written.
"""

from __future__ import annotations

import logging
import os

from ..exceptions import PathSecurityError, TemplateValidationError
from ..models.templates import FileOperation, OperationContext, ResourceLimits, TemplateDef
from ..paths.validator import PathValidator
from ..text.formatting import format_bytes
from ..text.substitution import VariableSubstitution

logger = logging.getLogger(__name__)

DEFAULT_LIMITS = ResourceLimits()


class TemplateProcessor:
    """Plans file operations for a template under a target root."""

    def __init__(
        self,
        path_validator: PathValidator | None = None,
        variable_substitution: VariableSubstitution | None = None,
        limits: ResourceLimits | None = None,
    ) -> None:
        self.path_validator = path_validator or PathValidator()
        self.variable_substitution = variable_substitution or VariableSubstitution()
        self.limits = limits or DEFAULT_LIMITS

    def plan_file_operations(self, context: OperationContext) -> list[FileOperation]:
        """Return one :class:`FileOperation` per template file, in template order.

        Raises :class:`TemplateValidationError` if the template exceeds a
        resource limit and :class:`PathSecurityError` if a path still escapes
        *target_root* after sanitization or sanitizes to *target_root* itself.
        """
        template = context.template
        self.validate_template(template)

        target_root = os.path.abspath(context.target_root)
        variables = {"folderName": context.folder_name}

        operations: list[FileOperation] = []
        for template_file in template.files:
            relative_path = self.variable_substitution.apply(template_file.path, variables)
            content = self.variable_substitution.apply(template_file.content or "", variables)

            sanitized = self.path_validator.sanitize_path(relative_path)
            absolute_path = os.path.normpath(os.path.join(target_root, sanitized))

            # A path that sanitizes to nothing would target the root itself.
            if not sanitized or not self.path_validator.is_safe(absolute_path, target_root):
                logger.error(
                    "Path %s resolved to %s, not a file under %s",
                    relative_path,
                    absolute_path,
                    target_root,
                )
                raise PathSecurityError(
                    f"Path escapes target directory: {relative_path}",
                    {
                        "relative_path": relative_path,
                        "absolute_path": absolute_path,
                        "target_root": target_root,
                    },
                )

            operations.append(
                FileOperation(
                    absolute_path=absolute_path,
                    relative_path=sanitized,
                    content=content,
                    source_file=template_file,
                )
            )

        logger.info(
            "Planned %d file operation(s) for template %r under %s",
            len(operations),
            template.name,
            target_root,
        )
        return operations

    def validate_template(self, template: TemplateDef) -> None:
        """Check *template* against the configured :class:`ResourceLimits`."""
        limits = self.limits
        file_count = len(template.files)

        if file_count > limits.max_files_per_template:
            raise TemplateValidationError(
                f"Template exceeds maximum file count ({limits.max_files_per_template})",
                {
                    "limit_name": "max_files_per_template",
                    "value": file_count,
                    "limit": limits.max_files_per_template,
                },
            )

        total_size = 0
        for template_file in template.files:
            size = len((template_file.content or "").encode("utf-8"))
            if size > limits.max_file_size_bytes:
                raise TemplateValidationError(
                    f'File "{template_file.path}" exceeds size limit '
                    f"({format_bytes(limits.max_file_size_bytes)})",
                    {
                        "limit_name": "max_file_size_bytes",
                        "file": template_file.path,
                        "value": size,
                        "limit": limits.max_file_size_bytes,
                    },
                )
            total_size += size

        if total_size > limits.max_total_size_bytes:
            raise TemplateValidationError(
                f"Template total size exceeds limit ({format_bytes(limits.max_total_size_bytes)})",
                {
                    "limit_name": "max_total_size_bytes",
                    "value": total_size,
                    "limit": limits.max_total_size_bytes,
                },
            )
