"""Exception hierarchy for aioscaffold."""

from __future__ import annotations

from typing import Any


class ScaffoldError(Exception):
    """Base exception for all aioscaffold errors."""


class TemplateError(ScaffoldError):
    """Error raised while validating or planning a template.

    Carries a machine-readable *code* and a *context* dict describing the
    offending input, both of which end up in the log.
    """

    code = "TEMPLATE_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context: dict[str, Any] = context or {}

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, **self.context}


class TemplateValidationError(TemplateError):
    """The template exceeds a configured resource limit."""

    code = "TEMPLATE_VALIDATION_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)


class PathSecurityError(TemplateError):
    """A path resolved outside the directory it must stay within."""

    code = "PATH_SECURITY_ERROR"

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message, context=context)


class FileError(ScaffoldError):
    """Error during a file operation."""


class UserCancelledError(ScaffoldError):
    """The user cancelled a prompt or an in-progress operation."""

    def __init__(self, message: str = "Operation cancelled by user") -> None:
        super().__init__(message)
