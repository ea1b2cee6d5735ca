"""Create-from-template orchestration."""

from .command import CreateFromTemplateCommand
from .policy import next_policy, resolve_from_policy

__all__ = ["CreateFromTemplateCommand", "next_policy", "resolve_from_policy"]
