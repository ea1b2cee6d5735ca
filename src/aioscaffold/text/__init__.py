"""Text helpers: case transforms, variable substitution, formatting."""

from .case import to_camel, to_kebab, to_pascal
from .formatting import format_bytes
from .substitution import VariableSubstitution

__all__ = [
    "VariableSubstitution",
    "format_bytes",
    "to_camel",
    "to_kebab",
    "to_pascal",
]
