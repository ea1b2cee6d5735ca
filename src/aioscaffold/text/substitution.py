"""Flat ``${name}`` / ``${name|transform}`` substitution.

Substituted values are escaped before they are inserted so that a value can
never introduce a live token of its own: there is exactly one pass over the
template and nothing produced by that pass is ever expanded again.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Mapping

from .case import to_camel, to_kebab, to_pascal

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\$\{([a-zA-Z_][a-zA-Z0-9_]*)(?:\|([a-zA-Z]+))?\}")

TRANSFORMS: dict[str, Callable[[str], str]] = {
    "camelcase": to_camel,
    "kebabcase": to_kebab,
    "pascalcase": to_pascal,
}


class VariableSubstitution:
    """Applies variables to template strings."""

    def apply(self, template: str, variables: Mapping[str, str]) -> str:
        """Return *template* with every known token replaced.

        Tokens naming an unknown variable, and text that only looks like a
        token (``${123}``, ``${}``), are left untouched.
        """

        def _replace(match: re.Match[str]) -> str:
            name, transform = match.group(1), match.group(2)
            value = variables.get(name)
            if value is None:
                return match.group(0)

            sanitized = self.sanitize_value(value)
            if transform:
                return self.apply_transformation(sanitized, transform)
            return sanitized

        return VARIABLE_PATTERN.sub(_replace, template)

    @staticmethod
    def sanitize_value(value: str) -> str:
        """Escape backslashes, ``${`` and backticks in *value*.

        Backslashes go first so the escapes added afterwards are not doubled.
        """
        return value.replace("\\", "\\\\").replace("${", "\\${").replace("`", "\\`")

    @staticmethod
    def apply_transformation(value: str, transform: str) -> str:
        func = TRANSFORMS.get(transform.lower())
        if func is None:
            logger.debug("Unknown transformation %r, value left as-is", transform)
            return value
        return func(value)

    @staticmethod
    def extract_variable_names(template: str) -> list[str]:
        """Return the distinct variable names in *template*, first-seen order."""
        return list(dict.fromkeys(m.group(1) for m in VARIABLE_PATTERN.finditer(template)))
