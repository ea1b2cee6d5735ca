"""Case conversion helpers used by ``${name|transform}`` tokens.

Word boundaries are ASCII-only: digits and non-ASCII letters are carried
through unchanged and never start a new word on their own.
"""

from __future__ import annotations

import re

_LOWER_TO_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_KEBAB_SEPARATORS = re.compile(r"[_\s]+")
_SEPARATOR_RUN = re.compile(r"[-_\s]+(.)?")
_EDGE_SEPARATORS = re.compile(r"^[-_\s]+|[-_\s]+$")


def to_kebab(value: str) -> str:
    """Convert *value* to kebab-case.

    >>> to_kebab("UserProfile")
    'user-profile'
    >>> to_kebab("XMLHttpRequest")
    'xml-http-request'
    >>> to_kebab("user_profile")
    'user-profile'
    """
    value = _LOWER_TO_UPPER.sub(r"\1-\2", value)
    value = _ACRONYM_BOUNDARY.sub(r"\1-\2", value)
    value = _KEBAB_SEPARATORS.sub("-", value)
    return value.lower()


def _join_words(value: str) -> str:
    """Drop separator runs and uppercase the character that follows each."""
    value = _EDGE_SEPARATORS.sub("", value)
    return _SEPARATOR_RUN.sub(lambda m: m.group(1).upper() if m.group(1) else "", value)


def to_camel(value: str) -> str:
    """Convert *value* to camelCase.

    >>> to_camel("user-profile")
    'userProfile'
    >>> to_camel("UserProfile")
    'userProfile'
    """
    joined = _join_words(value)
    return joined[:1].lower() + joined[1:]


def to_pascal(value: str) -> str:
    """Convert *value* to PascalCase; separator-only input yields ``""``.

    >>> to_pascal("user_profile")
    'UserProfile'
    """
    joined = _join_words(value)
    return joined[:1].upper() + joined[1:]
