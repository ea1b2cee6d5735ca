"""Template loading and operation planning."""

from .loader import DEFAULT_TEMPLATE, WORKSPACE_TEMPLATES_FILE, TemplateLoader
from .processor import DEFAULT_LIMITS, TemplateProcessor

__all__ = [
    "DEFAULT_LIMITS",
    "DEFAULT_TEMPLATE",
    "WORKSPACE_TEMPLATES_FILE",
    "TemplateLoader",
    "TemplateProcessor",
]
