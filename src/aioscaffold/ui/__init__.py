"""User-interaction contract."""

from .base import UIService

__all__ = ["UIService"]
