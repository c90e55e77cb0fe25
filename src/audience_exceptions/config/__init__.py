"""Configuration package.

Single source of truth: ``RuntimeSettings`` via ``get_settings()``.
"""

from .runtime import RuntimeSettings, get_settings

__all__ = [
    "RuntimeSettings",
    "get_settings",
]
