"""Configuration package.

Single source of truth: ``InterceptorSettings`` via ``get_settings()``.
"""

from .runtime import InterceptorSettings, get_settings

__all__ = [
    "InterceptorSettings",
    "get_settings",
]
