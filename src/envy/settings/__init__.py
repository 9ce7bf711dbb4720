# envy/settings/__init__.py
"""Configuration for Envy."""

from .config import (
    DEFAULT_COLORS,
    STYLE_KEYS,
    AppConstants,
    ColorMode,
    EnvVars,
    EnvyOptions,
)

__all__ = [
    "DEFAULT_COLORS",
    "STYLE_KEYS",
    "AppConstants",
    "ColorMode",
    "EnvVars",
    "EnvyOptions",
]
