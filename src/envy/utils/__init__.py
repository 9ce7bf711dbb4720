# envy/utils/__init__.py
"""
Utility modules for Envy: logging, exceptions and host collaborators.
"""

from .exceptions import ConfigError, EnvyError, PatternError, SeparatorError, handle_exception
from .logger import get_logger

__all__ = [
    "get_logger",
    "EnvyError",
    "ConfigError",
    "PatternError",
    "SeparatorError",
    "handle_exception",
]
