# envy/__init__.py
"""
Envy: print environment variables, one value segment per line.

Names are filtered with a glob or a regular expression, values can be
searched and highlighted, PATH-like values are split on separator
characters and missing paths can be flagged.
"""

from .settings.config import AppConstants

__version__ = AppConstants.APP_VERSION

__all__ = ["__version__"]
