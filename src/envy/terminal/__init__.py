# envy/terminal/__init__.py
"""Highlighting and rendering of environment variables for the terminal."""

from .highlighter import ELLIPSIS, AnnotatedSegment, Elision, annotate, elide_unmatched
from .renderer import EnvironmentRenderer

__all__ = [
    "ELLIPSIS",
    "AnnotatedSegment",
    "Elision",
    "annotate",
    "elide_unmatched",
    "EnvironmentRenderer",
]
