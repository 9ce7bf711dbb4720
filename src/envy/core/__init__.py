# envy/core/__init__.py
"""Name matching, value splitting and path checks."""

from .paths import check_missing, looks_like_path_list
from .pattern import (
    GlobPattern,
    NamePattern,
    RegexPattern,
    compile_name_pattern,
    compile_search_pattern,
)
from .splitter import Segment, SeparatorSplitter, get_splitter

__all__ = [
    "check_missing",
    "looks_like_path_list",
    "GlobPattern",
    "NamePattern",
    "RegexPattern",
    "compile_name_pattern",
    "compile_search_pattern",
    "Segment",
    "SeparatorSplitter",
    "get_splitter",
]
