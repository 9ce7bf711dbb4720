# envy/core/pattern.py
"""
Name patterns: shell-style globs or regular expressions.

A NamePattern is one of two frozen dataclasses sharing a single ``matches``
method. Globs are matched against the whole name and are always
case-sensitive. Regular expressions are searched for anywhere in the name;
anchor them with ``^``/``$`` to match the whole name.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

import regex as re_engine

from ..utils.exceptions import PatternError
from ..utils.logger import get_logger

logger = get_logger("envy.pattern")

MATCH_ALL_GLOB = "*"


def glob_to_regex(glob: str) -> str:
    """
    Translate a glob into an equivalent regular expression source.

    Only ``*`` (any run, including none) and ``?`` (exactly one character)
    are special. Every other character, brackets included, is literal.

    Example: "FOO*_?" -> "FOO.*_."
    """
    parts = []
    for char in glob:
        if char == "*":
            # Collapse "**" so the engine never sees ".*.*"
            if not parts or parts[-1] != ".*":
                parts.append(".*")
        elif char == "?":
            parts.append(".")
        else:
            parts.append(re_engine.escape(char))
    return "".join(parts)


@dataclass(frozen=True)
class GlobPattern:
    """A glob matched against the full name."""

    source: str
    compiled: Any

    def matches(self, name: str) -> bool:
        return self.compiled.fullmatch(name) is not None


@dataclass(frozen=True)
class RegexPattern:
    """A regular expression searched for anywhere in the name."""

    source: str
    compiled: Any

    def matches(self, name: str) -> bool:
        return self.compiled.search(name) is not None


NamePattern = Union[GlobPattern, RegexPattern]


def compile_regex(source: str, ignore_case: bool = False, role: str = "name") -> Any:
    """
    Compile *source* with the regex engine.

    Raises:
        PatternError: If the expression is not valid.
    """
    flags = re_engine.IGNORECASE if ignore_case else 0
    try:
        return re_engine.compile(source, flags)
    except re_engine.error as e:
        logger.debug(f"Rejected {role} pattern {source!r}: {e}")
        raise PatternError(source, str(e), role=role) from e


def compile_name_pattern(source: str, use_regex: bool = False,
                         ignore_case: bool = False) -> NamePattern:
    """
    Build the name pattern for one run.

    An empty *source* matches every name. *ignore_case* only affects the
    regular expression form.

    Raises:
        PatternError: If *use_regex* is set and *source* is not valid.
    """
    if use_regex:
        return RegexPattern(source, compile_regex(source, ignore_case))

    if ignore_case:
        logger.debug("Ignoring case-insensitive flag for glob name pattern")
    glob = source or MATCH_ALL_GLOB
    return GlobPattern(glob, re_engine.compile(glob_to_regex(glob), re_engine.DOTALL))


def compile_search_pattern(source: Optional[str], ignore_case: bool = False) -> Optional[Any]:
    """
    Compile the value search expression, or return None when there is none.

    Raises:
        PatternError: If *source* is not a valid regular expression.
    """
    if not source:
        return None
    return compile_regex(source, ignore_case, role="search")
