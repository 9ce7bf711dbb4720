# envy/core/splitter.py
"""
Splitting composite values (PATH-like lists) into segments.

Each segment is a maximal run of non-separator characters followed by the
maximal run of separator characters after it. The split is lossless:
joining every ``content + separator`` in order gives back the value.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Iterator, NamedTuple

import regex as re_engine

from ..utils.exceptions import SeparatorError
from ..utils.logger import get_logger

logger = get_logger("envy.splitter")

# Characters that keep a special meaning inside a character class
_CLASS_SPECIALS = frozenset("\\]^-[")


class Segment(NamedTuple):
    """One chunk of a value and the separator run that follows it."""

    content: str
    separator: str


def escape_for_class(chars: str) -> str:
    """Escape *chars* so each stands for itself inside ``[...]``."""
    return "".join("\\" + c if c in _CLASS_SPECIALS else c for c in chars)


@dataclass(frozen=True)
class SeparatorSplitter:
    """Splits values on a fixed set of separator characters."""

    separators: str
    pattern: Any

    @classmethod
    def from_chars(cls, separators: str) -> "SeparatorSplitter":
        """
        Compile a splitter for the given separator characters.

        Raises:
            SeparatorError: If the set is empty or cannot form a character class.
        """
        if not separators:
            raise SeparatorError(separators, "at least one separator character is required")

        charset = escape_for_class("".join(dict.fromkeys(separators)))
        source = f"([^{charset}]*)([{charset}]*)"
        try:
            pattern = re_engine.compile(source, re_engine.DOTALL)
        except re_engine.error as e:
            raise SeparatorError(separators, str(e)) from e

        logger.debug(f"Separator pattern for {separators!r}: {source!r}")
        return cls(separators, pattern)

    def split(self, value: str) -> Iterator[Segment]:
        """
        Lazily yield the segments of *value*, left to right.

        An empty value yields one empty segment so a variable set to "" still
        gets a line of its own.
        """
        pos = 0
        end = len(value)
        while True:
            match = self.pattern.match(value, pos)
            yield Segment(match.group(1), match.group(2))
            pos = match.end()
            if pos >= end:
                return


@lru_cache(maxsize=16)
def get_splitter(separators: str) -> SeparatorSplitter:
    """Return a compiled splitter, reusing one built for the same set."""
    return SeparatorSplitter.from_chars(separators)
