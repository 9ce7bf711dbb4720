# envy/core/paths.py
"""Flagging value segments that name filesystem paths which do not exist."""

from typing import Callable, Optional

from ..utils.platform import path_separators

ExistsPredicate = Callable[[str], bool]


def looks_like_path_list(value: str, separators: Optional[str] = None) -> bool:
    """Return whether *value* contains any path separator character."""
    chars = path_separators() if separators is None else separators
    return any(char in value for char in chars)


def check_missing(content: str, enabled: bool, value_has_path_separator: bool,
                  exists: ExistsPredicate) -> Optional[bool]:
    """
    Decide whether a segment is a missing path.

    Returns None when the check does not apply: the feature is off, the
    owning value has no path separator anywhere, or the segment is empty.
    Otherwise returns True when *exists* rejects the raw segment content.
    """
    if not enabled or not value_has_path_separator or not content:
        return None
    return not exists(content)
