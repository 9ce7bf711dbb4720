# envy/ui/colors.py
"""
Palette resolution: default SGR codes, user overrides and the color mode.

Override lists use the same shape as GREP_COLORS: colon-separated
``key=value`` entries where the value is passed to the terminal untouched,
e.g. ``var=1;34:mat=4;31``.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from ..settings.config import DEFAULT_COLORS, RESET_CODE, STYLE_KEYS, ColorMode
from ..utils.logger import get_logger

logger = get_logger("envy.colors")

FOUND_MARKER = "*"
MISSING_MARKER = "!"


def sgr(params: str) -> str:
    """Wrap SGR parameters in a CSI sequence: "1;31" -> "\\033[1;31m"."""
    return f"\033[{params}m"


@dataclass(frozen=True)
class Palette:
    """Resolved style tokens for one run. Empty strings mean no styling."""

    variable: str = ""
    value: str = ""
    matched: str = ""
    unmatched: str = ""
    missing: str = ""
    special: str = ""
    separator: str = ""
    reset: str = ""
    enabled: bool = False

    def markers(self, matched: Optional[bool], missing: Optional[bool]) -> str:
        """
        Return the two marker columns that start every segment line.

        With color the columns are blank; without it ``*`` flags a segment
        that matched the search and ``!`` a missing path.
        """
        if self.enabled:
            return "  "
        return (FOUND_MARKER if matched else " ") + (MISSING_MARKER if missing else " ")

    def content_style(self, matched: Optional[bool], missing: Optional[bool]) -> str:
        """Base style for segment content: missing beats unmatched beats value."""
        if missing:
            return self.missing
        if matched is False:
            return self.unmatched
        return self.value


PLAIN_PALETTE = Palette()


def parse_style_overrides(text: str) -> Dict[str, str]:
    """
    Parse a ``key=value:key=value`` override list.

    Unknown keys and entries without ``=`` are skipped; values are kept
    verbatim, including empty ones.
    """
    overrides: Dict[str, str] = {}
    for entry in text.split(":"):
        if not entry:
            continue
        key, sep, value = entry.partition("=")
        key = key.strip()
        if not sep:
            logger.debug(f"Skipping style override without '=': {entry!r}")
            continue
        if key not in STYLE_KEYS:
            logger.debug(f"Skipping unknown style key {key!r}")
            continue
        overrides[key] = value
    return overrides


def resolve_color_mode(mode: ColorMode, is_terminal: Callable[[], bool]) -> bool:
    """Decide once whether this run is colored."""
    if mode is ColorMode.ALWAYS:
        return True
    if mode is ColorMode.NEVER:
        return False
    return is_terminal()


def resolve_palette(use_color: bool, overrides: Optional[Mapping[str, str]] = None) -> Palette:
    """
    Build the palette for one run.

    Args:
        use_color: Result of the color mode decision
        overrides: Style key -> SGR parameters; missing keys use the defaults

    Returns:
        Palette instance, all slots empty when color is off
    """
    if not use_color:
        return PLAIN_PALETTE

    codes = dict(DEFAULT_COLORS)
    codes.update(overrides or {})
    return Palette(
        variable=sgr(codes["var"]),
        value=sgr(codes["val"]),
        matched=sgr(codes["mat"]),
        unmatched=sgr(codes["unm"]),
        missing=sgr(codes["mis"]),
        special=sgr(codes["spe"]),
        separator=sgr(codes["sep"]),
        reset=sgr(RESET_CODE),
        enabled=True,
    )
