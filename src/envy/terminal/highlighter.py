# envy/terminal/highlighter.py
"""
Value search and highlighting.

Features:
- Control characters are escaped to visible text (``\\t``, ``\\x1b``...) in
  the special style, so a value can never move the cursor or recolor the
  terminal.
- The search expression runs on that escaped visible text, never on style
  tokens, and every non-empty occurrence is wrapped in the matched style.
- Only-matching mode collapses runs of segments the search did not match
  into a single ``...`` line.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, NamedTuple, Optional, Tuple, TypeVar, Union

from ..core.splitter import Segment
from ..ui.colors import Palette

ELLIPSIS = "..."

SPECIALS = {
    "\x1b": "\\x1b",
    "\r": "\\r",
    "\n": "\\n",
    "\t": "\\t",
    "\x07": "\\x07",
}


def _escape_char(char: str) -> Optional[str]:
    """
    Return the visible form of a character that must not reach the terminal
    raw, or None for ordinary characters.

    Covers C0 and C1 controls, DEL, and the lone surrogates Python uses for
    environment bytes that are not valid UTF-8 (shown as the original byte).
    """
    escaped = SPECIALS.get(char)
    if escaped is not None:
        return escaped
    code = ord(char)
    if code < 0x20 or 0x7F <= code <= 0x9F:
        return f"\\x{code:02x}"
    if 0xDC80 <= code <= 0xDCFF:
        return f"\\x{code - 0xDC00:02x}"
    return None


def escape_chunks(text: str) -> List[Tuple[str, bool]]:
    """
    Split *text* into (visible_text, is_special) chunks.

    Ordinary characters are grouped; each control character becomes its own
    chunk holding its escaped form.
    """
    chunks: List[Tuple[str, bool]] = []
    plain: List[str] = []
    for char in text:
        escaped = _escape_char(char)
        if escaped is None:
            plain.append(char)
            continue
        if plain:
            chunks.append(("".join(plain), False))
            plain = []
        chunks.append((escaped, True))
    if plain:
        chunks.append(("".join(plain), False))
    return chunks


def escape_specials(text: str) -> str:
    """Return *text* with control characters replaced by their escapes."""
    return "".join(chunk for chunk, _ in escape_chunks(text))


class Annotation(NamedTuple):
    """Search outcome for one segment and its rendered content."""

    matched: Optional[bool]
    rendered: str


def _render(chunks: List[Tuple[str, bool]], spans: List[Tuple[int, int]],
            palette: Palette, base_style: str) -> str:
    # Tag every visible character with (match index or -1, is_special) and
    # emit each run of equal tags with its own styling.
    tags: List[Tuple[int, bool]] = []
    for text, special in chunks:
        tags.extend((-1, special) for _ in text)
    for index, (start, end) in enumerate(spans):
        for pos in range(start, end):
            tags[pos] = (index, tags[pos][1])

    visible = "".join(text for text, _ in chunks)
    restore = palette.reset + base_style
    out: List[str] = []
    run_start = 0
    for pos in range(1, len(visible) + 1):
        if pos < len(visible) and tags[pos] == tags[run_start]:
            continue
        match_index, special = tags[run_start]
        styled = match_index >= 0 or special
        if match_index >= 0:
            out.append(palette.matched)
        if special:
            out.append(palette.special)
        out.append(visible[run_start:pos])
        if styled:
            out.append(restore)
        run_start = pos
    return "".join(out)


def annotate(content: str, search: Optional[Any], palette: Palette,
             missing: Optional[bool] = None) -> Annotation:
    """
    Escape and highlight one segment.

    Args:
        content: Raw segment text
        search: Compiled search expression, or None when not searching
        palette: Styles for the segment, its escapes and its matches
        missing: Path-check result; a missing path keeps the missing style
            underneath the match highlighting

    Returns:
        Annotation whose ``matched`` is None without a search, else whether
        the expression occurs in the escaped text
    """
    chunks = escape_chunks(content)
    if search is None:
        base_style = palette.content_style(None, missing)
        return Annotation(None, _render(chunks, [], palette, base_style))

    visible = "".join(text for text, _ in chunks)
    found = search.search(visible) is not None
    spans = []
    if found:
        spans = [m.span() for m in search.finditer(visible) if m.end() > m.start()]
    base_style = palette.content_style(found, missing)
    return Annotation(found, _render(chunks, spans, palette, base_style))


@dataclass(frozen=True)
class AnnotatedSegment:
    """A segment with its search and path-check flags."""

    segment: Segment
    matched: Optional[bool]
    missing: Optional[bool]
    rendered: str


@dataclass(frozen=True)
class Elision:
    """Stands in for a run of consecutive unmatched segments."""

    text: str = ELLIPSIS


T = TypeVar("T", bound=AnnotatedSegment)


def elide_unmatched(segments: Iterable[T], only_matching: bool) -> Iterator[Union[T, Elision]]:
    """
    Collapse runs of unmatched segments when *only_matching* is set.

    The first segment of an unmatched run becomes one Elision; the rest of
    the run is dropped. Matched segments, and segments with no search
    result at all, end the run.
    """
    elided = False
    for item in segments:
        if not only_matching or item.matched is not False:
            elided = False
            yield item
        elif not elided:
            elided = True
            yield Elision()
