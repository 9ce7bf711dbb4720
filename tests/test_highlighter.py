# tests/test_highlighter.py
"""
Tests for control-character escaping, search highlighting and elision.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


def _search(source):
    from envy.core.pattern import compile_search_pattern

    return compile_search_pattern(source)


class TestEscaping:
    """Tests for escaping control characters."""

    def test_named_escapes(self):
        """Test the common control characters use readable escapes."""
        from envy.terminal.highlighter import escape_specials

        assert escape_specials("a\tb\nc\rd\x1be\x07") == "a\\tb\\nc\\rd\\x1be\\x07"

    def test_other_controls_use_hex(self):
        """Test remaining C0 controls and DEL become \\xNN."""
        from envy.terminal.highlighter import escape_specials

        assert escape_specials("\x00\x7f") == "\\x00\\x7f"

    def test_c1_controls_use_hex(self):
        """Test 8-bit controls such as CSI cannot reach the terminal."""
        from envy.terminal.highlighter import escape_specials

        assert escape_specials("\x9b31m") == "\\x9b31m"
        assert escape_specials("\x80\x9f\xa0") == "\\x80\\x9f\xa0"

    def test_undecodable_bytes_show_the_byte(self):
        """Test surrogate-escaped environment bytes print as \\xNN."""
        from envy.terminal.highlighter import escape_specials

        assert escape_specials("caf\udcff") == "caf\\xff"
        assert escape_specials("\udc80") == "\\x80"
        escape_specials("caf\udcff").encode("utf-8")

    def test_printable_text_unchanged(self):
        """Test ordinary and non-ASCII text passes through."""
        from envy.terminal.highlighter import escape_specials

        assert escape_specials("/usr/bin é") == "/usr/bin é"

    def test_chunks_mark_specials(self):
        """Test each control character is its own special chunk."""
        from envy.terminal.highlighter import escape_chunks

        assert escape_chunks("ab\tc") == [("ab", False), ("\\t", True), ("c", False)]

    def test_special_style_with_color(self, color_palette):
        """Test escapes are wrapped in the special style then restore the base."""
        from envy.terminal.highlighter import annotate

        result = annotate("a\tb", None, color_palette)
        p = color_palette
        assert result.rendered == f"a{p.special}\\t{p.reset}{p.value}b"

    def test_undecodable_byte_in_special_style(self, color_palette):
        """Test an undecodable byte is drawn like any other escape."""
        from envy.terminal.highlighter import annotate

        p = color_palette
        result = annotate("caf\udcff", None, p)
        assert result.rendered == f"caf{p.special}\\xff{p.reset}{p.value}"


class TestAnnotate:
    """Tests for per-segment search and highlight."""

    def test_no_search(self, plain_palette):
        """Test matched is None without a search."""
        from envy.terminal.highlighter import annotate

        result = annotate("/usr/bin", None, plain_palette)
        assert result.matched is None
        assert result.rendered == "/usr/bin"

    def test_search_found(self, plain_palette):
        """Test a substring hit marks the segment as matched."""
        from envy.terminal.highlighter import annotate

        result = annotate("/usr/local/bin", _search("local"), plain_palette)
        assert result.matched is True
        assert result.rendered == "/usr/local/bin"

    def test_search_not_found(self, plain_palette):
        """Test a miss marks the segment as unmatched."""
        from envy.terminal.highlighter import annotate

        assert annotate("/bin", _search("usr"), plain_palette).matched is False

    def test_every_occurrence_highlighted(self, color_palette):
        """Test each occurrence is wrapped and followed by the base style."""
        from envy.terminal.highlighter import annotate

        p = color_palette
        result = annotate("abab", _search("b"), p)
        restore = p.reset + p.value
        assert result.rendered == f"a{p.matched}b{restore}a{p.matched}b{restore}"

    def test_unmatched_segment_has_no_markup(self, color_palette):
        """Test nothing is inserted when the search misses."""
        from envy.terminal.highlighter import annotate

        assert annotate("abc", _search("z"), color_palette).rendered == "abc"

    def test_search_runs_on_escaped_text(self, plain_palette):
        """Test the expression sees escapes, not raw control characters."""
        from envy.terminal.highlighter import annotate

        assert annotate("a\tb", _search(r"\\t"), plain_palette).matched is True
        assert annotate("a\tb", _search("\t"), plain_palette).matched is False

    def test_style_tokens_are_never_matched(self, color_palette):
        """Test SGR parameters inside style tokens cannot be found."""
        from envy.terminal.highlighter import annotate

        # "36" is the special style's parameter
        assert annotate("a\tb", _search("36"), color_palette).matched is False

    def test_match_spanning_an_escape(self, color_palette):
        """Test a highlight may cover the visible text of an escape."""
        from envy.terminal.highlighter import annotate

        p = color_palette
        result = annotate("a\tb", _search(r"a\\tb"), p)
        restore = p.reset + p.value
        assert result.matched is True
        assert result.rendered == (
            f"{p.matched}a{restore}"
            f"{p.matched}{p.special}\\t{restore}"
            f"{p.matched}b{restore}"
        )

    def test_empty_match_counts_but_is_not_highlighted(self, color_palette):
        """Test a pattern matching the empty string matches without markup."""
        from envy.terminal.highlighter import annotate

        result = annotate("abc", _search("x*"), color_palette)
        assert result.matched is True
        assert result.rendered == "abc"

    def test_missing_keeps_missing_style_under_highlight(self, color_palette):
        """Test highlights restore the missing style for missing paths."""
        from envy.terminal.highlighter import annotate

        p = color_palette
        result = annotate("/nope", _search("no"), p, missing=True)
        assert result.rendered == f"/{p.matched}no{p.reset}{p.missing}pe"


def _segments(*flags):
    from envy.core.splitter import Segment
    from envy.terminal.highlighter import AnnotatedSegment

    return [
        AnnotatedSegment(Segment(f"s{i}", ":"), flag, None, f"s{i}")
        for i, flag in enumerate(flags)
    ]


class TestElision:
    """Tests for collapsing unmatched runs."""

    def test_all_unmatched_collapse_to_one_marker(self):
        """Test four unmatched segments give exactly one elision."""
        from envy.terminal.highlighter import Elision, elide_unmatched

        result = list(elide_unmatched(_segments(False, False, False, False), True))
        assert len(result) == 1
        assert isinstance(result[0], Elision)
        assert result[0].text == "..."

    def test_matches_split_runs(self):
        """Test every unmatched run gets its own marker."""
        from envy.terminal.highlighter import Elision, elide_unmatched

        segments = _segments(False, False, True, False, True, True, False, False)
        result = list(elide_unmatched(segments, True))
        kinds = ["..." if isinstance(item, Elision) else item.segment.content for item in result]
        assert kinds == ["...", "s2", "...", "s4", "s5", "..."]

    def test_no_search_resets_elision(self):
        """Test segments without a search result end a run."""
        from envy.terminal.highlighter import Elision, elide_unmatched

        result = list(elide_unmatched(_segments(False, None, False), True))
        assert [isinstance(item, Elision) for item in result] == [True, False, True]

    def test_disabled(self):
        """Test all segments pass through without only-matching mode."""
        from envy.terminal.highlighter import elide_unmatched

        segments = _segments(False, False, True)
        assert list(elide_unmatched(segments, False)) == segments

    @pytest.mark.parametrize("flags", [(True, True), (None, None)])
    def test_nothing_to_elide(self, flags):
        """Test matched and unsearched segments are kept."""
        from envy.terminal.highlighter import elide_unmatched

        segments = _segments(*flags)
        assert list(elide_unmatched(segments, True)) == segments
