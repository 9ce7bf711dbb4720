# tests/test_paths.py
"""
Tests for path existence checks and the host collaborators.
"""

import os
import sys

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))


class TestCheckMissing:
    """Tests for check_missing."""

    def test_disabled(self, fake_exists):
        """Test nothing is checked when the feature is off."""
        from envy.core.paths import check_missing

        assert check_missing("/nope", False, True, fake_exists) is None

    def test_value_without_path_separator(self, fake_exists):
        """Test values that do not look like paths are skipped."""
        from envy.core.paths import check_missing

        assert check_missing("en_US.UTF-8", True, False, fake_exists) is None

    def test_missing_and_present(self, fake_exists):
        """Test the predicate decides the result."""
        from envy.core.paths import check_missing

        assert check_missing("/nope", True, True, fake_exists) is True
        assert check_missing("/bin", True, True, fake_exists) is False

    def test_empty_segment_not_checked(self, fake_exists):
        """Test empty segments are never reported missing."""
        from envy.core.paths import check_missing

        assert check_missing("", True, True, fake_exists) is None

    def test_predicate_receives_raw_content(self):
        """Test control characters reach the predicate unescaped."""
        from envy.core.paths import check_missing

        seen = []
        check_missing("/tmp/a\tb", True, True, lambda p: seen.append(p) or True)
        assert seen == ["/tmp/a\tb"]

    def test_looks_like_path_list(self):
        """Test the separator heuristic."""
        from envy.core.paths import looks_like_path_list

        assert looks_like_path_list("/bin:/usr/bin", "/")
        assert not looks_like_path_list("a:b", "/")


class TestPlatform:
    """Tests for host collaborators."""

    def test_path_exists(self, tmp_path):
        """Test the real existence predicate."""
        from envy.utils.platform import path_exists

        assert path_exists(str(tmp_path)) is True
        assert path_exists(str(tmp_path / "missing")) is False

    def test_path_exists_rejects_nul(self):
        """Test unstat-able paths count as absent."""
        from envy.utils.platform import path_exists

        assert path_exists("/tmp/\x00bad") is False

    def test_environment_snapshot_is_a_copy(self):
        """Test the snapshot is detached from its source."""
        from envy.utils.platform import environment_snapshot

        source = {"A": "1"}
        snapshot = environment_snapshot(source)
        source["B"] = "2"
        assert snapshot == {"A": "1"}

    def test_is_terminal(self):
        """Test the probe on streams with and without isatty."""
        import io

        from envy.utils.platform import is_terminal

        class FakeTTY(io.StringIO):
            def isatty(self):
                return True

        assert is_terminal(io.StringIO()) is False
        assert is_terminal(FakeTTY()) is True
        assert is_terminal(object()) is False

    def test_default_separators(self, monkeypatch):
        """Test Windows adds the semicolon."""
        from envy.utils import platform

        monkeypatch.setattr(platform.sys, "platform", "win32")
        assert platform.default_separators() == ":;,"
        monkeypatch.setattr(platform.sys, "platform", "linux")
        assert platform.default_separators() == ":,"
