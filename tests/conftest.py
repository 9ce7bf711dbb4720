# tests/conftest.py
"""
Pytest configuration for Envy tests.

Puts src/ on the import path and provides palettes and a fake filesystem so
tests never depend on the host environment or terminal.
"""

import os
import sys

import pytest

# Add src directory to Python path
src_path = os.path.join(os.path.dirname(__file__), "..", "src")
sys.path.insert(0, src_path)


@pytest.fixture
def plain_palette():
    from envy.ui.colors import resolve_palette

    return resolve_palette(False)


@pytest.fixture
def color_palette():
    from envy.ui.colors import resolve_palette

    return resolve_palette(True)


@pytest.fixture
def fake_exists():
    """Existence predicate that knows only a handful of paths."""
    known = {"/bin", "/usr/bin", "/home/user"}
    return lambda path: path in known
