# envy/utils/platform.py
"""
Operating system collaborators.

Everything Envy needs from the host lives here so the core modules can be
driven by plain values in tests: the environment snapshot, the filesystem
existence predicate, the terminal probe and the platform defaults.
"""

import os
import sys
from typing import Dict, Mapping, Optional, TextIO

from .logger import get_logger

logger = get_logger("envy.platform")

WINDOWS_SEPARATORS = ":;,"
POSIX_SEPARATORS = ":,"


def is_windows() -> bool:
    return sys.platform == "win32"


def default_separators() -> str:
    """Return the characters that split composite values on this platform."""
    return WINDOWS_SEPARATORS if is_windows() else POSIX_SEPARATORS


def path_separators() -> str:
    """Return the characters whose presence makes a value look like a path."""
    return os.sep + (os.altsep or "")


def environment_snapshot(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Take a copy of the process environment (or of the given mapping)."""
    source = os.environ if environ is None else environ
    return dict(source)


def path_exists(path: str) -> bool:
    """Return whether *path* names an existing filesystem entry.

    Paths the OS refuses to stat (embedded NUL, name too long, permission
    problems) are reported as absent.
    """
    try:
        return os.path.exists(path)
    except (OSError, ValueError) as e:
        logger.debug(f"Existence check failed for {path!r}: {e}")
        return False


def is_terminal(stream: Optional[TextIO] = None) -> bool:
    """Return whether *stream* (stdout by default) is an interactive terminal."""
    stream = sys.stdout if stream is None else stream
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # closed stream
        return False
