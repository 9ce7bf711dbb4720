# envy/settings/config.py
"""
Configuration constants and runtime options for Envy.

Options come from three places, in decreasing precedence: command-line
flags, ENVY_* environment variables and the compiled-in defaults below.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from ..utils.logger import get_logger
from ..utils.platform import default_separators


class AppConstants:
    """Application metadata."""

    APP_NAME = "envy"
    APP_VERSION = "1.1.0"
    APP_DESCRIPTION = (
        "Print environment variables matching a pattern, one value segment per line"
    )


class EnvVars:
    """Names of the environment variables Envy reads its own settings from."""

    COLORS = "ENVY_COLORS"
    SEPARATORS = "ENVY_SEP"

    # Single-slot overrides understood by the first Envy releases.
    LEGACY_SLOTS = {
        "ENVY_HEADER": "var",
        "ENVY_VALUE": "val",
        "ENVY_SPECIAL": "spe",
        "ENVY_SEPARATOR": "sep",
    }


# SGR parameters for each palette slot, keyed by their override names.
DEFAULT_COLORS: Dict[str, str] = {
    "var": "1",
    "val": "",
    "mat": "1;33",
    "unm": "2",
    "mis": "31",
    "spe": "36",
    "sep": "38;5;242",
}
RESET_CODE = "0"

STYLE_KEYS = tuple(DEFAULT_COLORS)


class ColorMode(Enum):
    """When to emit ANSI styling."""
    ALWAYS = "always"
    NEVER = "never"
    AUTO = "auto"


@dataclass(frozen=True)
class EnvyOptions:
    """Everything one invocation needs, resolved to plain values."""

    pattern: str = ""
    use_regex: bool = False
    ignore_case: bool = False
    search: Optional[str] = None
    only_matching: bool = False
    check_paths: bool = False
    color: ColorMode = ColorMode.AUTO
    colors: str = ""
    legacy_colors: Dict[str, str] = field(default_factory=dict)
    separators: str = field(default_factory=default_separators)

    @classmethod
    def from_args(cls, args: Any, environ: Mapping[str, str]) -> "EnvyOptions":
        """
        Build options from a parsed argparse namespace and an environment.

        Args:
            args: Namespace produced by the CLI parser
            environ: Environment snapshot the ENVY_* settings are read from

        Returns:
            EnvyOptions instance
        """
        logger = get_logger("envy.config")

        colors = args.colors if args.colors is not None else environ.get(EnvVars.COLORS, "")
        separators = args.separators
        if separators is None:
            separators = environ.get(EnvVars.SEPARATORS)
            if separators is None:
                separators = default_separators()
            else:
                logger.debug(f"Separators from {EnvVars.SEPARATORS}: {separators!r}")

        legacy_colors = {
            key: environ[name]
            for name, key in EnvVars.LEGACY_SLOTS.items()
            if name in environ
        }

        options = cls(
            pattern=args.pattern or "",
            use_regex=args.regex,
            ignore_case=args.ignore_case,
            search=args.search or None,
            only_matching=args.only_matching,
            check_paths=args.check_paths,
            color=ColorMode(args.color),
            colors=colors,
            legacy_colors=legacy_colors,
            separators=separators,
        )
        logger.debug(f"Resolved options: {options}")
        return options
