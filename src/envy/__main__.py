# envy/__main__.py

import argparse
import os
import sys
from typing import List, Mapping, Optional

from .app import EnvyApp
from .settings.config import AppConstants, ColorMode, EnvVars, EnvyOptions
from .utils.exceptions import ConfigError, handle_exception
from .utils.logger import enable_debug_mode, get_logger, set_console_level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=AppConstants.APP_NAME,
        description=AppConstants.APP_DESCRIPTION,
        epilog=(
            f"Styles can be overridden with {EnvVars.COLORS}, a colon-separated list of "
            "key=SGR entries (keys: var, val, mat, unm, mis, spe, sep). "
            f"Separator characters can be set with {EnvVars.SEPARATORS}."
        ),
    )
    parser.add_argument(
        "--version", "-V", action="version",
        version=f"%(prog)s {AppConstants.APP_VERSION}",
    )
    parser.add_argument(
        "pattern",
        metavar="PATTERN",
        nargs="?",
        default="",
        help="Glob matched against variable names (default: all variables)",
    )
    parser.add_argument(
        "--regex", "-r", action="store_true",
        help="Treat PATTERN as a regular expression searched for in the name",
    )
    parser.add_argument(
        "--ignore-case", "-i", action="store_true",
        help="Case-insensitive regular expression and value search",
    )
    parser.add_argument(
        "--search", "-s", metavar="REGEX",
        help="Only show variables whose value matches REGEX, highlighting matches",
    )
    parser.add_argument(
        "--only-matching", "-o", action="store_true",
        help="Collapse value segments that do not match --search into '...'",
    )
    parser.add_argument(
        "--check-paths", "-p", action="store_true",
        help="Flag path segments that do not exist",
    )
    parser.add_argument(
        "--color", "-c",
        metavar="WHEN",
        nargs="?",
        choices=[mode.value for mode in ColorMode],
        const=ColorMode.ALWAYS.value,
        default=ColorMode.AUTO.value,
        help="Colorize output: never, always or auto (default: auto). "
             "Write --color=WHEN, or put -c after PATTERN",
    )
    parser.add_argument(
        "--colors", metavar="LIST",
        help=f"Style overrides, same format as {EnvVars.COLORS}",
    )
    parser.add_argument(
        "--separators", metavar="CHARS",
        help=f"Characters that split values (default: {EnvVars.SEPARATORS} or the platform default)",
    )
    parser.add_argument(
        "--debug", "-d", action="store_true", help="Enable debug logging on stderr"
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level",
    )
    return parser


def _silence_stdout():
    """Point stdout at devnull so the interpreter does not fail flushing it."""
    try:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
    except (OSError, ValueError):
        pass


def main(argv: Optional[List[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    """Main entry point for the application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        enable_debug_mode()
    elif args.log_level:
        set_console_level(args.log_level)

    logger = get_logger("envy.main")
    environ = os.environ if environ is None else environ

    try:
        options = EnvyOptions.from_args(args, environ)
        return EnvyApp(options, environ=environ).run()
    except ConfigError as e:
        logger.debug(f"Configuration error: {e}")
        print(f"{AppConstants.APP_NAME}: error: {e.user_message}", file=sys.stderr)
        return 1
    except BrokenPipeError:
        logger.debug("Output closed early")
        _silence_stdout()
        return 0
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130
    except Exception as e:
        error = handle_exception(e, "envy.main", "envy.main")
        print(f"{AppConstants.APP_NAME}: error: {error.user_message}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
