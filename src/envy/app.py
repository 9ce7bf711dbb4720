# envy/app.py
"""The Envy application: options and collaborators in, lines out."""

import sys
from typing import Callable, Mapping, Optional, TextIO

from .core.paths import ExistsPredicate
from .settings.config import EnvyOptions
from .terminal.renderer import EnvironmentRenderer
from .ui.colors import Palette, parse_style_overrides, resolve_color_mode, resolve_palette
from .utils.logger import get_logger
from .utils.platform import environment_snapshot, is_terminal, path_exists


class EnvyApp:
    """
    One invocation of Envy.

    Collaborators default to the real host (os.environ, os.path.exists,
    isatty on the output stream) and can be replaced for tests.
    """

    def __init__(
        self,
        options: EnvyOptions,
        environ: Optional[Mapping[str, str]] = None,
        stdout: Optional[TextIO] = None,
        exists: ExistsPredicate = path_exists,
        terminal_probe: Optional[Callable[[], bool]] = None,
    ):
        self.logger = get_logger("envy.app")
        self.options = options
        self.environ = environment_snapshot(environ)
        self.stdout = sys.stdout if stdout is None else stdout
        self.exists = exists
        self.terminal_probe = terminal_probe or (lambda: is_terminal(self.stdout))

    def build_palette(self) -> Palette:
        use_color = resolve_color_mode(self.options.color, self.terminal_probe)
        overrides = dict(self.options.legacy_colors)
        overrides.update(parse_style_overrides(self.options.colors))
        self.logger.debug(f"Color {'enabled' if use_color else 'disabled'}, overrides: {overrides}")
        return resolve_palette(use_color, overrides)

    def run(self) -> int:
        """
        Render the environment to the output stream.

        Raises:
            ConfigError: If a pattern or the separator set is invalid. Nothing
                has been written when this is raised.
        """
        renderer = EnvironmentRenderer.from_options(
            self.options, self.build_palette(), self.exists
        )
        for line in renderer.render(self.environ):
            self.stdout.write(line + "\n")
        self.stdout.flush()
        return 0
