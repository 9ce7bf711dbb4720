# envy/terminal/renderer.py
"""
Turning an environment snapshot into printable lines.

For every variable whose name matches, the output is a header line
``NAME=``, one line per value segment and a blank line. Variables are
visited in name order.
"""

from typing import Any, Iterator, List, Mapping, Optional, Union

from ..core.paths import ExistsPredicate, check_missing, looks_like_path_list
from ..core.pattern import NamePattern, compile_name_pattern, compile_search_pattern
from ..core.splitter import SeparatorSplitter, get_splitter
from ..settings.config import EnvyOptions
from ..ui.colors import Palette
from ..utils.logger import get_logger
from ..utils.platform import path_exists, path_separators
from .highlighter import AnnotatedSegment, Elision, annotate, elide_unmatched, escape_specials


class EnvironmentRenderer:
    """
    Renders environment variables with a fixed set of options.

    Pattern and separator compilation happens in ``from_options``, so a
    configuration error surfaces before anything is rendered.
    """

    def __init__(
        self,
        name_pattern: NamePattern,
        splitter: SeparatorSplitter,
        palette: Palette,
        search: Optional[Any] = None,
        only_matching: bool = False,
        check_paths: bool = False,
        exists: ExistsPredicate = path_exists,
        path_chars: Optional[str] = None,
    ):
        self.logger = get_logger("envy.renderer")
        self.name_pattern = name_pattern
        self.splitter = splitter
        self.palette = palette
        self.search = search
        self.only_matching = only_matching
        self.check_paths = check_paths
        self.exists = exists
        self.path_chars = path_separators() if path_chars is None else path_chars

    @classmethod
    def from_options(cls, options: EnvyOptions, palette: Palette,
                     exists: ExistsPredicate = path_exists,
                     path_chars: Optional[str] = None) -> "EnvironmentRenderer":
        """
        Compile everything *options* describes.

        Raises:
            PatternError: If the name or search pattern is invalid.
            SeparatorError: If the separator set is unusable.
        """
        return cls(
            name_pattern=compile_name_pattern(
                options.pattern, options.use_regex, options.ignore_case
            ),
            splitter=get_splitter(options.separators),
            palette=palette,
            search=compile_search_pattern(options.search, options.ignore_case),
            only_matching=options.only_matching,
            check_paths=options.check_paths,
            exists=exists,
            path_chars=path_chars,
        )

    def header(self, name: str) -> str:
        p = self.palette
        return f"{p.variable}{escape_specials(name)}{p.reset}{p.separator}={p.reset}"

    def segment_line(self, item: Union[AnnotatedSegment, Elision]) -> str:
        p = self.palette
        if isinstance(item, Elision):
            return f"{p.markers(None, None)}{p.unmatched}{item.text}{p.reset}"
        return (
            f"{p.markers(item.matched, item.missing)}"
            f"{p.content_style(item.matched, item.missing)}{item.rendered}"
            f"{p.separator}{item.segment.separator}{p.reset}"
        )

    def annotate_value(self, value: str) -> List[AnnotatedSegment]:
        """Split *value* and annotate every segment."""
        has_path_separator = self.check_paths and looks_like_path_list(value, self.path_chars)
        annotated = []
        for segment in self.splitter.split(value):
            missing = check_missing(
                segment.content, self.check_paths, has_path_separator, self.exists
            )
            matched, rendered = annotate(segment.content, self.search, self.palette, missing)
            annotated.append(AnnotatedSegment(segment, matched, missing, rendered))
        return annotated

    def render_variable(self, name: str, value: str) -> Optional[List[str]]:
        """
        Render one variable, or return None when a search is active and no
        segment of the value matched it.
        """
        annotated = self.annotate_value(value)
        if self.search is not None and not any(item.matched for item in annotated):
            self.logger.debug(f"Search found nothing in {name}")
            return None

        lines = [self.header(name)]
        lines.extend(
            self.segment_line(item)
            for item in elide_unmatched(annotated, self.only_matching)
        )
        lines.append("")
        return lines

    def render(self, environ: Mapping[str, str]) -> Iterator[str]:
        """Yield the lines for every matching variable, in name order."""
        shown = 0
        for name in sorted(environ):
            if not self.name_pattern.matches(name):
                continue
            lines = self.render_variable(name, environ[name])
            if lines is None:
                continue
            shown += 1
            yield from lines
        self.logger.debug(f"Rendered {shown} of {len(environ)} variables")
