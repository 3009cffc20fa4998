"""Terminal preview of the wiki theme and the command line interface."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import ClassVar

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table
from textual.app import App, ComposeResult
from textual.widget import Widget
from textual.widgets import Footer, Header, Static

from wikitheme.kinds import ObjectKind
from wikitheme.layout import HBox, MainArea, NavRail, Page, RenderSpec, VBox, layout
from wikitheme.logger import add_tui_sink, get_logger, remove_tui_sink
from wikitheme.settings import Settings, load_settings
from wikitheme.stylesheet import build_stylesheet, render_dot_graph
from wikitheme.themes import DEFAULT_PALETTE, REGISTERED_THEMES, THEME_LABELS, KindPalette, get_palette
from wikitheme.widgets.activity_log import ActivityLog
from wikitheme.widgets.kind_link import KindLink
from wikitheme.widgets.layout_view import LayoutView

logger = get_logger(__name__)

# Path to styles directory
STYLES_DIR = Path(__file__).parent / "styles"

SAMPLE_PAGE = Page(
    nav=NavRail(children=(VBox(key="nav-links"),)),
    main=MainArea(
        children=(
            HBox(
                key="kinds",
                children=(VBox(key="atoms"), VBox(key="relations"), VBox(key="abstracts")),
            ),
            VBox(key="unstyled"),
        )
    ),
)


def _sample_content() -> dict[str, list[Widget]]:
    """Create the widgets shown in the sample page, keyed by layout node."""
    return {
        "nav-links": [
            Static("Browse", classes="section-title"),
            KindLink("Atoms", "atom"),
            KindLink("Relations", "relation"),
            KindLink("Abstracts", "abstract"),
        ],
        "atoms": [
            Static("Atoms", classes="section-title"),
            KindLink("Personnage", "atom"),
            KindLink("PJ", "atom"),
            KindLink("Joe", "atom"),
            KindLink("Alice", "atom"),
        ],
        "relations": [
            Static("Relations", classes="section-title"),
            KindLink("Joe -> PJ", "relation"),
            KindLink("Alice -> PNJ", "relation"),
            KindLink("Ami de", "relation"),
        ],
        "abstracts": [
            Static("Abstracts", classes="section-title"),
            KindLink("#12", "abstract"),
            KindLink("#27", "abstract"),
        ],
        "unstyled": [
            Static("Unknown kind", classes="section-title"),
            KindLink("Draft note", "draft"),
        ],
    }


def _theme_variable_defaults(palette: KindPalette) -> dict[str, str]:
    """Get values for the custom theme variables used by the widgets."""
    variables = {"nav-background": palette.nav_background, "link-text": palette.link_text}
    for kind in ObjectKind:
        pair = palette.color_for(kind)
        variables[kind.css_class] = pair.base
        variables[f"{kind.css_class}-hover"] = pair.hover
    return variables


class WikiPreview(App[None]):
    """Textual app previewing kind colours and the page layout."""

    ENABLE_COMMAND_PALETTE = False
    CSS_PATH: ClassVar[list[Path]] = [STYLES_DIR / "app.tcss"]
    BINDINGS: ClassVar[tuple[tuple[str, str, str], ...]] = (
        ("q", "quit", "Quit"),
        ("t", "next_theme", "Next Theme"),
    )
    THEME_VARIABLE_DEFAULTS: ClassVar[dict[str, str]] = _theme_variable_defaults(DEFAULT_PALETTE)

    def __init__(self, settings: Settings | None = None, theme_id: str | None = None) -> None:
        """Initialize the preview app.

        Args:
            settings: Settings to use (loaded from disk when None).
            theme_id: Palette id overriding the settings theme.
        """
        super().__init__()
        self.wiki_settings = settings if settings is not None else load_settings()
        self.kind_palette = get_palette(theme_id or self.wiki_settings.theme)
        self.render_spec: RenderSpec = layout(SAMPLE_PAGE, self.wiki_settings.metrics())
        self._log_sink_id: int | None = None
        logger.info(f"Initializing preview with theme {self.kind_palette.theme_id!r}")

    def get_theme_variable_defaults(self) -> dict[str, str]:
        """Return defaults for the kind colour variables."""
        return self.THEME_VARIABLE_DEFAULTS

    def compose(self) -> ComposeResult:
        """Create the UI layout.

        Yields:
            The widgets that make up the application UI.
        """
        yield Header()
        yield LayoutView(self.render_spec, _sample_content())
        yield ActivityLog(id="activity-log")
        yield Footer()

    def on_mount(self) -> None:
        """Register the palettes and attach the activity log."""
        for theme in REGISTERED_THEMES:
            self.register_theme(theme)
        self.theme = self.kind_palette.theme_id
        self.title = f"wikitheme - {self.kind_palette.name}"

        activity_log = self.query_one("#activity-log", ActivityLog)
        self._log_sink_id = add_tui_sink(activity_log.sink, level=self.wiki_settings.log_level)
        for link in self.query(KindLink):
            if not link.is_styled:
                logger.info(f"Unknown kind {link.tag!r}, link shown unstyled")
        logger.info(f"Preview mounted with theme {self.kind_palette.theme_id!r}")

    def action_next_theme(self) -> None:
        """Switch to the next registered palette."""
        theme_ids = list(THEME_LABELS)
        index = theme_ids.index(self.kind_palette.theme_id)
        self.kind_palette = get_palette(theme_ids[(index + 1) % len(theme_ids)])
        self.theme = self.kind_palette.theme_id
        self.title = f"wikitheme - {self.kind_palette.name}"
        logger.info(f"Switched to theme {self.kind_palette.theme_id!r}")

    async def action_quit(self) -> None:
        """Quit the application."""
        logger.info("Quitting preview")
        if self._log_sink_id is not None:
            remove_tui_sink(self._log_sink_id)
            self._log_sink_id = None
        self.exit()


def _build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(prog="wikitheme", description="Wiki viewer theme and layout tools.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    css_parser = subparsers.add_parser("css", help="Print or write the stylesheet")
    css_parser.add_argument("--theme", choices=sorted(THEME_LABELS), help="Palette to use")
    css_parser.add_argument("--output", "-o", type=Path, help="Write to this file instead of stdout")

    swatches_parser = subparsers.add_parser("swatches", help="Show the kind colours")
    swatches_parser.add_argument("--theme", choices=sorted(THEME_LABELS), help="Palette to use")

    dot_parser = subparsers.add_parser("dot", help="Print objects as a Graphviz graph")
    dot_parser.add_argument(
        "objects",
        nargs="*",
        metavar="LABEL:KIND",
        help="Objects to draw (defaults to one node per kind)",
    )
    dot_parser.add_argument("--theme", choices=sorted(THEME_LABELS), help="Palette to use")
    dot_parser.add_argument("--output", "-o", type=Path, help="Write to this file instead of stdout")

    preview_parser = subparsers.add_parser("preview", help="Open the terminal preview")
    preview_parser.add_argument("--theme", choices=sorted(THEME_LABELS), help="Palette to use")
    return parser


def write_stylesheet(settings: Settings, theme_id: str | None, output: Path | None, console: Console) -> None:
    """Render the stylesheet and write it to a file or the console.

    Args:
        settings: Settings providing defaults.
        theme_id: Palette id overriding the settings theme.
        output: Target file, or None for the console.
        console: Console used for terminal output.
    """
    palette = get_palette(theme_id or settings.theme)
    css = build_stylesheet(palette, settings.metrics())
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(css, encoding="utf-8")
        logger.info(f"Wrote stylesheet for {palette.theme_id!r} to {output}")
        return
    if console.is_terminal:
        console.print(Syntax(css, "css", theme="ansi_dark" if palette.dark else "ansi_light"))
    else:
        console.file.write(css)


def parse_object(text: str) -> tuple[str, str | None]:
    """Split a 'LABEL:KIND' argument into its label and kind label.

    Args:
        text: Command line argument, e.g. 'Joe:atom'.

    Returns:
        The label and the kind label (None when there is no ':').
    """
    label, sep, tag = text.rpartition(":")
    if not sep:
        return text, None
    return label, tag


def write_dot(objects: Sequence[str], palette: KindPalette, output: Path | None, console: Console) -> None:
    """Render objects as DOT and write them to a file or the console.

    Args:
        objects: 'LABEL:KIND' arguments; empty for a legend of every kind.
        palette: Colour palette.
        output: Target file, or None for the console.
        console: Console used for terminal output.
    """
    if objects:
        nodes = [parse_object(text) for text in objects]
    else:
        nodes = [(kind.value, kind.value) for kind in ObjectKind]
    dot = render_dot_graph(nodes, palette)
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(dot, encoding="utf-8")
        logger.info(f"Wrote {len(nodes)} objects as DOT to {output}")
        return
    console.file.write(dot)


def swatch_table(palette: KindPalette) -> Table:
    """Build a table of the palette's kind colours.

    Args:
        palette: Palette to show.

    Returns:
        A rich Table with one row per kind.
    """
    table = Table(title=f"{palette.name} kind colours")
    table.add_column("Kind")
    table.add_column("Base")
    table.add_column("Hover")
    for kind in ObjectKind:
        pair = palette.color_for(kind)
        table.add_row(
            kind.value,
            f"[on {pair.base}]  [/] {pair.base}",
            f"[on {pair.hover}]  [/] {pair.hover}",
        )
    return table


def main(argv: Sequence[str] | None = None) -> None:
    """Run the wikitheme command line.

    Args:
        argv: Arguments (defaults to sys.argv[1:]).
    """
    args = _build_parser().parse_args(argv)
    settings = load_settings()
    console = Console(file=sys.stdout)
    logger.info(f"Running command {args.command!r}")

    if args.command == "css":
        write_stylesheet(settings, args.theme, args.output, console)
    elif args.command == "swatches":
        console.print(swatch_table(get_palette(args.theme or settings.theme)))
    elif args.command == "dot":
        write_dot(args.objects, get_palette(args.theme or settings.theme), args.output, console)
    elif args.command == "preview":
        WikiPreview(settings, args.theme).run()
        logger.info("Preview exited")
