"""Kind palettes and the Textual themes derived from them."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from textual.color import Color, ColorParseError
from textual.theme import Theme

from wikitheme.kinds import KIND_COLORS, ColorPair, ObjectKind
from wikitheme.logger import get_logger

logger = get_logger(__name__)

CLASSIC_THEME_NAME = "classic"
NIGHT_THEME_NAME = "night"
SEPIA_THEME_NAME = "sepia"

DEFAULT_THEME_NAME = CLASSIC_THEME_NAME


@dataclass(frozen=True)
class KindPalette:
    """Page colours plus one colour pair per object kind."""

    name: str
    theme_id: str
    background: str
    foreground: str
    nav_background: str
    link_text: str
    colors: Mapping[ObjectKind, ColorPair]
    dark: bool = False

    def __post_init__(self) -> None:
        """Check that every kind is covered and page colours parse.

        Raises:
            ValueError: If a kind has no colour pair or a colour is malformed.
        """
        missing = [kind.value for kind in ObjectKind if kind not in self.colors]
        if missing:
            msg = f"Palette {self.theme_id!r} has no colours for: {', '.join(missing)}"
            raise ValueError(msg)
        for field_name in ("background", "foreground", "nav_background", "link_text"):
            value = getattr(self, field_name)
            try:
                Color.parse(value)
            except ColorParseError as exc:
                msg = f"Palette {self.theme_id!r} has invalid {field_name} {value!r}"
                raise ValueError(msg) from exc
        object.__setattr__(self, "colors", MappingProxyType(dict(self.colors)))

    def color_for(self, kind: ObjectKind) -> ColorPair:
        """Get the colour pair for a kind in this palette.

        Args:
            kind: The object kind.

        Returns:
            The kind's colour pair.
        """
        return self.colors[kind]


KIND_PALETTES = (
    KindPalette(
        name="Classic",
        theme_id=CLASSIC_THEME_NAME,
        background="#ffffff",
        foreground="#1f2328",
        nav_background="#f3f4f6",
        link_text="#1f2328",
        colors=KIND_COLORS,
    ),
    KindPalette(
        name="Night",
        theme_id=NIGHT_THEME_NAME,
        background="#16181d",
        foreground="#d8dee9",
        nav_background="#1e2128",
        link_text="#eceff4",
        colors={
            ObjectKind.ATOM: ColorPair(base="#25465a", hover="#356886"),
            ObjectKind.RELATION: ColorPair(base="#5a4425", hover="#86653a"),
            ObjectKind.ABSTRACT: ColorPair(base="#46305a", hover="#684a86"),
        },
        dark=True,
    ),
    KindPalette(
        name="Sepia",
        theme_id=SEPIA_THEME_NAME,
        background="#f8f1e3",
        foreground="#3b3024",
        nav_background="#efe3cc",
        link_text="#3b3024",
        colors={
            ObjectKind.ATOM: ColorPair(base="#d9e4d0", hover="#b7cca6"),
            ObjectKind.RELATION: ColorPair(base="#ecd3b0", hover="#ddb47c"),
            ObjectKind.ABSTRACT: ColorPair(base="#e0cfd8", hover="#c9a9ba"),
        },
    ),
)

_PALETTES_BY_ID: dict[str, KindPalette] = {palette.theme_id: palette for palette in KIND_PALETTES}

DEFAULT_PALETTE = _PALETTES_BY_ID[DEFAULT_THEME_NAME]


def get_palette(theme_id: str | None) -> KindPalette:
    """Look up a palette by id.

    Args:
        theme_id: Palette id, e.g. 'classic'.

    Returns:
        The palette, or the default palette when the id is unknown.
    """
    if theme_id is None:
        return DEFAULT_PALETTE
    palette = _PALETTES_BY_ID.get(theme_id)
    if palette is None:
        logger.warning(f"Unknown theme {theme_id!r}, using {DEFAULT_THEME_NAME!r}")
        return DEFAULT_PALETTE
    return palette


def _theme_from_palette(palette: KindPalette) -> Theme:
    """Build a Textual Theme from a kind palette.

    Args:
        palette: Kind palette data.

    Returns:
        A Textual Theme instance.
    """
    atom = palette.color_for(ObjectKind.ATOM)
    relation = palette.color_for(ObjectKind.RELATION)
    abstract = palette.color_for(ObjectKind.ABSTRACT)

    return Theme(
        name=palette.theme_id,
        primary=atom.hover,
        secondary=abstract.hover,
        accent=relation.hover,
        foreground=palette.foreground,
        background=palette.background,
        surface=palette.background,
        panel=palette.nav_background,
        dark=palette.dark,
        variables={
            "atom": atom.base,
            "atom-hover": atom.hover,
            "relation": relation.base,
            "relation-hover": relation.hover,
            "abstract": abstract.base,
            "abstract-hover": abstract.hover,
            "nav-background": palette.nav_background,
            "link-text": palette.link_text,
        },
    )


REGISTERED_THEMES = tuple(_theme_from_palette(palette) for palette in KIND_PALETTES)

THEME_LABELS: dict[str, str] = {palette.theme_id: palette.name for palette in KIND_PALETTES}
