"""Object kinds and their colour pairs.

Every linkable object in the wiki is one of three kinds. Each kind owns a
base fill colour and a hover fill colour. Labels coming from the rendering
layer are plain strings; unknown labels resolve to ``None`` so that the
element is rendered unstyled instead of failing.

Usage:
    from wikitheme.kinds import classify, color_for

    kind = classify("relation")
    if kind is not None:
        pair = color_for(kind)
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING

from textual.color import Color, ColorParseError

from wikitheme.logger import get_logger

if TYPE_CHECKING:
    from wikitheme.themes import KindPalette

logger = get_logger(__name__)


class ObjectKind(Enum):
    """Semantic category of a linkable wiki object."""

    ATOM = "atom"
    RELATION = "relation"
    ABSTRACT = "abstract"

    @property
    def css_class(self) -> str:
        """CSS class name carried by link elements of this kind."""
        return self.value


@dataclass(frozen=True)
class ColorPair:
    """Base and hover fill colours for one object kind.

    Both colours are hex strings like '#cde8f6'.
    """

    base: str
    hover: str

    def __post_init__(self) -> None:
        """Validate that both colours parse and differ.

        Raises:
            ValueError: If a colour is malformed or base equals hover.
        """
        try:
            base = Color.parse(self.base)
            hover = Color.parse(self.hover)
        except ColorParseError as exc:
            msg = f"Invalid colour in pair ({self.base!r}, {self.hover!r}): {exc}"
            raise ValueError(msg) from exc
        if base == hover:
            msg = f"Hover colour must differ from base colour {self.base!r}"
            raise ValueError(msg)


# Colours used by the classic wiki stylesheet
KIND_COLORS: Mapping[ObjectKind, ColorPair] = MappingProxyType(
    {
        ObjectKind.ATOM: ColorPair(base="#cde8f6", hover="#9cd0ec"),
        ObjectKind.RELATION: ColorPair(base="#f6e3c2", hover="#ecc88a"),
        ObjectKind.ABSTRACT: ColorPair(base="#e3d4f0", hover="#c6a8e0"),
    }
)


def color_for(kind: ObjectKind, palette: KindPalette | None = None) -> ColorPair:
    """Get the colour pair for an object kind.

    Args:
        kind: The object kind.
        palette: Palette to look up in (defaults to the classic colours).

    Returns:
        The kind's colour pair.
    """
    if palette is None:
        return KIND_COLORS[kind]
    return palette.color_for(kind)


def classify(tag: str | None) -> ObjectKind | None:
    """Parse an external label into an object kind.

    Surrounding whitespace and letter case are ignored.

    Args:
        tag: Label attached to a renderable element (e.g. 'atom').

    Returns:
        The matching ObjectKind, or None when the label is not a known kind.
    """
    if not tag:
        return None
    try:
        return ObjectKind(tag.strip().lower())
    except ValueError:
        logger.debug(f"Unknown object kind label {tag!r}, leaving unstyled")
        return None


def css_class_for(tag: str | None) -> str | None:
    """Get the CSS class to apply for a label.

    Args:
        tag: Label attached to a renderable element.

    Returns:
        Class name for known kinds, None for unknown labels.
    """
    kind = classify(tag)
    return kind.css_class if kind is not None else None
