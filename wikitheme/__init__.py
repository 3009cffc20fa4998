"""Colours and layout directives for a browser-based wiki viewer."""

from wikitheme.kinds import KIND_COLORS, ColorPair, ObjectKind, classify, color_for, css_class_for
from wikitheme.layout import (
    DEFAULT_METRICS,
    HBox,
    LayoutMetrics,
    MainArea,
    NavRail,
    Page,
    RenderSpec,
    VBox,
    layout,
)
from wikitheme.stylesheet import build_stylesheet, inline_style
from wikitheme.themes import DEFAULT_PALETTE, KIND_PALETTES, KindPalette, get_palette

__all__ = [
    "DEFAULT_METRICS",
    "DEFAULT_PALETTE",
    "KIND_COLORS",
    "KIND_PALETTES",
    "ColorPair",
    "HBox",
    "KindPalette",
    "LayoutMetrics",
    "MainArea",
    "NavRail",
    "ObjectKind",
    "Page",
    "RenderSpec",
    "VBox",
    "build_stylesheet",
    "classify",
    "color_for",
    "css_class_for",
    "get_palette",
    "inline_style",
    "layout",
]
