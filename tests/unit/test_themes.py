"""Tests for kind palettes and derived Textual themes."""

import pytest
from textual.theme import Theme
from wikitheme.kinds import KIND_COLORS, ColorPair, ObjectKind
from wikitheme.themes import (
    CLASSIC_THEME_NAME,
    DEFAULT_PALETTE,
    DEFAULT_THEME_NAME,
    KIND_PALETTES,
    REGISTERED_THEMES,
    THEME_LABELS,
    KindPalette,
    get_palette,
)


class TestPalettes:
    """Tests for the palette table."""

    def test_default_is_classic(self) -> None:
        assert DEFAULT_THEME_NAME == CLASSIC_THEME_NAME
        assert DEFAULT_PALETTE.colors == dict(KIND_COLORS)

    @pytest.mark.parametrize("palette", KIND_PALETTES, ids=lambda p: p.theme_id)
    def test_every_palette_covers_every_kind(self, palette: KindPalette) -> None:
        for kind in ObjectKind:
            pair = palette.color_for(kind)
            assert pair.base != pair.hover

    def test_theme_ids_are_unique(self) -> None:
        ids = [palette.theme_id for palette in KIND_PALETTES]
        assert len(ids) == len(set(ids))

    def test_missing_kind_rejected(self) -> None:
        with pytest.raises(ValueError, match="no colours for: abstract"):
            KindPalette(
                name="Broken",
                theme_id="broken",
                background="#ffffff",
                foreground="#000000",
                nav_background="#eeeeee",
                link_text="#000000",
                colors={
                    ObjectKind.ATOM: ColorPair(base="#111111", hover="#222222"),
                    ObjectKind.RELATION: ColorPair(base="#333333", hover="#444444"),
                },
            )

    def test_bad_page_colour_rejected(self) -> None:
        with pytest.raises(ValueError, match="invalid background"):
            KindPalette(
                name="Broken",
                theme_id="broken",
                background="white-ish",
                foreground="#000000",
                nav_background="#eeeeee",
                link_text="#000000",
                colors=KIND_COLORS,
            )

    def test_palette_colours_cannot_be_mutated(self) -> None:
        with pytest.raises(TypeError):
            DEFAULT_PALETTE.colors[ObjectKind.ATOM] = ColorPair(base="#000000", hover="#ffffff")  # type: ignore[index]


class TestGetPalette:
    """Tests for get_palette."""

    @pytest.mark.parametrize("theme_id", list(THEME_LABELS))
    def test_known_ids(self, theme_id: str) -> None:
        assert get_palette(theme_id).theme_id == theme_id

    def test_unknown_id_falls_back(self) -> None:
        assert get_palette("no-such-theme") is DEFAULT_PALETTE

    def test_none_falls_back(self) -> None:
        assert get_palette(None) is DEFAULT_PALETTE


class TestRegisteredThemes:
    """Tests for the Textual themes built from palettes."""

    def test_one_theme_per_palette(self) -> None:
        assert [theme.name for theme in REGISTERED_THEMES] == [p.theme_id for p in KIND_PALETTES]
        assert all(isinstance(theme, Theme) for theme in REGISTERED_THEMES)

    def test_kind_variables(self) -> None:
        theme = REGISTERED_THEMES[0]
        palette = KIND_PALETTES[0]
        for kind in ObjectKind:
            assert theme.variables[kind.value] == palette.color_for(kind).base
            assert theme.variables[f"{kind.value}-hover"] == palette.color_for(kind).hover

    def test_labels(self) -> None:
        assert THEME_LABELS[CLASSIC_THEME_NAME] == "Classic"
