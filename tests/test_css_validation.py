"""Tests for CSS validation."""

from pathlib import Path

import pytest
from textual.app import App
from wikitheme.app import WikiPreview
from wikitheme.widgets.kind_link import KindLink


class TestCSSValidation:
    """Tests for CSS file validation."""

    @pytest.fixture
    def styles_dir(self) -> Path:
        """Get the styles directory."""
        return Path(__file__).parent.parent / "wikitheme" / "styles"

    def test_all_css_files_parseable(self, styles_dir: Path) -> None:
        """Test that all CSS files in styles directory are parseable."""
        css_files = list(styles_dir.glob("*.tcss"))
        assert len(css_files) > 0, "Should have at least one CSS file"

        for css_file in css_files:

            class TestApp(App[None]):
                CSS_PATH = [css_file]  # noqa: RUF012

            app = TestApp()
            assert app is not None, f"Failed to parse {css_file.name}"

    def test_css_properties_are_valid(self, styles_dir: Path) -> None:
        """Test that CSS properties use valid values."""
        css_content = (styles_dir / "app.tcss").read_text()
        for pattern in ("align: top;", "align: bottom;", "align: center;"):
            assert pattern not in css_content, f"Found invalid CSS pattern: {pattern}"

    async def test_kind_link_css_in_widget(self) -> None:
        """Test that KindLink's DEFAULT_CSS resolves its theme variables."""

        class TestApp(App[None]):
            def get_theme_variable_defaults(self) -> dict[str, str]:
                return WikiPreview.THEME_VARIABLE_DEFAULTS

            def compose(self):
                yield KindLink("Joe", "atom")

        app = TestApp()
        async with app.run_test(size=(40, 5)):
            assert app.is_running

    async def test_app_starts_with_valid_css(self) -> None:
        """Test that the preview app starts successfully with its CSS."""
        app = WikiPreview()
        async with app.run_test(size=(80, 24)):
            assert app.is_running
            assert app.query_one("#page") is not None
