"""Integration tests for the preview application."""

from wikitheme.app import SAMPLE_PAGE, WikiPreview
from wikitheme.kinds import ObjectKind
from wikitheme.layout import layout
from wikitheme.settings import Settings
from wikitheme.themes import CLASSIC_THEME_NAME, NIGHT_THEME_NAME, SEPIA_THEME_NAME
from wikitheme.widgets.activity_log import ActivityLog
from wikitheme.widgets.kind_link import KindLink
from wikitheme.widgets.layout_view import LayoutView


class TestPreviewStartup:
    """Tests for app startup."""

    async def test_regions_are_mounted(self) -> None:
        app = WikiPreview(Settings())
        async with app.run_test(size=(120, 40)):
            assert app.is_running
            assert app.query_one("#nav", LayoutView).spec.flex_grow == 0
            assert app.query_one("#main", LayoutView).spec.flex_grow > 0
            assert app.query_one("#activity-log", ActivityLog) is not None

    async def test_links_of_every_kind(self) -> None:
        app = WikiPreview(Settings())
        async with app.run_test(size=(120, 40)):
            kinds = {link.kind for link in app.query(KindLink)}
            assert kinds == {*ObjectKind, None}

    async def test_theme_from_settings(self) -> None:
        app = WikiPreview(Settings(theme=SEPIA_THEME_NAME))
        async with app.run_test(size=(120, 40)):
            assert app.theme == SEPIA_THEME_NAME

    async def test_theme_argument_overrides_settings(self) -> None:
        app = WikiPreview(Settings(theme=SEPIA_THEME_NAME), theme_id=NIGHT_THEME_NAME)
        async with app.run_test(size=(120, 40)):
            assert app.theme == NIGHT_THEME_NAME

    def test_render_spec_uses_settings_metrics(self) -> None:
        settings = Settings(nav_width=320)
        app = WikiPreview(settings)
        assert app.render_spec == layout(SAMPLE_PAGE, settings.metrics())


class TestPreviewActions:
    """Tests for key bindings."""

    async def test_next_theme_cycles(self) -> None:
        app = WikiPreview(Settings())
        async with app.run_test(size=(120, 40)) as pilot:
            assert app.theme == CLASSIC_THEME_NAME
            await pilot.press("t")
            assert app.theme == NIGHT_THEME_NAME
            await pilot.press("t")
            await pilot.press("t")
            assert app.theme == CLASSIC_THEME_NAME

    async def test_theme_switch_recolours_links(self) -> None:
        app = WikiPreview(Settings())
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("t")
            await pilot.pause()
            atom = next(link for link in app.query(KindLink) if link.kind is ObjectKind.ATOM)
            night_atom = app.kind_palette.color_for(ObjectKind.ATOM).base
            assert atom.styles.background.hex.lower() == night_atom.lower()

    async def test_quit(self) -> None:
        app = WikiPreview(Settings())
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("q")
        assert app._log_sink_id is None


class TestPreviewActivityLog:
    """Tests for what the log pane shows."""

    @staticmethod
    def _log_text(app: WikiPreview) -> str:
        activity = app.query_one("#activity-log", ActivityLog)
        return "\n".join(line.text for line in activity.lines)

    async def test_unstyled_link_reported_at_info(self) -> None:
        app = WikiPreview(Settings(log_level="INFO"))
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.pause()
            assert "'draft'" in self._log_text(app)

    async def test_theme_switch_reported_at_info(self) -> None:
        app = WikiPreview(Settings(log_level="INFO"))
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("t")
            await pilot.pause()
            assert f"Switched to theme '{NIGHT_THEME_NAME}'" in self._log_text(app)

    async def test_default_level_hides_info(self) -> None:
        app = WikiPreview(Settings())
        async with app.run_test(size=(120, 40)) as pilot:
            await pilot.press("t")
            await pilot.pause()
            assert "Switched to theme" not in self._log_text(app)
