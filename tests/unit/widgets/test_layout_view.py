"""Unit tests for the LayoutView widget."""

from textual.app import App
from textual.widgets import Static
from wikitheme.layout import HBox, LayoutMetrics, MainArea, NavRail, Page, VBox, layout
from wikitheme.widgets.layout_view import LayoutView, px_to_cells

PAGE = Page(
    nav=NavRail(children=(VBox(key="links"),)),
    main=MainArea(children=(HBox(key="row", children=(VBox(key="a"), VBox(key="b"), VBox(key="c"))),)),
)


class LayoutTestApp(App[None]):
    """Test app mounting a LayoutView for PAGE."""

    def __init__(self, metrics: LayoutMetrics) -> None:
        super().__init__()
        self.spec = layout(PAGE, metrics)

    def compose(self):
        """Create test app layout."""
        yield LayoutView(self.spec, {"a": [Static("first", id="content-a")]})


class TestPxToCells:
    """Tests for px_to_cells."""

    def test_zero(self) -> None:
        assert px_to_cells(0) == 0

    def test_small_sizes_stay_visible(self) -> None:
        assert px_to_cells(1) == 1

    def test_rounding(self) -> None:
        assert px_to_cells(200) == 25
        assert px_to_cells(8) == 1


class TestLayoutView:
    """Tests for LayoutView in a running app."""

    async def test_tree_mirrors_spec(self) -> None:
        app = LayoutTestApp(LayoutMetrics())
        async with app.run_test(size=(100, 30)):
            for key in ("page", "nav", "links", "main", "row", "a", "b", "c"):
                assert app.query_one(f"#{key}", LayoutView) is not None
            assert app.query_one("#content-a", Static).parent is app.query_one("#a", LayoutView)

    async def test_nav_width_and_first_child_margin(self) -> None:
        app = LayoutTestApp(LayoutMetrics(nav_width=160, box_spacing=16))
        async with app.run_test(size=(100, 30)) as pilot:
            await pilot.pause()
            nav = app.query_one("#nav", LayoutView)
            assert nav.styles.width is not None
            assert nav.styles.width.value == 20
            assert app.query_one("#a", LayoutView).styles.margin.left == 0
            assert app.query_one("#b", LayoutView).styles.margin.left == 2
            assert app.query_one("#c", LayoutView).styles.margin.left == 2

    async def test_main_area_is_wider_than_rail(self) -> None:
        app = LayoutTestApp(LayoutMetrics(nav_width=160))
        async with app.run_test(size=(100, 30)) as pilot:
            await pilot.pause()
            nav = app.query_one("#nav", LayoutView)
            main = app.query_one("#main", LayoutView)
            assert main.size.width > nav.size.width
