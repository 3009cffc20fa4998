"""Container widget that applies a computed RenderSpec in the terminal."""

from collections.abc import Mapping, Sequence

from textual.app import ComposeResult
from textual.containers import Container
from textual.widget import Widget

from wikitheme.layout import Direction, RenderSpec

# Terminal cells per stylesheet pixel unit
PX_PER_CELL = 8


def px_to_cells(value: int) -> int:
    """Convert a stylesheet size to terminal cells, keeping non-zero sizes visible.

    Args:
        value: Size in px.

    Returns:
        Size in cells.
    """
    if value <= 0:
        return 0
    return max(1, round(value / PX_PER_CELL))


class LayoutView(Container):
    """Container mirroring one node of a RenderSpec tree.

    Content widgets are attached by node key and placed before the node's
    child containers.
    """

    def __init__(
        self,
        spec: RenderSpec,
        content: Mapping[str, Sequence[Widget]] | None = None,
        *,
        parent_direction: Direction = Direction.ROW,
        id: str | None = None,
    ) -> None:
        """Initialize the LayoutView.

        Args:
            spec: Computed node to mirror.
            content: Widgets to mount inside nodes, keyed by node key.
            parent_direction: Flow direction of the enclosing container.
            id: The ID of the widget in the DOM (defaults to the node key).
        """
        super().__init__(id=id or spec.key, classes=spec.role.value)
        self.spec = spec
        self._content: Mapping[str, Sequence[Widget]] = content or {}
        self._parent_direction = parent_direction

    def compose(self) -> ComposeResult:
        """Create the node's content and child containers.

        Yields:
            Content widgets, then one LayoutView per child spec.
        """
        if self.spec.key is not None:
            yield from self._content.get(self.spec.key, ())
        for child in self.spec.children:
            yield LayoutView(child, self._content, parent_direction=self.spec.direction)

    def on_mount(self) -> None:
        """Apply the node's geometry as inline styles."""
        spec = self.spec
        styles = self.styles
        styles.layout = "horizontal" if spec.direction is Direction.ROW else "vertical"

        grow = f"{spec.flex_grow}fr" if spec.flex_grow > 0 else "auto"
        if self._parent_direction is Direction.ROW:
            styles.width = px_to_cells(spec.width) if spec.width is not None else grow
            styles.height = "1fr"
        else:
            styles.height = grow
            styles.width = "1fr"

        if spec.pinned:
            styles.dock = "left"

        margin = spec.margin
        styles.margin = (
            px_to_cells(margin.top),
            px_to_cells(margin.right),
            px_to_cells(margin.bottom),
            px_to_cells(margin.left),
        )
