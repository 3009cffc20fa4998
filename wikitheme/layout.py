"""Layout tree and the render specifications computed from it.

A view is described by a small declarative tree: a ``Page`` holding a
navigation rail and a main area side by side, each holding vertical and
horizontal boxes. ``layout`` turns such a tree into a ``RenderSpec`` tree
of flex weights, widths and margins that a rendering layer applies as-is.

Inside a box every child grows with the same weight and is separated from
the previous child by ``LayoutMetrics.box_spacing``. The first child never
receives a leading margin, so nested boxes do not stack spacing.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum


class Role(Enum):
    """Role of a computed node."""

    PAGE = "page"
    NAV = "nav"
    MAIN = "main"
    VBOX = "vbox"
    HBOX = "hbox"


class Direction(Enum):
    """Flow direction of a node's children."""

    ROW = "row"
    COLUMN = "column"


@dataclass(frozen=True)
class LayoutMetrics:
    """Sizes used by the layout, in rendering-layer units (px, cells)."""

    nav_width: int = 200
    main_margin: int = 8
    box_spacing: int = 8

    def __post_init__(self) -> None:
        """Reject negative or zero sizes.

        Raises:
            ValueError: If a size is out of range.
        """
        if self.nav_width <= 0:
            msg = f"nav_width must be positive, got {self.nav_width}"
            raise ValueError(msg)
        if self.main_margin < 0 or self.box_spacing < 0:
            msg = "main_margin and box_spacing must not be negative"
            raise ValueError(msg)


DEFAULT_METRICS = LayoutMetrics()


def _check_children(owner: str, children: Sequence[object]) -> tuple[BoxNode, ...]:
    """Validate that every child is a box.

    Args:
        owner: Name of the owning node type, for the error message.
        children: Candidate children.

    Returns:
        The children as a tuple.

    Raises:
        TypeError: If a child is not a VBox or HBox.
    """
    checked = tuple(children)
    for child in checked:
        if not isinstance(child, VBox | HBox):
            msg = f"{owner} children must be VBox or HBox, got {type(child).__name__}"
            raise TypeError(msg)
    return checked


@dataclass(frozen=True)
class VBox:
    """Box stacking its children top to bottom."""

    children: Sequence[BoxNode] = ()
    key: str | None = None

    def __post_init__(self) -> None:
        """Freeze and validate children."""
        object.__setattr__(self, "children", _check_children("VBox", self.children))


@dataclass(frozen=True)
class HBox:
    """Box laying its children out left to right."""

    children: Sequence[BoxNode] = ()
    key: str | None = None

    def __post_init__(self) -> None:
        """Freeze and validate children."""
        object.__setattr__(self, "children", _check_children("HBox", self.children))


@dataclass(frozen=True)
class NavRail:
    """Fixed-width navigation rail pinned to the leading edge."""

    children: Sequence[BoxNode] = ()
    key: str | None = "nav"

    def __post_init__(self) -> None:
        """Freeze and validate children."""
        object.__setattr__(self, "children", _check_children("NavRail", self.children))


@dataclass(frozen=True)
class MainArea:
    """Main content region filling the space left by the rail."""

    children: Sequence[BoxNode] = ()
    key: str | None = "main"

    def __post_init__(self) -> None:
        """Freeze and validate children."""
        object.__setattr__(self, "children", _check_children("MainArea", self.children))


@dataclass(frozen=True)
class Page:
    """Root of a view: a navigation rail and a main area side by side."""

    nav: NavRail = field(default_factory=NavRail)
    main: MainArea = field(default_factory=MainArea)
    key: str | None = "page"

    def __post_init__(self) -> None:
        """Check the sibling types.

        Raises:
            TypeError: If nav is not a NavRail or main is not a MainArea.
        """
        if not isinstance(self.nav, NavRail):
            msg = f"Page.nav must be a NavRail, got {type(self.nav).__name__}"
            raise TypeError(msg)
        if not isinstance(self.main, MainArea):
            msg = f"Page.main must be a MainArea, got {type(self.main).__name__}"
            raise TypeError(msg)


BoxNode = VBox | HBox
LayoutNode = Page | NavRail | MainArea | VBox | HBox


@dataclass(frozen=True)
class Edges:
    """Margins on the four edges of a node."""

    top: int = 0
    right: int = 0
    bottom: int = 0
    left: int = 0

    @classmethod
    def all(cls, value: int) -> Edges:
        """Create edges with the same value on every side."""
        return cls(value, value, value, value)


NO_EDGES = Edges()


@dataclass(frozen=True)
class RenderSpec:
    """Computed visual directives for one layout node and its children."""

    role: Role
    key: str | None = None
    flex_grow: int = 0
    width: int | None = None
    margin: Edges = NO_EDGES
    direction: Direction = Direction.COLUMN
    pinned: bool = False
    children: tuple[RenderSpec, ...] = ()

    def leading_margin(self, parent_direction: Direction) -> int:
        """Get the margin on the edge facing the previous sibling.

        Args:
            parent_direction: Flow direction of the enclosing node.

        Returns:
            The top margin in a column, the left margin in a row.
        """
        if parent_direction is Direction.ROW:
            return self.margin.left
        return self.margin.top

    def walk(self) -> Iterator[RenderSpec]:
        """Iterate over this spec and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()

    def find(self, key: str) -> RenderSpec | None:
        """Find the first spec with the given key.

        Args:
            key: Node key to look for.

        Returns:
            The matching spec or None.
        """
        for spec in self.walk():
            if spec.key == key:
                return spec
        return None


def layout(node: LayoutNode, metrics: LayoutMetrics = DEFAULT_METRICS) -> RenderSpec:
    """Compute the render specification for a layout tree.

    Args:
        node: Root of the tree to lay out.
        metrics: Sizes to use.

    Returns:
        The RenderSpec tree for the node.

    Raises:
        TypeError: If node is not a layout node.
    """
    if isinstance(node, Page):
        return RenderSpec(
            role=Role.PAGE,
            key=node.key,
            flex_grow=1,
            direction=Direction.ROW,
            children=(layout(node.nav, metrics), layout(node.main, metrics)),
        )
    if isinstance(node, NavRail):
        return RenderSpec(
            role=Role.NAV,
            key=node.key,
            flex_grow=0,
            width=metrics.nav_width,
            pinned=True,
            children=_stack(node.children, metrics),
        )
    if isinstance(node, MainArea):
        return RenderSpec(
            role=Role.MAIN,
            key=node.key,
            flex_grow=1,
            margin=Edges.all(metrics.main_margin),
            children=_stack(node.children, metrics),
        )
    if isinstance(node, VBox):
        return RenderSpec(
            role=Role.VBOX,
            key=node.key,
            direction=Direction.COLUMN,
            children=_spaced(node.children, Direction.COLUMN, metrics),
        )
    if isinstance(node, HBox):
        return RenderSpec(
            role=Role.HBOX,
            key=node.key,
            direction=Direction.ROW,
            children=_spaced(node.children, Direction.ROW, metrics),
        )
    msg = f"Cannot lay out {type(node).__name__}"
    raise TypeError(msg)


def _stack(children: Sequence[BoxNode], metrics: LayoutMetrics) -> tuple[RenderSpec, ...]:
    """Lay out rail or main-area children: equal weight, no spacing."""
    return tuple(_with_placement(layout(child, metrics), NO_EDGES) for child in children)


def _spaced(
    children: Sequence[BoxNode],
    direction: Direction,
    metrics: LayoutMetrics,
) -> tuple[RenderSpec, ...]:
    """Lay out box children with spacing before every child but the first.

    Args:
        children: Box children in order.
        direction: Flow direction of the owning box.
        metrics: Sizes to use.

    Returns:
        Child specs with equal weight and leading margins applied.
    """
    specs: list[RenderSpec] = []
    for index, child in enumerate(children):
        spacing = 0 if index == 0 else metrics.box_spacing
        margin = Edges(top=spacing) if direction is Direction.COLUMN else Edges(left=spacing)
        specs.append(_with_placement(layout(child, metrics), margin))
    return tuple(specs)


def _with_placement(spec: RenderSpec, margin: Edges) -> RenderSpec:
    """Return a copy of spec placed inside a container with weight 1."""
    return replace(spec, flex_grow=1, margin=margin)
