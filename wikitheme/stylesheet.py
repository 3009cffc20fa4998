"""Render kind colours and layout directives as browser-facing text.

Three outputs are produced:
- a complete CSS stylesheet for the wiki pages,
- inline style declarations for a single computed RenderSpec,
- Graphviz DOT node attributes and whole-graph exports.
"""

from __future__ import annotations

from collections.abc import Sequence

from wikitheme.kinds import ObjectKind, classify
from wikitheme.layout import DEFAULT_METRICS, Direction, LayoutMetrics, RenderSpec, Role
from wikitheme.logger import get_logger
from wikitheme.themes import DEFAULT_PALETTE, KindPalette

logger = get_logger(__name__)

# Graphviz shapes per kind
DOT_SHAPES: dict[ObjectKind, str] = {
    ObjectKind.ATOM: "box",
    ObjectKind.RELATION: "diamond",
    ObjectKind.ABSTRACT: "ellipse",
}


def _rule(selector: str, declarations: dict[str, str]) -> str:
    """Format one CSS rule.

    Args:
        selector: CSS selector.
        declarations: Property/value pairs in output order.

    Returns:
        The rule text, without a trailing newline.
    """
    body = "\n".join(f"    {prop}: {value};" for prop, value in declarations.items())
    return f"{selector} {{\n{body}\n}}"


def render_kind_rules(palette: KindPalette = DEFAULT_PALETTE) -> str:
    """Render background and hover rules for every object kind.

    Args:
        palette: Palette providing the colour pairs.

    Returns:
        CSS text.
    """
    rules: list[str] = []
    for kind in ObjectKind:
        pair = palette.color_for(kind)
        rules.append(_rule(f".{kind.css_class}", {"background-color": pair.base}))
        rules.append(_rule(f".{kind.css_class}:hover", {"background-color": pair.hover}))
    return "\n\n".join(rules)


def render_layout_rules(metrics: LayoutMetrics = DEFAULT_METRICS) -> str:
    """Render the page, rail, main area and box rules.

    The box rules mirror ``layout``: children grow equally and every child
    except the first gets a leading margin.

    Args:
        metrics: Sizes to use.

    Returns:
        CSS text.
    """
    spacing = f"{metrics.box_spacing}px"
    rules = [
        _rule(
            ".page",
            {"display": "flex", "flex-direction": "row", "min-height": "100vh"},
        ),
        _rule(
            "nav",
            {
                "flex": f"0 0 {metrics.nav_width}px",
                "width": f"{metrics.nav_width}px",
                "position": "sticky",
                "top": "0",
                "align-self": "flex-start",
                "height": "100vh",
                "overflow-y": "auto",
            },
        ),
        _rule("main", {"flex": "1 1 0", "margin": f"{metrics.main_margin}px", "min-width": "0"}),
        _rule(".vbox", {"display": "flex", "flex-direction": "column"}),
        _rule(".hbox", {"display": "flex", "flex-direction": "row"}),
        _rule(".vbox > *, .hbox > *", {"flex": "1 1 0"}),
        _rule(".vbox > *", {"margin-top": spacing}),
        _rule(".hbox > *", {"margin-left": spacing}),
        _rule(".vbox > :first-child", {"margin-top": "0"}),
        _rule(".hbox > :first-child", {"margin-left": "0"}),
    ]
    return "\n\n".join(rules)


def build_stylesheet(
    palette: KindPalette = DEFAULT_PALETTE,
    metrics: LayoutMetrics = DEFAULT_METRICS,
) -> str:
    """Build the complete stylesheet for the wiki viewer.

    Args:
        palette: Colour palette.
        metrics: Layout sizes.

    Returns:
        CSS text ending with a newline.
    """
    logger.debug(f"Building stylesheet for theme {palette.theme_id!r} with {metrics}")
    nav_background = _rule("nav", {"background-color": palette.nav_background})
    body = _rule(
        "body",
        {
            "margin": "0",
            "background-color": palette.background,
            "color": palette.foreground,
        },
    )
    links = _rule("a.atom, a.relation, a.abstract", {"color": palette.link_text, "text-decoration": "none"})
    sections = [
        f"/* wikitheme: {palette.name} */",
        body,
        render_layout_rules(metrics),
        nav_background,
        links,
        render_kind_rules(palette),
    ]
    return "\n\n".join(sections) + "\n"


def style_declarations(spec: RenderSpec) -> dict[str, str]:
    """Get CSS declarations for one computed node.

    Args:
        spec: Computed node.

    Returns:
        Property/value pairs, suitable for an inline style attribute.
    """
    declarations: dict[str, str] = {}
    if spec.children or spec.role in (Role.PAGE, Role.VBOX, Role.HBOX):
        declarations["display"] = "flex"
        declarations["flex-direction"] = "row" if spec.direction is Direction.ROW else "column"
    if spec.width is not None:
        declarations["flex"] = f"{spec.flex_grow} 0 {spec.width}px"
        declarations["width"] = f"{spec.width}px"
    elif spec.flex_grow > 0:
        # Zero basis so siblings split the whole space by weight
        declarations["flex"] = f"{spec.flex_grow} 1 0"
    else:
        declarations["flex-grow"] = "0"
    if spec.pinned:
        declarations["position"] = "sticky"
        declarations["top"] = "0"
    margin = spec.margin
    if (margin.top, margin.right, margin.bottom, margin.left) != (0, 0, 0, 0):
        declarations["margin"] = f"{margin.top}px {margin.right}px {margin.bottom}px {margin.left}px"
    return declarations


def inline_style(spec: RenderSpec) -> str:
    """Format a node's declarations as an inline style attribute value.

    Args:
        spec: Computed node.

    Returns:
        Text like 'display: flex; flex: 1 1 0'.
    """
    return "; ".join(f"{prop}: {value}" for prop, value in style_declarations(spec).items())


def dot_node_attributes(kind: ObjectKind, palette: KindPalette = DEFAULT_PALETTE) -> dict[str, str]:
    """Get Graphviz node attributes for a kind.

    Args:
        kind: Object kind.
        palette: Colour palette.

    Returns:
        Attribute mapping such as {'shape': 'box', 'style': 'filled', ...}.
    """
    pair = palette.color_for(kind)
    return {
        "shape": DOT_SHAPES[kind],
        "style": "filled",
        "fillcolor": pair.base,
        "color": pair.hover,
    }


def dot_attributes_for(tag: str | None, palette: KindPalette = DEFAULT_PALETTE) -> dict[str, str]:
    """Get Graphviz node attributes for a label, empty for unknown labels.

    Args:
        tag: Object kind label.
        palette: Colour palette.

    Returns:
        Attribute mapping, empty when the label is not a known kind.
    """
    kind = classify(tag)
    if kind is None:
        return {}
    return dot_node_attributes(kind, palette)


def _dot_escape(value: str) -> str:
    """Escape a value for a double-quoted DOT string."""
    return value.replace("\\", "\\\\").replace('"', '\\"')


def format_dot_attributes(attributes: dict[str, str]) -> str:
    """Format attributes as a DOT attribute list.

    Args:
        attributes: Attribute mapping.

    Returns:
        Text like '[shape="box",style="filled"]', or '' when empty.
    """
    if not attributes:
        return ""
    body = ",".join(f'{name}="{_dot_escape(value)}"' for name, value in attributes.items())
    return f"[{body}]"


def render_dot_graph(nodes: Sequence[tuple[str, str | None]], palette: KindPalette = DEFAULT_PALETTE) -> str:
    """Render labelled objects as a Graphviz digraph.

    Nodes are numbered in input order. Objects with an unknown kind label
    keep Graphviz's default look.

    Args:
        nodes: (display label, kind label) pairs.
        palette: Colour palette.

    Returns:
        DOT text ending with a newline.
    """
    lines = ["digraph {"]
    for index, (label, tag) in enumerate(nodes):
        attributes = {"label": label, **dot_attributes_for(tag, palette)}
        lines.append(f"\t{index} {format_dot_attributes(attributes)};")
    lines.append("}")
    return "\n".join(lines) + "\n"
