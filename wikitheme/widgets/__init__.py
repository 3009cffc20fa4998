"""TUI widgets for the wikitheme preview."""

from wikitheme.widgets.activity_log import ActivityLog
from wikitheme.widgets.kind_link import KindLink
from wikitheme.widgets.layout_view import LayoutView, px_to_cells

__all__ = [
    "ActivityLog",
    "KindLink",
    "LayoutView",
    "px_to_cells",
]
