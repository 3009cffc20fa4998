"""Log pane showing preview activity at the configured log level."""

from datetime import datetime
from typing import ClassVar

from rich.text import Text
from textual.widgets import RichLog


class ActivityLog(RichLog):
    """Widget receiving loguru messages and showing them with level colours."""

    DEFAULT_CSS: ClassVar[str] = """
    ActivityLog {
        height: 6;
        width: 100%;
        border-top: solid $primary;
        scrollbar-size: 1 1;
    }
    """

    LEVEL_STYLES: ClassVar[dict[str, str]] = {
        "DEBUG": "dim",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "bold red",
        "CRITICAL": "bold white on red",
    }

    def __init__(self, max_lines: int | None = 200, *, id: str | None = None) -> None:
        """Initialize the ActivityLog widget.

        Args:
            max_lines: Maximum number of lines to retain.
            id: The ID of the widget in the DOM.
        """
        super().__init__(max_lines=max_lines, wrap=True, markup=False, auto_scroll=True, id=id)

    def add_entry(self, level: str, message: str, timestamp: datetime | None = None) -> None:
        """Append one entry.

        Args:
            level: Log level name.
            message: The log message.
            timestamp: Entry time (defaults to now).
        """
        when = (timestamp or datetime.now()).strftime("%H:%M:%S")
        level_upper = level.upper()
        line = Text()
        line.append(f"{when} ", style="dim")
        line.append(f"{level_upper:<8} ", style=self.LEVEL_STYLES.get(level_upper, ""))
        line.append(message)
        self.write(line)

    def sink(self, message: object) -> None:
        """Loguru sink forwarding records to the pane.

        Args:
            message: Loguru message object.
        """
        record = getattr(message, "record", None)
        if record is None:
            return
        level = record["level"].name
        timestamp = record["time"].replace(tzinfo=None)
        try:
            self.app.call_from_thread(self.add_entry, level, str(record["message"]), timestamp)
        except RuntimeError:
            # Already on the app thread
            self.add_entry(level, str(record["message"]), timestamp)
