"""Shared test fixtures for wikitheme."""

import os
import tempfile
from pathlib import Path

import pytest

# Keep log files out of the user's home during the test run
os.environ.setdefault("WIKITHEME_LOG_DIR", tempfile.mkdtemp(prefix="wikitheme-logs-"))

from wikitheme.layout import HBox, MainArea, NavRail, Page, VBox  # noqa: E402


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the settings directory at a temporary path.

    Returns:
        Path to the temporary configuration directory.
    """
    directory = tmp_path / "config"
    monkeypatch.setenv("WIKITHEME_CONFIG_DIR", str(directory))
    return directory


@pytest.fixture
def three_box_vbox() -> VBox:
    """Vertical box with three children A, B and C."""
    return VBox(key="outer", children=(VBox(key="a"), VBox(key="b"), VBox(key="c")))


@pytest.fixture
def three_box_hbox() -> HBox:
    """Horizontal box with three children A, B and C."""
    return HBox(key="outer", children=(VBox(key="a"), HBox(key="b"), VBox(key="c")))


@pytest.fixture
def sample_page() -> Page:
    """Page with nested boxes in both regions."""
    return Page(
        nav=NavRail(children=(VBox(key="nav-links"),)),
        main=MainArea(
            children=(
                HBox(key="columns", children=(VBox(key="left"), VBox(key="right"))),
                VBox(key="footer"),
            )
        ),
    )
