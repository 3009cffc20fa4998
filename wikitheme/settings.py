"""Persistent settings for wikitheme."""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from wikitheme.layout import LayoutMetrics
from wikitheme.logger import get_logger
from wikitheme.themes import DEFAULT_THEME_NAME, THEME_LABELS, KindPalette, get_palette

logger = get_logger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

# Navigation rail width (px in the stylesheet, cells in the preview)
MIN_NAV_WIDTH = 10
MAX_NAV_WIDTH = 600
DEFAULT_NAV_WIDTH = 200

# Main area margin and box spacing
MAX_MARGIN = 64
DEFAULT_MAIN_MARGIN = 8
DEFAULT_BOX_SPACING = 8


@dataclass(frozen=True)
class Settings:
    """User-configurable settings stored on disk."""

    theme: str = DEFAULT_THEME_NAME
    log_level: str = DEFAULT_LOG_LEVEL
    nav_width: int = DEFAULT_NAV_WIDTH
    main_margin: int = DEFAULT_MAIN_MARGIN
    box_spacing: int = DEFAULT_BOX_SPACING

    def metrics(self) -> LayoutMetrics:
        """Get the layout metrics for these settings.

        Returns:
            LayoutMetrics built from the size settings.
        """
        return LayoutMetrics(
            nav_width=self.nav_width,
            main_margin=self.main_margin,
            box_spacing=self.box_spacing,
        )

    def palette(self) -> KindPalette:
        """Get the palette selected by these settings.

        Returns:
            The selected KindPalette.
        """
        return get_palette(self.theme)

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Settings:
        """Create settings from a mapping, applying defaults for invalid values.

        Args:
            data: Mapping containing raw settings values.

        Returns:
            A Settings instance with validated values.
        """
        theme_value = _coerce_str(data.get("theme"))
        theme = theme_value if theme_value is not None and theme_value in THEME_LABELS else DEFAULT_THEME_NAME

        log_level_value = _coerce_str(data.get("log_level"))
        log_level = (
            log_level_value if log_level_value is not None and log_level_value in LOG_LEVELS else DEFAULT_LOG_LEVEL
        )

        nav_width = _coerce_int(data.get("nav_width"))
        if nav_width is None or nav_width < MIN_NAV_WIDTH or nav_width > MAX_NAV_WIDTH:
            nav_width = DEFAULT_NAV_WIDTH

        main_margin = _coerce_int(data.get("main_margin"))
        if main_margin is None or main_margin < 0 or main_margin > MAX_MARGIN:
            main_margin = DEFAULT_MAIN_MARGIN

        box_spacing = _coerce_int(data.get("box_spacing"))
        if box_spacing is None or box_spacing < 0 or box_spacing > MAX_MARGIN:
            box_spacing = DEFAULT_BOX_SPACING

        return cls(
            theme=theme,
            log_level=log_level,
            nav_width=nav_width,
            main_margin=main_margin,
            box_spacing=box_spacing,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize settings to a dictionary.

        Returns:
            Dictionary representation of settings.
        """
        return {
            "theme": self.theme,
            "log_level": self.log_level,
            "nav_width": self.nav_width,
            "main_margin": self.main_margin,
            "box_spacing": self.box_spacing,
        }


def get_config_dir() -> Path:
    """Get the directory used for persistent configuration.

    Returns:
        Path to the configuration directory.
    """
    override_dir = os.environ.get("WIKITHEME_CONFIG_DIR")
    if override_dir:
        return Path(override_dir).expanduser()

    base_dir = os.environ.get("XDG_CONFIG_HOME")
    if base_dir:
        return Path(base_dir).expanduser() / "wikitheme"

    return Path.home() / ".config" / "wikitheme"


def get_settings_path() -> Path:
    """Get the full path to the settings file.

    Returns:
        Path to the settings JSON file.
    """
    return get_config_dir() / "settings.json"


def load_settings() -> Settings:
    """Load settings from disk.

    Returns:
        Loaded settings, or defaults if none exist.
    """
    settings_path = get_settings_path()
    if not settings_path.exists():
        return Settings()

    try:
        raw = json.loads(settings_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        logger.warning(f"Failed to parse settings file {settings_path}: {exc}")
        return Settings()
    except OSError as exc:
        logger.warning(f"Failed to read settings file {settings_path}: {exc}")
        return Settings()

    if not isinstance(raw, dict):
        logger.warning(f"Settings file {settings_path} contains invalid data")
        return Settings()

    return Settings.from_mapping(raw)


def save_settings(settings: Settings) -> None:
    """Persist settings to disk.

    Args:
        settings: Settings to persist.
    """
    settings_path = get_settings_path()
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        settings_path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning(f"Failed to save settings to {settings_path}: {exc}")


def _coerce_str(value: object) -> str | None:
    """Coerce a value into a string if possible."""
    if isinstance(value, str):
        return value
    return None


def _coerce_int(value: object) -> int | None:
    """Coerce a value into an integer if possible.

    Args:
        value: Raw value to coerce.

    Returns:
        Integer value or None.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None
