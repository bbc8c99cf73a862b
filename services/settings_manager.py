"""
Settings Manager.

Handles application settings with JSON file storage.
"""

import json
import logging
import os
from dataclasses import dataclass, field, asdict, fields
from typing import Optional
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class CanvasSettings:
    """Drawing canvas and editing behaviour."""
    drag_threshold: float = 1.0   # pixels a press must travel to become a drag
    marker_size: float = 14.0
    hit_radius: float = 7.0
    stroke_width: float = 2.0
    stroke_color: str = "#000000"
    guide_color: str = "#808080"
    marker_fill: str = "#FFFFFF"
    marker_stroke: str = "#000000"
    background_color: str = "#FFFFFF"
    show_markers: bool = True


@dataclass
class UISettings:
    """User interface settings."""
    window_width: int = 900
    window_height: int = 650
    window_geometry: str = ""   # base64 QMainWindow.saveGeometry()


def _from_known_keys(cls, data: dict):
    """Build a settings dataclass, ignoring keys it does not define."""
    known = {f.name for f in fields(cls)}
    return cls(**{k: v for k, v in data.items() if k in known})


@dataclass
class AppSettings:
    """Complete application settings."""
    canvas: CanvasSettings = field(default_factory=CanvasSettings)
    ui: UISettings = field(default_factory=UISettings)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "canvas": asdict(self.canvas),
            "ui": asdict(self.ui),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """Create from dictionary."""
        settings = cls()

        if "canvas" in data:
            settings.canvas = _from_known_keys(CanvasSettings, data["canvas"])
        if "ui" in data:
            settings.ui = _from_known_keys(UISettings, data["ui"])

        return settings


class SettingsManager:
    """
    Manages application settings with JSON file storage.

    Settings file location:
    - Windows: %APPDATA%/VectorDrawing/settings.json
    - Linux: ~/.config/VectorDrawing/settings.json
    - macOS: ~/Library/Application Support/VectorDrawing/settings.json
    """

    APP_NAME = "VectorDrawing"
    SETTINGS_FILE = "settings.json"

    def __init__(self, config_override: Optional[str] = None):
        """
        Initialize settings manager.

        Args:
            config_override: Optional path to override config file location.
                            Useful for testing.
        """
        self._settings = AppSettings()
        self._config_override = config_override
        self._settings_path = self._get_settings_path()
        self.load()

    @property
    def settings(self) -> AppSettings:
        """Get current settings."""
        return self._settings

    @property
    def settings_path(self) -> str:
        """Get the settings file path."""
        return str(self._settings_path)

    @property
    def canvas(self) -> CanvasSettings:
        return self._settings.canvas

    @property
    def ui(self) -> UISettings:
        return self._settings.ui

    # Convenience properties for common settings
    @property
    def drag_threshold(self) -> float:
        return self._settings.canvas.drag_threshold

    @drag_threshold.setter
    def drag_threshold(self, value: float):
        self._settings.canvas.drag_threshold = value
        self.save()

    @property
    def show_markers(self) -> bool:
        return self._settings.canvas.show_markers

    @show_markers.setter
    def show_markers(self, value: bool):
        self._settings.canvas.show_markers = value
        self.save()

    def _get_settings_path(self) -> Path:
        """Get platform-specific settings directory."""
        if self._config_override:
            return Path(self._config_override)

        import platform
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            config_dir = Path(base) / self.APP_NAME
        elif system == "Darwin":  # macOS
            config_dir = Path.home() / "Library" / "Application Support" / self.APP_NAME
        else:  # Linux and others
            xdg_config = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
            config_dir = Path(xdg_config) / self.APP_NAME

        return config_dir / self.SETTINGS_FILE

    def load(self) -> bool:
        """Load settings from file."""
        if not self._settings_path.exists():
            return False

        try:
            with open(self._settings_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._settings = AppSettings.from_dict(data)
            return True
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Error loading settings from {self._settings_path}: {e}")
            return False

    def save(self) -> bool:
        """Save settings to file."""
        try:
            self._settings_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings.to_dict(), f, indent=2)
            return True
        except OSError as e:
            logger.warning(f"Error saving settings to {self._settings_path}: {e}")
            return False

    def reset(self):
        """Reset settings to defaults."""
        self._settings = AppSettings()
        self.save()

    def save_window_geometry(self, geometry: bytes):
        """Save window geometry."""
        import base64
        self._settings.ui.window_geometry = base64.b64encode(geometry).decode("ascii")
        self.save()

    def get_window_geometry(self) -> Optional[bytes]:
        """Get saved window geometry."""
        import base64
        geo = self._settings.ui.window_geometry
        if not geo:
            return None

        try:
            return base64.b64decode(geo)
        except ValueError:
            return None


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings(config_override: Optional[str] = None) -> SettingsManager:
    """
    Get the global settings manager instance.

    Args:
        config_override: Optional path to override config location.
                        Only used on first call to initialize.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager(config_override)
    return _settings_manager


def reset_settings_manager():
    """Reset the global settings manager (useful for testing)."""
    global _settings_manager
    _settings_manager = None
