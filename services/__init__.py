"""Services package."""

from .handle_markers import (
    MarkerKind,
    Marker,
    GuideLine,
    MarkerOverlay,
    build_markers,
    hit_test,
    apply_marker_drag,
)
from .live_edit import (
    EditState,
    MarkerDrag,
    LiveEditSession,
    DEFAULT_HIT_RADIUS,
)
from .settings_manager import (
    SettingsManager,
    AppSettings,
    CanvasSettings,
    UISettings,
    get_settings,
    reset_settings_manager,
)

__all__ = [
    "MarkerKind",
    "Marker",
    "GuideLine",
    "MarkerOverlay",
    "build_markers",
    "hit_test",
    "apply_marker_drag",
    "EditState",
    "MarkerDrag",
    "LiveEditSession",
    "DEFAULT_HIT_RADIUS",
    "SettingsManager",
    "AppSettings",
    "CanvasSettings",
    "UISettings",
    "get_settings",
    "reset_settings_manager",
]
