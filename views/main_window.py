"""
Main application window.

Hosts the drawing canvas with a status bar showing anchor and segment
counts.
"""

from PyQt6.QtCore import QByteArray
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QLabel

from models.path import build_path, segment_count
from services import get_settings
from views.drawing_canvas import DrawingCanvas


class MainWindow(QMainWindow):
    """Main application window."""

    def __init__(self):
        super().__init__()
        self.settings_manager = get_settings()

        self.canvas = DrawingCanvas(settings=self.settings_manager.canvas, parent=self)
        self.setCentralWidget(self.canvas)

        self._setup_window()
        self._setup_menus()
        self._setup_status_bar()

        self.canvas.drawingChanged.connect(self._update_counts)
        self._restore_window_settings()

    def closeEvent(self, event):
        """Handle window close - save settings."""
        self._save_window_settings()
        super().closeEvent(event)

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle("Vector Drawing")
        self.setMinimumSize(400, 300)
        ui = self.settings_manager.ui
        self.resize(ui.window_width, ui.window_height)

    def _setup_menus(self):
        file_menu = self.menuBar().addMenu("&File")
        quit_action = QAction("&Quit", self)
        quit_action.setShortcut(QKeySequence.StandardKey.Quit)
        quit_action.triggered.connect(self.close)
        file_menu.addAction(quit_action)

        view_menu = self.menuBar().addMenu("&View")
        self._markers_action = QAction("Show &Handles", self)
        self._markers_action.setCheckable(True)
        self._markers_action.setChecked(self.settings_manager.show_markers)
        self._markers_action.toggled.connect(self._on_markers_toggled)
        view_menu.addAction(self._markers_action)

    def _setup_status_bar(self):
        self._count_label = QLabel()
        self.statusBar().addPermanentWidget(self._count_label)
        self.statusBar().showMessage("Click to add a point, drag to add a curve", 5000)
        self._update_counts()

    def _on_markers_toggled(self, checked: bool):
        self.canvas.set_markers_visible(checked)
        self.settings_manager.show_markers = checked

    def _update_counts(self, *args):
        """Update anchor/segment count in status bar."""
        drawing = self.canvas.drawing
        segments = segment_count(build_path(drawing))
        self._count_label.setText(f"Points: {len(drawing)}  Segments: {segments}")

    def _restore_window_settings(self):
        geometry = self.settings_manager.get_window_geometry()
        if geometry:
            self.restoreGeometry(QByteArray(geometry))

    def _save_window_settings(self):
        self.settings_manager.ui.window_width = self.width()
        self.settings_manager.ui.window_height = self.height()
        self.settings_manager.save_window_geometry(bytes(self.saveGeometry()))
