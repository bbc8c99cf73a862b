"""
Pytest configuration and shared fixtures for vector drawing tests.
"""

import pytest
import tempfile
import shutil
from pathlib import Path
from typing import Generator

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from PyQt6.QtCore import QCoreApplication

from models.drawing import Drawing
from models.geometry import Point
from services.live_edit import LiveEditSession
from services.settings_manager import reset_settings_manager


# ============== Qt Fixtures ==============

@pytest.fixture(scope="session", autouse=True)
def qt_core_app():
    """QCoreApplication for QObject signal delivery (no display needed)."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


# ============== Temporary Directory Fixtures ==============

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    tmp = tempfile.mkdtemp(prefix="vector_drawing_test_")
    yield Path(tmp)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture(autouse=True)
def fresh_settings():
    """Make sure no test sees another test's global settings instance."""
    reset_settings_manager()
    yield
    reset_settings_manager()


# ============== Drawing Fixtures ==============

@pytest.fixture
def empty_drawing() -> Drawing:
    """Create an empty drawing."""
    return Drawing()


@pytest.fixture
def corner_drawing() -> Drawing:
    """Three plain vertices forming an open triangle outline."""
    drawing = Drawing()
    drawing.append_anchor(Point(0, 0))
    drawing.append_anchor(Point(100, 0))
    drawing.append_anchor(Point(100, 100))
    return drawing


@pytest.fixture
def curve_drawing() -> Drawing:
    """
    Mixed drawing: plain, smooth, smooth, plain.

    Produces line-free segments: quad, cubic, cubic.
    """
    drawing = Drawing()
    drawing.append_anchor(Point(0, 0))
    drawing.append_anchor(Point(100, 0), handle=Point(120, 20))
    drawing.append_anchor(Point(200, 0), handle=Point(200, 50))
    drawing.append_anchor(Point(300, 0))
    return drawing


@pytest.fixture
def session() -> LiveEditSession:
    """Live edit session on an empty drawing with default threshold."""
    return LiveEditSession()


# ============== Helper Functions ==============

def tap(session: LiveEditSession, position: Point):
    """Press and release at the same position."""
    session.pointer_down(position)
    return session.pointer_up(position)


def drag(session: LiveEditSession, start: Point, end: Point, steps: int = 4):
    """Press at start, move in steps, release at end."""
    session.pointer_down(start)
    for i in range(1, steps + 1):
        t = i / steps
        session.pointer_move(Point(start.x + (end.x - start.x) * t,
                                   start.y + (end.y - start.y) * t))
    return session.pointer_up(end)
