"""
conftest.py
-----------
Shared pytest configuration and fixtures for SceneReel tests.

Contains:
- Common fixtures used across multiple test modules
- Pytest configuration and hooks
- Shared mock utilities and test helpers
"""

import os
import sys
from unittest.mock import MagicMock

import pytest

# Add project root to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from scenereel.core.debug.debug_logger import LoggerConfig  # noqa: E402
from scenereel.graphics.animations.animator import Animator  # noqa: E402
from scenereel.graphics.animations.tick_source import ManualTickSource  # noqa: E402
from scenereel.scenes.scene import Scene  # noqa: E402


# ===========================================================
# Logging
# ===========================================================

@pytest.fixture(autouse=True)
def quiet_logger(monkeypatch):
    """Keep console output out of test runs."""
    monkeypatch.setattr(LoggerConfig, "ENABLE_LOGGING", False)
    yield


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def tick_source():
    """Deterministic tick source advanced by hand."""
    return ManualTickSource()


@pytest.fixture
def mock_surface():
    """Stand-in drawing surface."""
    return create_mock_surface()


@pytest.fixture
def animator(mock_surface, tick_source):
    """Animator on a mock surface with a 25ms manual tick."""
    return Animator(mock_surface, tick_source=tick_source, tick_period=25)


@pytest.fixture
def event_log():
    """Shared list that recording callbacks append to."""
    return []


@pytest.fixture
def recorded_scene(event_log):
    """Factory for scenes that record their events into ``event_log``."""
    def factory(name, duration):
        return make_recorded_scene(name, duration, event_log)
    return factory


# ===========================================================
# Test Utilities
# ===========================================================

def create_mock_surface(width=400, height=400):
    """Create a mock pygame.Surface with common methods."""
    surface = MagicMock()
    surface.get_width.return_value = width
    surface.get_height.return_value = height
    surface.get_rect.return_value = MagicMock(x=0, y=0, width=width, height=height)
    return surface


def make_recorded_scene(name, duration, log):
    """
    Scene whose start/complete handlers and single element append
    ``(name, event)`` tuples to ``log``. Render entries carry the elapsed time.
    """
    scene = Scene(duration=duration)
    scene.name = name
    scene.on_start(lambda s: log.append((name, "start")))
    scene.on_complete(lambda s: log.append((name, "complete")))
    scene.add_element(lambda view: log.append((name, "render", view.time_elapsed)))
    return scene


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Add the unit marker to everything outside integration modules."""
    for item in items:
        if "integration" not in item.nodeid:
            item.add_marker(pytest.mark.unit)
