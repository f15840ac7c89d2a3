"""Pytest configuration and fixtures for window positioner tests."""

import sys
from pathlib import Path

import pytest

# Add repository root and this directory to Python path for imports
repo_root = Path(__file__).parent.parent.parent
for path in (repo_root, Path(__file__).parent):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from fakes import FakeBackend, make_monitor, make_window
from window_positioner.commander import GeometryCommander
from window_positioner.dispatcher import RequestDispatcher
from window_positioner.introspection import IntrospectionResponder
from window_positioner.matcher import WindowMatcher
from window_positioner.models import WindowType


@pytest.fixture
def sample_windows():
    """Catalog in enumeration order: two terminals, a browser, a dialog and an untitled window."""
    return [
        make_window(1, title="Mozilla Firefox", wm_class="firefox"),
        make_window(2, title="vim ~/notes.md", wm_class="Alacritty", rect=(100, 50, 1200, 900)),
        make_window(3, title="htop", wm_class="Alacritty"),
        make_window(4, title="Save File", wm_class="firefox", window_type=WindowType.OTHER),
        make_window(5, title=None, wm_class="Firefoxx"),
    ]


@pytest.fixture
def backend(sample_windows):
    """FakeBackend with the sample catalog and a dual-monitor layout."""
    return FakeBackend(
        windows=sample_windows,
        monitors=[
            make_monitor(0, (0, 0, 2560, 1440), "DP-1"),
            make_monitor(1, (2560, 0, 1920, 1080), "HDMI-A-1"),
        ],
        primary=0,
    )


@pytest.fixture
def dispatcher(backend):
    """Dispatcher wired to the fake backend."""
    return RequestDispatcher(
        matcher=WindowMatcher(backend),
        commander=GeometryCommander(backend),
        responder=IntrospectionResponder(backend),
    )
