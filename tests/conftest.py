"""
Shared fixtures for Pixel Studio tests.

The Qt application comes from pytest-qt's qapp fixture; sessions request it
so every QObject is created with an application alive.
"""
import os

import pytest

# Headless runs: no display server needed for QApplication
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pixel_studio import EditorConfig, EditorSession  # noqa: E402


@pytest.fixture
def session(qapp):
    return EditorSession()


@pytest.fixture
def small_session(qapp):
    """A 4x4 grid: each cell is 80 canvas units wide on a 320 canvas."""
    return EditorSession(EditorConfig(grid_size=4))
