"""
Pytest configuration and shared fixtures for pixel editor tests.
"""

import pytest

from pixel_editor.models.grid import PixelGrid
from pixel_editor.services.editor_service import EditorService
from pixel_editor.services.history_service import ColorHistory
from pixel_editor.services.storage_service import MemoryStore


@pytest.fixture
def memory_store():
    """Empty in-memory key-value store."""
    return MemoryStore()


@pytest.fixture
def history(memory_store):
    """Color history backed by the in-memory store, already loaded."""
    history = ColorHistory(memory_store)
    history.load()
    return history


@pytest.fixture
def blank_grid():
    """A blank 4x3 grid (width 4, height 3)."""
    return PixelGrid.create(4, 3)


@pytest.fixture
def editor(history):
    """Editor session on an 8x8 grid."""
    return EditorService(history, width=8, height=8)


@pytest.fixture
def sample_colors():
    """
    Sample colors as (R, G, B, A%) tuples.
    """
    return [
        (255, 0, 0, 100),    # Red
        (0, 255, 0, 100),    # Green
        (0, 0, 255, 100),    # Blue
        (255, 255, 255, 50),  # Half-transparent white
        (0, 0, 0, 100),      # Black
    ]
