"""
Unit tests for the editing session operations.
"""

import json

import pytest

from pixel_editor.models.color import SENTINEL, TRANSPARENT
from pixel_editor.models.errors import GridParseError, HistoryIndexError
from pixel_editor.models.tools import Tool
from pixel_editor.services.editor_service import EditorService
from pixel_editor.services.history_service import HISTORY_KEY

RED = (255, 0, 0, 100)


class TestStart:
    """Tests for grid (re)creation."""

    def test_initial_grid(self, editor):
        assert (editor.session.width, editor.session.height) == (8, 8)
        assert editor.session.tool_state.tool is Tool.BRUSH

    def test_start_replaces_grid(self, editor):
        editor.click(0, 0)
        editor.hover(1, 1)

        grid = editor.start(32, 16)

        assert (grid.width, grid.height) == (32, 16)
        assert grid.get(0, 0) == SENTINEL
        assert editor.session.hovered is None

    @pytest.mark.parametrize("width,height", [(0, 8), (8, 0), (257, 8)])
    def test_invalid_size_keeps_grid(self, editor, width, height):
        before = editor.grid

        with pytest.raises(ValueError):
            editor.start(width, height)

        assert editor.grid is before

    def test_max_size_is_configurable(self, history):
        editor = EditorService(history, width=4, height=4, max_size=4)

        with pytest.raises(ValueError):
            editor.start(5, 5)


class TestEditing:
    """Tests for clicks, hover, tools and colors."""

    def test_scenario_paint_and_finish(self, editor):
        editor.set_color(RED)
        editor.click(2, 3)

        assert editor.grid.get(2, 3) == RED
        assert all(
            editor.grid.get(r, c) == SENTINEL for r in range(8) for c in range(8) if (r, c) != (2, 3)
        )

        text = editor.finish("heart")
        rows = json.loads(text.split(" = ", 1)[1].split(";", 1)[0])

        for r in range(8):
            for c in range(8):
                expected = [255, 0, 0, 100] if (r, c) == (2, 3) else [0, 0, 0, 0]
                assert rows[r][c] == expected
        assert editor.session.formatted_text == text
        assert editor.session.project_name == "heart"

    def test_finish_reuses_project_name(self, editor):
        editor.finish("cat")

        assert editor.finish().startswith("const catIcon")

    def test_hover_is_display_only(self, editor):
        before = editor.grid
        editor.hover(3, 4)

        assert editor.session.hovered == (3, 4)
        assert editor.grid is before

        editor.hover(None, None)
        assert editor.session.hovered is None

    def test_hotkeys(self, editor):
        editor.set_color(RED)

        assert editor.handle_hotkey("e") is True
        editor.click(0, 0)
        assert editor.grid.get(0, 0) == SENTINEL

        assert editor.handle_hotkey("q") is False
        assert editor.handle_hotkey("b") is True
        assert editor.session.tool_state.current_color == RED

    def test_eyedropper_then_brush(self, editor):
        editor.set_color(RED)
        editor.click(0, 0)
        editor.set_color((0, 0, 0, 100))

        editor.select_tool(Tool.EYEDROPPER)
        editor.click(0, 0)
        assert editor.session.tool_state.tool is Tool.BRUSH

        editor.click(5, 5)
        assert editor.grid.get(5, 5) == RED

    def test_pick_hex(self, editor):
        assert editor.pick_hex("#336699") == (51, 102, 153, 100)
        assert editor.session.tool_state.current_color == (51, 102, 153, 100)

        assert editor.pick_hex("oops") == TRANSPARENT


class TestRecentColors:
    """Tests for the color history wiring."""

    def test_save_and_select(self, editor, memory_store):
        editor.set_color(RED)
        editor.save_current_color()
        editor.set_color((0, 0, 0, 100))

        assert editor.select_recent(0) == RED
        assert editor.session.tool_state.current_color == RED
        assert json.loads(memory_store.get(HISTORY_KEY)) == [list(RED)]

    def test_clear_last_color(self, editor):
        editor.save_current_color()
        editor.set_color(RED)
        editor.save_current_color()

        assert editor.clear_last_color() == [(0, 0, 0, 100)]
        assert editor.recent_colors == [(0, 0, 0, 100)]

    def test_select_missing_index(self, editor):
        with pytest.raises(HistoryIndexError):
            editor.select_recent(0)


class TestLoadArray:
    """Tests for importing arrays into the session."""

    def test_import_small_array_keeps_size(self, history):
        editor = EditorService(history, width=16, height=16)

        grid = editor.load_array(json.dumps([[list(RED)] * 4] * 4))

        assert (grid.width, grid.height) == (16, 16)
        assert editor.grid.get(3, 3) == RED
        assert editor.grid.get(3, 4) == SENTINEL

    def test_invalid_import_leaves_state_unchanged(self, editor):
        editor.set_color(RED)
        editor.click(1, 1)
        before = editor.grid

        with pytest.raises(GridParseError):
            editor.load_array("[]")
        with pytest.raises(GridParseError):
            editor.load_array("garbage")
        with pytest.raises(GridParseError):
            editor.load_array("[" * 100000)

        assert editor.grid is before

    def test_reimport_of_export(self, editor):
        editor.set_color(RED)
        editor.click(7, 7)
        painted = editor.grid
        text = editor.finish("icon")

        editor.start(8, 8)
        editor.load_array(text)

        assert editor.grid == painted
