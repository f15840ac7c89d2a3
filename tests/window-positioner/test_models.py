"""Tests for data models, wire shapes and Sway command building."""

import pytest
from pydantic import ValidationError

from window_positioner.commands import CommandBatch, CommandType, WindowCommand
from window_positioner.models import (
    MaximizeFlags,
    MonitorDescriptor,
    PositionRequest,
    Rect,
    TitleSubstring,
    WmClassAndTitle,
)

from fakes import make_window


class TestWireShapes:
    """Serialized field names are part of the interface."""

    def test_window_data_keys(self):
        data = make_window(1, title="t", wm_class="c").to_window_data()
        assert list(data) == ["title", "x", "y", "width", "height", "maximized", "minimized", "wmClass"]

    def test_maximized_serializes_as_flag_value(self):
        data = make_window(1, maximized=MaximizeFlags.VERTICAL).to_window_data()
        assert data["maximized"] == 2
        assert type(data["maximized"]) is int

    def test_monitor_data(self):
        monitor = MonitorDescriptor(index=1, rect=Rect(x=-1920, y=0, width=1920, height=1080), is_primary=True)
        assert monitor.to_monitor_data() == {
            "index": 1, "x": -1920, "y": 0, "width": 1920, "height": 1080, "isPrimary": True,
        }

    def test_descriptors_are_frozen(self):
        window = make_window(1, title="t")
        with pytest.raises(ValidationError):
            window.title = "changed"


class TestSelectors:
    """Selector descriptions feed the not-found messages."""

    def test_describe(self):
        assert TitleSubstring(query="term").describe() == 'title containing "term"'
        assert WmClassAndTitle(class_query="foot", title_query="vim").describe() == (
            'WM_CLASS "foot" and title containing "vim"'
        )

    def test_position_request(self):
        request = PositionRequest(
            selector=TitleSubstring(query="x"),
            rect=Rect(x=-5, y=-5, width=10, height=10),
        )
        assert str(request.rect) == "-5,-5 10x10"


class TestWindowCommand:
    """Sway command strings."""

    def test_fullscreen_disable(self):
        cmd = WindowCommand(window_id=7, command_type=CommandType.FULLSCREEN_DISABLE)
        assert cmd.to_sway_command() == "[con_id=7] fullscreen disable"

    def test_resize_requires_params(self):
        cmd = WindowCommand(window_id=7, command_type=CommandType.RESIZE, params={"width": 10})
        with pytest.raises(ValueError, match="RESIZE"):
            cmd.to_sway_command()

    def test_move_requires_params(self):
        cmd = WindowCommand(window_id=7, command_type=CommandType.MOVE_POSITION)
        with pytest.raises(ValueError, match="MOVE_POSITION"):
            cmd.to_sway_command()

    def test_window_id_must_be_positive(self):
        with pytest.raises(ValidationError):
            WindowCommand(window_id=0, command_type=CommandType.FLOATING_ENABLE)

    def test_batch_rejects_mixed_windows(self):
        batch = CommandBatch(
            window_id=1,
            commands=[
                WindowCommand(window_id=1, command_type=CommandType.FLOATING_ENABLE),
                WindowCommand(window_id=2, command_type=CommandType.FLOATING_ENABLE),
            ],
        )
        with pytest.raises(ValueError, match="same window"):
            batch.to_batched_command()

    def test_move_resize_order(self):
        batch = CommandBatch.move_resize_frame(5, Rect(x=1, y=2, width=3, height=4))
        assert [c.command_type for c in batch.commands] == [
            CommandType.FLOATING_ENABLE,
            CommandType.RESIZE,
            CommandType.MOVE_POSITION,
        ]
