"""
Sway/i3 command models for the geometry commander.

Builds the IPC command strings sent through i3ipc Connection.command().
Each command in a batch carries its own [con_id=N] selector, since a
selector only applies to the first command in a semicolon chain.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models import Rect


class CommandType(str, Enum):
    """Type of window command operation."""

    FULLSCREEN_DISABLE = "fullscreen_disable"
    FLOATING_ENABLE = "floating_enable"
    RESIZE = "resize"
    MOVE_POSITION = "move_position"


class WindowCommand(BaseModel):
    """Single Sway IPC command for a window.

    Example:
        >>> cmd = WindowCommand(
        ...     window_id=12345,
        ...     command_type=CommandType.RESIZE,
        ...     params={"width": 800, "height": 600}
        ... )
        >>> cmd.to_sway_command()
        '[con_id=12345] resize set 800 px 600 px'
    """

    model_config = ConfigDict(frozen=True)

    window_id: int = Field(..., description="Sway container/window ID", gt=0)
    command_type: CommandType = Field(..., description="Type of command")
    params: dict[str, Any] = Field(
        default_factory=dict, description="Command parameters"
    )

    def to_sway_command(self) -> str:
        """Generate Sway IPC command string.

        Raises:
            ValueError: If required parameters are missing for the command type
        """
        selector = f"[con_id={self.window_id}]"

        match self.command_type:
            case CommandType.FULLSCREEN_DISABLE:
                return f"{selector} fullscreen disable"

            case CommandType.FLOATING_ENABLE:
                return f"{selector} floating enable"

            case CommandType.RESIZE:
                if "width" not in self.params or "height" not in self.params:
                    raise ValueError("RESIZE requires 'width' and 'height' parameters")
                return f"{selector} resize set {self.params['width']} px {self.params['height']} px"

            case CommandType.MOVE_POSITION:
                if "x" not in self.params or "y" not in self.params:
                    raise ValueError("MOVE_POSITION requires 'x' and 'y' parameters")
                # absolute: global layout coordinates, not relative to the output
                return f"{selector} move absolute position {self.params['x']} px {self.params['y']} px"

        raise ValueError(f"Unsupported command type: {self.command_type}")


class CommandBatch(BaseModel):
    """Commands for one window, sent to Sway as a single IPC call."""

    window_id: int = Field(..., description="Target window ID", gt=0)
    commands: list[WindowCommand] = Field(
        ..., description="Commands in execution order", min_length=1
    )

    def to_batched_command(self) -> str:
        """Join commands with semicolons, each with its own selector.

        Raises:
            ValueError: If commands target different windows
        """
        if not all(cmd.window_id == self.window_id for cmd in self.commands):
            raise ValueError("All commands in batch must target same window")

        return "; ".join(cmd.to_sway_command() for cmd in self.commands)

    @classmethod
    def move_resize_frame(cls, window_id: int, rect: Rect) -> CommandBatch:
        """Batch that floats a window and places its frame at rect.

        Tiled containers ignore absolute geometry, so the window is made
        floating first. Resize precedes move so the final position is not
        shifted by a size change.
        """
        return cls(
            window_id=window_id,
            commands=[
                WindowCommand(window_id=window_id, command_type=CommandType.FLOATING_ENABLE),
                WindowCommand(
                    window_id=window_id,
                    command_type=CommandType.RESIZE,
                    params={"width": rect.width, "height": rect.height},
                ),
                WindowCommand(
                    window_id=window_id,
                    command_type=CommandType.MOVE_POSITION,
                    params={"x": rect.x, "y": rect.y},
                ),
            ],
        )
