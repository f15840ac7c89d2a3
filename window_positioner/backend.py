"""Window-management backend access.

The core never talks to the compositor directly. It goes through a
WindowBackend, which enumerates windows and monitors and performs the actual
unmaximize/move/resize calls. SwayBackend implements this over a synchronous
i3ipc connection (Sway or i3).
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional

import i3ipc

from .commands import CommandBatch, CommandType, WindowCommand
from .errors import BackendError, ErrorCode
from .models import (
    MaximizeFlags,
    MonitorDescriptor,
    Rect,
    WindowDescriptor,
    WindowType,
)

logger = logging.getLogger(__name__)

SCRATCHPAD_WORKSPACE = "__i3_scratch"
WINDOW_CONTAINER_TYPES = ("con", "floating_con")


def get_window_class(container) -> Optional[str]:
    """Get window class in a Sway/i3-compatible way.

    Sway native Wayland clients report app_id; XWayland and i3 clients report
    WM_CLASS through window_class.

    Returns:
        Window class string, or None if the container has neither
    """
    app_id = getattr(container, "app_id", None)
    if app_id:
        return app_id

    window_class = getattr(container, "window_class", None)
    if window_class:
        return window_class

    return None


def is_window_container(container) -> bool:
    """True for leaf containers that hold a client window."""
    if getattr(container, "type", None) not in WINDOW_CONTAINER_TYPES:
        return False
    if getattr(container, "nodes", None):
        return False
    return getattr(container, "window", None) is not None or bool(getattr(container, "app_id", None))


class WindowBackend(ABC):
    """Window Catalog Accessor and Monitor Layout Accessor.

    Every method may raise BackendError. Nothing is cached: each call reflects
    the compositor state at the time of the call.
    """

    @abstractmethod
    def list_windows(self) -> List[WindowDescriptor]:
        """Enumerate top-level windows in backend order."""

    @abstractmethod
    def focused_window(self) -> Optional[WindowDescriptor]:
        """Return the window holding input focus, if any."""

    @abstractmethod
    def unmaximize(self, window: WindowDescriptor) -> None:
        """Clear maximized state on both axes."""

    @abstractmethod
    def move_resize_frame(self, window: WindowDescriptor, rect: Rect) -> None:
        """Move and resize the window's frame rectangle in one operation."""

    @abstractmethod
    def list_monitors(self) -> List[MonitorDescriptor]:
        """Enumerate monitors in backend index order."""

    @abstractmethod
    def primary_monitor_index(self) -> Optional[int]:
        """Index of the primary monitor, or None when there are no monitors."""

    def close(self) -> None:
        """Release the backend connection."""


class SwayBackend(WindowBackend):
    """WindowBackend over a synchronous i3ipc connection."""

    def __init__(self, conn: i3ipc.Connection):
        """
        Initialize backend.

        Args:
            conn: Connected i3ipc.Connection (Sway or i3)
        """
        self.conn = conn

    @classmethod
    def connect(cls, socket_path: Optional[Path] = None) -> "SwayBackend":
        """Open the IPC connection.

        Args:
            socket_path: Explicit IPC socket; autodetected from SWAYSOCK/I3SOCK if None

        Raises:
            BackendError: If the compositor cannot be reached
        """
        try:
            conn = i3ipc.Connection(socket_path=str(socket_path) if socket_path else None)
            version = conn.get_version()
            logger.info(f"Connected to window manager IPC ({version.human_readable})")
        except Exception as e:
            raise BackendError("connect", str(e), ErrorCode.BACKEND_CONNECT_FAILED) from e

        return cls(conn)

    def close(self) -> None:
        """Stop any event loop and close the command socket."""
        try:
            self.conn.main_quit()
        except Exception as e:
            logger.debug(f"Error stopping IPC event loop: {e}")

        # main_quit() only tears down the subscription socket
        try:
            self.conn._cmd_socket.close()
        except Exception as e:
            logger.debug(f"Error closing IPC command socket: {e}")

    # Window catalog

    def list_windows(self) -> List[WindowDescriptor]:
        try:
            tree = self.conn.get_tree()
            return [
                self._describe(con)
                for con in tree.descendants()
                if is_window_container(con)
            ]
        except Exception as e:
            raise BackendError("get_tree", str(e), ErrorCode.BACKEND_QUERY_FAILED) from e

    def focused_window(self) -> Optional[WindowDescriptor]:
        try:
            focused = self.conn.get_tree().find_focused()
        except Exception as e:
            raise BackendError("get_tree", str(e), ErrorCode.BACKEND_QUERY_FAILED) from e

        # An empty workspace can hold focus
        if focused is None or not is_window_container(focused):
            return None

        return self._describe(focused)

    def _describe(self, con) -> WindowDescriptor:
        """Snapshot an i3ipc container as a WindowDescriptor.

        con.rect excludes the title bar, which is reported as deco_rect. The
        frame rectangle folds it back in so it matches what
        move_resize_frame() places.
        """
        rect = con.rect
        deco = getattr(con, "deco_rect", None)
        deco_height = deco.height if deco is not None else 0
        workspace = con.workspace()
        window_type = getattr(con, "window_type", None)

        return WindowDescriptor(
            id=con.id,
            title=con.name or None,
            wm_class=get_window_class(con),
            rect=Rect(
                x=rect.x,
                y=rect.y - deco_height,
                width=rect.width,
                height=rect.height + deco_height,
            ),
            maximized=MaximizeFlags.BOTH if getattr(con, "fullscreen_mode", 0) else MaximizeFlags.NONE,
            minimized=workspace is not None and workspace.name == SCRATCHPAD_WORKSPACE,
            window_type=WindowType.NORMAL if window_type in (None, "normal") else WindowType.OTHER,
            focused=bool(getattr(con, "focused", False)),
        )

    # Geometry commands

    def unmaximize(self, window: WindowDescriptor) -> None:
        command = WindowCommand(window_id=window.id, command_type=CommandType.FULLSCREEN_DISABLE)
        self._run("unmaximize", command.to_sway_command())

    def move_resize_frame(self, window: WindowDescriptor, rect: Rect) -> None:
        batch = CommandBatch.move_resize_frame(window.id, rect)
        self._run("move_resize_frame", batch.to_batched_command())

    def _run(self, operation: str, command: str) -> None:
        """Send a command and raise BackendError on any failed reply."""
        logger.debug(f"Sending IPC command: {command}")

        try:
            replies = self.conn.command(command)
        except Exception as e:
            raise BackendError(operation, str(e)) from e

        for reply in replies:
            if not reply.success:
                raise BackendError(operation, reply.error or "command rejected")

    # Monitor layout

    def _active_outputs(self):
        try:
            return [o for o in self.conn.get_outputs() if o.active]
        except Exception as e:
            raise BackendError("get_outputs", str(e), ErrorCode.BACKEND_QUERY_FAILED) from e

    def list_monitors(self) -> List[MonitorDescriptor]:
        outputs = self._active_outputs()
        primary = self._primary_from(outputs)

        return [
            MonitorDescriptor(
                index=index,
                rect=Rect(x=o.rect.x, y=o.rect.y, width=o.rect.width, height=o.rect.height),
                is_primary=index == primary,
                name=o.name,
            )
            for index, o in enumerate(outputs)
        ]

    def primary_monitor_index(self) -> Optional[int]:
        return self._primary_from(self._active_outputs())

    @staticmethod
    def _primary_from(outputs) -> Optional[int]:
        """First output flagged primary, else index 0.

        Sway never sets the primary flag, so the first active output stands in.
        """
        if not outputs:
            return None

        for index, output in enumerate(outputs):
            if getattr(output, "primary", False):
                return index

        return 0
