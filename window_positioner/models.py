"""
Pydantic data models for the window positioner.

Window and monitor snapshots are produced fresh by the backend on every
request and never cached. Selectors describe how a caller wants a target
window to be found.
"""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# Enumerations

class MaximizeFlags(IntEnum):
    """Maximized axis state (serialized as the integer flag value)."""

    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2
    BOTH = 3


class WindowType(str, Enum):
    """Window type as far as active-window fallback is concerned."""

    NORMAL = "normal"
    OTHER = "other"


UNKNOWN = "Unknown"


# Geometry

class Rect(BaseModel):
    """Frame rectangle in global layout coordinates.

    x/y may be negative for outputs left of or above the origin.
    """

    model_config = ConfigDict(frozen=True)

    x: int
    y: int
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.x},{self.y} {self.width}x{self.height}"


# Snapshots

class WindowDescriptor(BaseModel):
    """Read-only snapshot of a single window at query time."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Backend container handle")
    title: Optional[str] = Field(None, description="Window title")
    wm_class: Optional[str] = Field(None, description="app_id or WM_CLASS")
    rect: Rect
    maximized: MaximizeFlags = MaximizeFlags.NONE
    minimized: bool = False
    window_type: WindowType = WindowType.NORMAL
    focused: bool = False

    def to_window_data(self) -> Dict[str, Any]:
        """Convert to the windowData wire shape.

        Missing title/class become "Unknown", never null.
        """
        return {
            "title": self.title or UNKNOWN,
            "x": self.rect.x,
            "y": self.rect.y,
            "width": self.rect.width,
            "height": self.rect.height,
            "maximized": int(self.maximized),
            "minimized": self.minimized,
            "wmClass": self.wm_class or UNKNOWN,
        }


class MonitorDescriptor(BaseModel):
    """One physical monitor, ordered by backend index."""

    model_config = ConfigDict(frozen=True)

    index: int
    rect: Rect
    is_primary: bool = False
    name: Optional[str] = None

    def to_monitor_data(self) -> Dict[str, Any]:
        """Convert to an element of the monitorData sequence."""
        return {
            "index": self.index,
            "x": self.rect.x,
            "y": self.rect.y,
            "width": self.rect.width,
            "height": self.rect.height,
            "isPrimary": self.is_primary,
        }


# Selectors

class TitleSubstring(BaseModel):
    """Case-insensitive substring match on the window title."""

    model_config = ConfigDict(frozen=True)

    query: str

    def describe(self) -> str:
        return f'title containing "{self.query}"'


class WmClass(BaseModel):
    """Case-insensitive exact match on the window class."""

    model_config = ConfigDict(frozen=True)

    query: str

    def describe(self) -> str:
        return f'WM_CLASS "{self.query}"'


class WmClassAndTitle(BaseModel):
    """Exact class match and title substring match on the same window."""

    model_config = ConfigDict(frozen=True)

    class_query: str
    title_query: str

    def describe(self) -> str:
        return f'WM_CLASS "{self.class_query}" and title containing "{self.title_query}"'


Selector = Union[TitleSubstring, WmClass, WmClassAndTitle]

# At most one window, never a list of candidates
MatchResult = Optional[WindowDescriptor]


class PositionRequest(BaseModel):
    """A caller's intent: which window, and where it should go."""

    model_config = ConfigDict(frozen=True)

    selector: Selector
    rect: Rect
