"""
Introspection responder.

Read-only queries about the active window, a named window and the monitor
layout. Each returns a JSON string; failures come back as an
{"error": "..."} payload rather than an exception, so the D-Bus call always
gets a well-formed reply.
"""

import json
import logging
from typing import Any, Dict, List

from .backend import WindowBackend
from .errors import NoActiveWindowError, WindowNotFoundError, error_json
from .matcher import first_match
from .models import TitleSubstring, WindowDescriptor, WindowType

logger = logging.getLogger(__name__)


class IntrospectionResponder:
    """Builds serialized window and monitor descriptions."""

    def __init__(self, backend: WindowBackend):
        self.backend = backend

    def active_window(self) -> str:
        """Focused window, falling back to the first normal window.

        Returns:
            windowData JSON, or {"error": "No active window found"}
        """
        try:
            window = self._resolve_active()
            result = json.dumps(window.to_window_data())
            logger.debug(f"Returning window data: {result}")
            return result

        except NoActiveWindowError as e:
            logger.info(e.message)
            return error_json(e.message)
        except Exception as e:
            logger.error(f"Error in GetActiveWindowInfo: {e}")
            return error_json(str(e))

    def _resolve_active(self) -> WindowDescriptor:
        """
        Raises:
            NoActiveWindowError: Nothing focused and no normal window exists
        """
        window = self.backend.focused_window()
        if window is not None:
            return window

        for candidate in self.backend.list_windows():
            if candidate.window_type == WindowType.NORMAL:
                return candidate

        raise NoActiveWindowError()

    def window_info(self, title_query: str) -> str:
        """Window whose title contains title_query (first match).

        Returns:
            windowData JSON, or an error payload naming the query
        """
        try:
            selector = TitleSubstring(query=title_query)
            window = first_match(selector, self.backend.list_windows())
            if window is None:
                raise WindowNotFoundError(selector.describe())

            return json.dumps(window.to_window_data())

        except WindowNotFoundError as e:
            logger.info(e.message)
            return error_json(e.message)
        except Exception as e:
            logger.error(f"Error in GetWindowInfo: {e}")
            return error_json(str(e))

    def monitor_layout(self) -> List[Dict[str, Any]]:
        """Monitor list with exactly one primary entry (empty list allowed).

        Built from a single list_monitors() snapshot.
        """
        return [monitor.to_monitor_data() for monitor in self.backend.list_monitors()]

    def monitor_info(self) -> str:
        """Serialized monitor layout; an empty list on backend failure."""
        try:
            result = json.dumps(self.monitor_layout())
            logger.debug(f"Returning monitor data: {result}")
            return result
        except Exception as e:
            logger.error(f"Error in GetMonitorInfo: {e}")
            return json.dumps([])
