"""
Window matching.

Resolves a selector to at most one window. Candidates are scanned in the
order the backend enumerates them and the first match wins; no ranking, no
reordering. A window with no title (or no class) never matches a title (or
class) test, not even for an empty query.
"""

import logging
from typing import Iterable, Optional

from .backend import WindowBackend
from .models import (
    MatchResult,
    Selector,
    TitleSubstring,
    WindowDescriptor,
    WindowType,
    WmClass,
    WmClassAndTitle,
)

logger = logging.getLogger(__name__)


def title_matches(title: Optional[str], query: str) -> bool:
    """Case-insensitive substring test; empty or missing title never matches."""
    return bool(title) and query.lower() in title.lower()


def class_matches(wm_class: Optional[str], query: str) -> bool:
    """Case-insensitive equality test; empty or missing class never matches."""
    return bool(wm_class) and wm_class.lower() == query.lower()


def selector_matches(selector: Selector, window: WindowDescriptor) -> bool:
    """Apply a selector's matching rule to a single window."""
    if isinstance(selector, TitleSubstring):
        return title_matches(window.title, selector.query)

    if isinstance(selector, WmClass):
        return class_matches(window.wm_class, selector.query)

    if isinstance(selector, WmClassAndTitle):
        return (
            class_matches(window.wm_class, selector.class_query)
            and title_matches(window.title, selector.title_query)
        )

    raise TypeError(f"Unsupported selector: {type(selector).__name__}")


def first_match(selector: Selector, windows: Iterable[WindowDescriptor]) -> MatchResult:
    """First window in enumeration order satisfying selector."""
    for window in windows:
        if selector_matches(selector, window):
            return window
    return None


class WindowMatcher:
    """Resolves selectors against a live window catalog."""

    def __init__(self, backend: WindowBackend):
        self.backend = backend

    def resolve(self, selector: Selector) -> MatchResult:
        """Resolve selector against a fresh enumeration.

        Raises:
            BackendError: If the window catalog cannot be read
        """
        windows = self.backend.list_windows()
        match = first_match(selector, windows)

        if match is None:
            logger.info(f"Window with {selector.describe()} not found")
            if not isinstance(selector, TitleSubstring):
                self.log_available_windows(windows)
        else:
            logger.debug(f"Resolved {selector.describe()} to window {match.id}")

        return match

    @staticmethod
    def log_available_windows(windows: Iterable[WindowDescriptor]) -> None:
        """Debug listing of normal windows, to help callers fix a selector."""
        if not logger.isEnabledFor(logging.DEBUG):
            return

        logger.debug("Available windows:")
        for index, window in enumerate(windows):
            if window.window_type == WindowType.NORMAL:
                title = window.title or "No title"
                wm_class = window.wm_class or "No class"
                logger.debug(f'  {index}: "{wm_class}" - "{title}"')
