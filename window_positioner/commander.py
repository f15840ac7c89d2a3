"""Geometry commander: unmaximize, then move/resize the window frame."""

import logging

from .backend import WindowBackend
from .models import Rect, WindowDescriptor

logger = logging.getLogger(__name__)


class GeometryCommander:
    """Applies a target rectangle to a resolved window.

    No rollback: if unmaximize succeeds and the resize fails, the window is
    left unmaximized at its previous position.
    """

    def __init__(self, backend: WindowBackend):
        self.backend = backend

    def apply(self, window: WindowDescriptor, rect: Rect) -> bool:
        """
        Move and resize a window.

        Args:
            window: Window resolved by the matcher
            rect: Target frame rectangle

        Returns:
            True on success, False if the backend raised in either step
        """
        try:
            # Move/resize is ignored on maximized windows, whatever the axis
            self.backend.unmaximize(window)
            self.backend.move_resize_frame(window, rect)
        except Exception as e:
            logger.error(f"Error moving window {window.id}: {e}")
            return False

        logger.info(
            f'Successfully positioned "{window.title}" ({window.wm_class}) to {rect}'
        )
        return True
