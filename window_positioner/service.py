"""
D-Bus control surface.

Exports the org.gnome.Shell.WindowPositioner interface on the session bus via
pydbus. The interface XML and the object path are the compatibility surface
for clients and stay fixed across versions.
"""

import logging
from typing import Optional

from .backend import WindowBackend
from .config import ServiceConfig
from .dispatcher import RequestDispatcher

logger = logging.getLogger(__name__)

INTERFACE_XML = """
<node>
    <interface name="org.gnome.Shell.WindowPositioner">
        <method name="PositionWindow">
            <arg type="s" direction="in" name="windowTitle"/>
            <arg type="i" direction="in" name="x"/>
            <arg type="i" direction="in" name="y"/>
            <arg type="i" direction="in" name="width"/>
            <arg type="i" direction="in" name="height"/>
            <arg type="b" direction="out" name="success"/>
        </method>
        <method name="PositionWindowByClass">
            <arg type="s" direction="in" name="wmClass"/>
            <arg type="i" direction="in" name="x"/>
            <arg type="i" direction="in" name="y"/>
            <arg type="i" direction="in" name="width"/>
            <arg type="i" direction="in" name="height"/>
            <arg type="b" direction="out" name="success"/>
        </method>
        <method name="PositionWindowByClassAndTitle">
            <arg type="s" direction="in" name="wmClass"/>
            <arg type="s" direction="in" name="titlePattern"/>
            <arg type="i" direction="in" name="x"/>
            <arg type="i" direction="in" name="y"/>
            <arg type="i" direction="in" name="width"/>
            <arg type="i" direction="in" name="height"/>
            <arg type="b" direction="out" name="success"/>
        </method>
        <method name="GetActiveWindowInfo">
            <arg type="s" direction="out" name="windowData"/>
        </method>
        <method name="GetMonitorInfo">
            <arg type="s" direction="out" name="monitorData"/>
        </method>
        <method name="GetWindowInfo">
            <arg type="s" direction="in" name="windowTitle"/>
            <arg type="s" direction="out" name="windowData"/>
        </method>
    </interface>
</node>
"""


class WindowPositionerObject:
    """Object exported on the bus; every method delegates to the dispatcher."""

    dbus = INTERFACE_XML

    def __init__(self, dispatcher: RequestDispatcher):
        self.dispatcher = dispatcher

    def PositionWindow(self, windowTitle, x, y, width, height):
        return self.dispatcher.dispatch("PositionWindow", windowTitle, x, y, width, height)

    def PositionWindowByClass(self, wmClass, x, y, width, height):
        return self.dispatcher.dispatch("PositionWindowByClass", wmClass, x, y, width, height)

    def PositionWindowByClassAndTitle(self, wmClass, titlePattern, x, y, width, height):
        return self.dispatcher.dispatch(
            "PositionWindowByClassAndTitle", wmClass, titlePattern, x, y, width, height
        )

    def GetActiveWindowInfo(self):
        return self.dispatcher.dispatch("GetActiveWindowInfo")

    def GetMonitorInfo(self):
        return self.dispatcher.dispatch("GetMonitorInfo")

    def GetWindowInfo(self, windowTitle):
        return self.dispatcher.dispatch("GetWindowInfo", windowTitle)


class ServiceHandle:
    """Process-scoped publication of the control surface.

    Acquired once with start() and released once with stop(). The handle
    owns the backend and closes it on stop().
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher,
        config: ServiceConfig,
        backend: WindowBackend,
        bus=None,
    ):
        """
        Initialize service handle.

        Args:
            dispatcher: Dispatcher the exported object delegates to
            config: Bus name and object path to publish under
            backend: Window-management connection released on stop()
            bus: pydbus bus (session bus if None)
        """
        self.dispatcher = dispatcher
        self.config = config
        self.backend = backend
        self.bus = bus
        self.exported = WindowPositionerObject(dispatcher)
        self._publication = None

    @property
    def is_running(self) -> bool:
        return self._publication is not None

    def start(self) -> None:
        """Own the bus name and export the object."""
        if self.is_running:
            logger.debug("Service already published")
            return

        logger.info("Publishing window positioner D-Bus interface...")

        if self.bus is None:
            from pydbus import SessionBus
            self.bus = SessionBus()

        self._publication = self.bus.publish(
            self.config.bus_name,
            (self.config.object_path, self.exported),
        )

        logger.info(
            f"D-Bus interface exported at {self.config.object_path} "
            f"(bus name {self.config.bus_name})"
        )

    def stop(self) -> None:
        """Unexport the object and release the backend connection."""
        if self.backend is None:
            return

        if self.is_running:
            logger.info("Unpublishing window positioner D-Bus interface...")
            try:
                self._publication.unpublish()
            except Exception as e:
                logger.error(f"Failed to unpublish D-Bus interface: {e}")
            finally:
                self._publication = None

        self.backend.close()
        self.backend = None
        logger.info("Service stopped")


def get_proxy(config: Optional[ServiceConfig] = None, bus=None):
    """Client-side proxy for the exported interface."""
    config = config or ServiceConfig()

    if bus is None:
        from pydbus import SessionBus
        bus = SessionBus()

    return bus.get(config.bus_name, config.object_path)
