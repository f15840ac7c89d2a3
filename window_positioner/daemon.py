"""
Window Positioner Daemon

Connects to the Sway/i3 IPC socket, exports the WindowPositioner D-Bus
interface on the session bus and serves requests one at a time on the GLib
main loop.
"""
# Module can be run with: python -m window_positioner

import argparse
import logging
import signal
import sys
from pathlib import Path
from typing import List, Optional

from .backend import SwayBackend
from .commander import GeometryCommander
from .config import DEFAULT_CONFIG_FILE, LOG_LEVELS, ServiceConfig, load_config
from .dispatcher import RequestDispatcher
from .errors import WindowPositionerError
from .introspection import IntrospectionResponder
from .matcher import WindowMatcher
from .service import ServiceHandle

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def build_service(config: ServiceConfig, backend=None, bus=None) -> ServiceHandle:
    """Wire backend, matcher, commander, responder and dispatcher together.

    Args:
        config: Daemon configuration
        backend: WindowBackend to use (connects to Sway/i3 if None)
        bus: pydbus bus (session bus if None)

    Raises:
        BackendError: If the window manager cannot be reached
    """
    if backend is None:
        backend = SwayBackend.connect(config.ipc_socket)

    dispatcher = RequestDispatcher(
        matcher=WindowMatcher(backend),
        commander=GeometryCommander(backend),
        responder=IntrospectionResponder(backend),
    )
    return ServiceHandle(dispatcher, config, backend, bus=bus)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="window-positioner-daemon",
        description="Expose window positioning over D-Bus"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        help="Override configured log level"
    )
    parser.add_argument(
        "--socket",
        type=Path,
        help="Sway/i3 IPC socket path (default: autodetect)"
    )
    return parser.parse_args(argv)


def run(handle: ServiceHandle) -> None:
    """Serve requests until SIGINT/SIGTERM."""
    from gi.repository import GLib

    loop = GLib.MainLoop()

    def on_signal():
        logger.info("Received shutdown signal")
        loop.quit()
        return GLib.SOURCE_REMOVE

    for sig in (signal.SIGINT, signal.SIGTERM):
        GLib.unix_signal_add(GLib.PRIORITY_DEFAULT, sig, on_signal)

    try:
        handle.start()
        logger.info("Daemon started successfully")
        loop.run()
    finally:
        handle.stop()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except WindowPositionerError as e:
        configure_logging("INFO")
        logger.error(e.message)
        return 1

    updates = {}
    if args.log_level:
        updates["log_level"] = args.log_level
    if args.socket:
        updates["ipc_socket"] = args.socket
    config = config.model_copy(update=updates)

    configure_logging(config.log_level)
    logger.info("Starting Window Positioner Daemon")

    try:
        handle = build_service(config)
        run(handle)
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except Exception as e:
        logger.error(f"Fatal error: {e}")
        return 1

    logger.info("Daemon stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
