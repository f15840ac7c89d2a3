#!/usr/bin/env python3
"""
Window Positioner CLI

Command-line client for the WindowPositioner D-Bus interface.
"""

import argparse
import json
import sys
from typing import List, Optional

from .config import INTERFACE_NAME, OBJECT_PATH, ServiceConfig
from .service import get_proxy


class WindowPositionerCLI:
    """CLI client for the window positioner daemon."""

    def __init__(self, proxy=None, bus_name: str = INTERFACE_NAME):
        """
        Initialize CLI client.

        Args:
            proxy: Pre-built D-Bus proxy (connects lazily if None)
            bus_name: Bus name the daemon owns
        """
        self._proxy = proxy
        self.bus_name = bus_name

    @property
    def proxy(self):
        if self._proxy is None:
            try:
                self._proxy = get_proxy(ServiceConfig(bus_name=self.bus_name))
            except Exception as e:
                raise ConnectionError(
                    f"Daemon not reachable at {self.bus_name} {OBJECT_PATH}: {e}"
                )
        return self._proxy

    def _call(self, method: str, *args):
        """Invoke a D-Bus method on the daemon.

        Raises:
            ConnectionError: If the daemon cannot be reached or the call fails
        """
        proxy = self.proxy
        try:
            return getattr(proxy, method)(*args)
        except Exception as e:
            raise ConnectionError(f"D-Bus call {method} failed: {e}")

    def _report_position(self, success: bool, target: str, args) -> int:
        geometry = f"{args.x},{args.y} {args.width}x{args.height}"
        if success:
            print(f"✅ Positioned {target} to {geometry}")
            return 0

        print(f"❌ Could not position {target}")
        return 1

    def _report_json(self, data: str) -> int:
        payload = json.loads(data)
        print(json.dumps(payload, indent=2))

        if isinstance(payload, dict) and "error" in payload:
            return 1
        return 0

    def cmd_position(self, args) -> int:
        """Position a window by title substring."""
        success = self._call("PositionWindow", args.title, args.x, args.y, args.width, args.height)
        return self._report_position(success, f'window "{args.title}"', args)

    def cmd_position_class(self, args) -> int:
        """Position a window by WM_CLASS."""
        success = self._call(
            "PositionWindowByClass", args.wm_class, args.x, args.y, args.width, args.height
        )
        return self._report_position(success, f'class "{args.wm_class}"', args)

    def cmd_position_class_title(self, args) -> int:
        """Position a window by WM_CLASS and title substring."""
        success = self._call(
            "PositionWindowByClassAndTitle",
            args.wm_class, args.title, args.x, args.y, args.width, args.height,
        )
        return self._report_position(success, f'class "{args.wm_class}" + "{args.title}"', args)

    def cmd_active(self, args) -> int:
        return self._report_json(self._call("GetActiveWindowInfo"))

    def cmd_monitors(self, args) -> int:
        return self._report_json(self._call("GetMonitorInfo"))

    def cmd_info(self, args) -> int:
        return self._report_json(self._call("GetWindowInfo", args.title))


def _add_geometry(parser: argparse.ArgumentParser) -> None:
    for name in ("x", "y", "width", "height"):
        parser.add_argument(name, type=int)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="window-positioner",
        description="Position windows and query window/monitor layout"
    )
    parser.add_argument(
        "--bus-name",
        default=INTERFACE_NAME,
        help=f"Daemon bus name (default: {INTERFACE_NAME})"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    position = subparsers.add_parser("position", help="Position window by title substring")
    position.add_argument("title")
    _add_geometry(position)
    position.set_defaults(handler="cmd_position")

    position_class = subparsers.add_parser("position-class", help="Position window by WM_CLASS")
    position_class.add_argument("wm_class")
    _add_geometry(position_class)
    position_class.set_defaults(handler="cmd_position_class")

    position_both = subparsers.add_parser(
        "position-class-title", help="Position window by WM_CLASS and title substring"
    )
    position_both.add_argument("wm_class")
    position_both.add_argument("title")
    _add_geometry(position_both)
    position_both.set_defaults(handler="cmd_position_class_title")

    active = subparsers.add_parser("active", help="Show active window")
    active.set_defaults(handler="cmd_active")

    monitors = subparsers.add_parser("monitors", help="Show monitor layout")
    monitors.set_defaults(handler="cmd_monitors")

    info = subparsers.add_parser("info", help="Show window by title substring")
    info.add_argument("title")
    info.set_defaults(handler="cmd_info")

    return parser


def main(argv: Optional[List[str]] = None, proxy=None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    cli = WindowPositionerCLI(proxy=proxy, bus_name=args.bus_name)

    try:
        return getattr(cli, args.handler)(args)
    except ConnectionError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
