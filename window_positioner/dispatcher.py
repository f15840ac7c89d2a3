"""
Request dispatcher.

Maps each remote operation name to a handler with a fixed, typed signature.
No business logic beyond argument checking and delegation: domain failures
come back as False or an error payload, and only malformed requests raise.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Tuple

from .commander import GeometryCommander
from .errors import ErrorCode, InvalidRequestError
from .introspection import IntrospectionResponder
from .matcher import WindowMatcher
from .models import PositionRequest, Rect, Selector, TitleSubstring, WmClass, WmClassAndTitle

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperationSpec:
    """Signature of one remote operation."""

    name: str
    arg_names: Tuple[str, ...]
    arg_types: Tuple[type, ...]
    result_type: type


_GEOMETRY_NAMES = ("x", "y", "width", "height")
_GEOMETRY_TYPES = (int, int, int, int)

OPERATIONS: Dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec("PositionWindow", ("windowTitle",) + _GEOMETRY_NAMES, (str,) + _GEOMETRY_TYPES, bool),
        OperationSpec("PositionWindowByClass", ("wmClass",) + _GEOMETRY_NAMES, (str,) + _GEOMETRY_TYPES, bool),
        OperationSpec(
            "PositionWindowByClassAndTitle",
            ("wmClass", "titlePattern") + _GEOMETRY_NAMES,
            (str, str) + _GEOMETRY_TYPES,
            bool,
        ),
        OperationSpec("GetActiveWindowInfo", (), (), str),
        OperationSpec("GetMonitorInfo", (), (), str),
        OperationSpec("GetWindowInfo", ("windowTitle",), (str,), str),
    )
}


class RequestDispatcher:
    """Routes named requests to the matcher/commander or the responder."""

    def __init__(
        self,
        matcher: WindowMatcher,
        commander: GeometryCommander,
        responder: IntrospectionResponder,
    ):
        self.matcher = matcher
        self.commander = commander
        self.responder = responder
        self._handlers: Dict[str, Callable[..., Any]] = {
            name: getattr(self, name) for name in OPERATIONS
        }

    def dispatch(self, operation: str, *args: Any) -> Any:
        """
        Validate and route a request.

        Args:
            operation: Operation name from OPERATIONS
            *args: Positional arguments in interface order

        Returns:
            bool for positioning operations, JSON string for queries

        Raises:
            InvalidRequestError: Unknown operation or wrong argument count/type
        """
        try:
            spec = OPERATIONS.get(operation)
            if spec is None:
                raise InvalidRequestError(
                    ErrorCode.UNKNOWN_OPERATION,
                    f"Unknown operation: {operation}",
                    operation=operation,
                )
            validate_args(spec, args)
        except InvalidRequestError as e:
            logger.warning(f"Rejected request: {e.to_dict()}")
            raise

        return self._handlers[operation](*args)

    # Positioning

    def _position(self, selector: Selector, x: int, y: int, width: int, height: int) -> bool:
        request = PositionRequest(
            selector=selector,
            rect=Rect(x=x, y=y, width=width, height=height),
        )

        try:
            window = self.matcher.resolve(request.selector)
            if window is None:
                return False
            return self.commander.apply(window, request.rect)
        except Exception as e:
            logger.error(f"Error positioning window with {selector.describe()}: {e}")
            return False

    def PositionWindow(self, windowTitle: str, x: int, y: int, width: int, height: int) -> bool:
        logger.info(f'PositionWindow: "{windowTitle}" to {x},{y} {width}x{height}')
        return self._position(TitleSubstring(query=windowTitle), x, y, width, height)

    def PositionWindowByClass(self, wmClass: str, x: int, y: int, width: int, height: int) -> bool:
        logger.info(f'PositionWindowByClass: "{wmClass}" to {x},{y} {width}x{height}')
        return self._position(WmClass(query=wmClass), x, y, width, height)

    def PositionWindowByClassAndTitle(
        self, wmClass: str, titlePattern: str, x: int, y: int, width: int, height: int
    ) -> bool:
        logger.info(
            f'PositionWindowByClassAndTitle: "{wmClass}" + "{titlePattern}" '
            f"to {x},{y} {width}x{height}"
        )
        selector = WmClassAndTitle(class_query=wmClass, title_query=titlePattern)
        return self._position(selector, x, y, width, height)

    # Introspection

    def GetActiveWindowInfo(self) -> str:
        logger.info("GetActiveWindowInfo called")
        return self.responder.active_window()

    def GetMonitorInfo(self) -> str:
        logger.info("GetMonitorInfo called")
        return self.responder.monitor_info()

    def GetWindowInfo(self, windowTitle: str) -> str:
        logger.info(f'GetWindowInfo: "{windowTitle}"')
        return self.responder.window_info(windowTitle)


def validate_args(spec: OperationSpec, args: Tuple[Any, ...]) -> None:
    """Check argument count and primitive types against the operation signature.

    bool is rejected where int is expected.

    Raises:
        InvalidRequestError: On count or type mismatch
    """
    if len(args) != len(spec.arg_types):
        raise InvalidRequestError(
            ErrorCode.INVALID_ARGUMENTS,
            f"{spec.name} expects {len(spec.arg_types)} arguments, got {len(args)}",
            operation=spec.name,
        )

    for name, expected, value in zip(spec.arg_names, spec.arg_types, args):
        if isinstance(value, bool) and expected is not bool:
            ok = False
        else:
            ok = isinstance(value, expected)

        if not ok:
            raise InvalidRequestError(
                ErrorCode.INVALID_ARGUMENTS,
                f"{spec.name}: argument '{name}' must be {expected.__name__}, "
                f"got {type(value).__name__}",
                operation=spec.name,
            )
