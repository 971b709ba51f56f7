"""
Method Channel

Request-handler registry: maps request names to handler functions and turns
every call into a MethodResult. Unknown names get a "not implemented" result
and failing handlers get an error result, so nothing raised by a handler
crosses the channel boundary.

Usage:
    channel = MethodChannel("reachability/network")
    channel.register("ping", lambda call: "pong")

    result = channel.invoke("ping")
    result.value            # "pong"
    channel.invoke("nope").status  # ResultStatus.NOT_IMPLEMENTED
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

# Error code reported when a handler raises
HANDLER_ERROR = "HANDLER_ERROR"


class ResultStatus(Enum):
    """Outcome of a method call"""

    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass(frozen=True)
class MethodCall:
    """A request arriving on a channel"""

    method: str
    arguments: Any = None


@dataclass(frozen=True)
class MethodResult:
    """Response to a MethodCall"""

    status: ResultStatus
    value: Any = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @classmethod
    def success(cls, value: Any = None) -> "MethodResult":
        return cls(status=ResultStatus.SUCCESS, value=value)

    @classmethod
    def error(cls, code: str, message: str) -> "MethodResult":
        return cls(
            status=ResultStatus.ERROR,
            error_code=code,
            error_message=message,
        )

    @classmethod
    def not_implemented(cls) -> "MethodResult":
        return cls(status=ResultStatus.NOT_IMPLEMENTED)

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.SUCCESS

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict form (for JSON output)"""
        data: Dict[str, Any] = {"status": self.status.value}
        if self.status is ResultStatus.SUCCESS:
            data["value"] = self.value
        elif self.status is ResultStatus.ERROR:
            data["code"] = self.error_code
            data["message"] = self.error_message
        return data


MethodHandler = Callable[[MethodCall], Any]


class MethodChannel:
    """
    Named registry of method handlers.

    Registration is thread-safe. Handlers run outside the registry lock, so
    a slow handler never blocks other callers or registrations.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(__name__)
        self.name = name

        self._handlers: Dict[str, MethodHandler] = {}
        self._lock = threading.Lock()

    def register(self, method: str, handler: MethodHandler) -> None:
        """
        Register a handler for a method name.

        The handler receives the MethodCall and returns the success value.
        Registering an existing name replaces the previous handler.

        Args:
            method: Request name
            handler: Callable taking a MethodCall
        """
        with self._lock:
            if method in self._handlers:
                self.logger.warning(
                    f"[{self.name}] Replacing handler for '{method}'",
                )
            self._handlers[method] = handler

        self.logger.debug(f"[{self.name}] Registered '{method}'")

    def unregister(self, method: str) -> bool:
        """
        Remove a handler.

        Returns:
            True if a handler was removed, False if none was registered
        """
        with self._lock:
            return self._handlers.pop(method, None) is not None

    def has_handler(self, method: str) -> bool:
        with self._lock:
            return method in self._handlers

    @property
    def methods(self) -> List[str]:
        """Registered method names, sorted"""
        with self._lock:
            return sorted(self._handlers)

    def handle(self, call: MethodCall) -> MethodResult:
        """
        Dispatch a call to its handler.

        Args:
            call: Incoming request

        Returns:
            success(value) from the handler, not_implemented() for unknown
            names, error(HANDLER_ERROR, ...) if the handler raised
        """
        with self._lock:
            handler = self._handlers.get(call.method)

        if handler is None:
            self.logger.debug(f"[{self.name}] Not implemented: '{call.method}'")
            return MethodResult.not_implemented()

        try:
            value = handler(call)
        except Exception as e:
            self.logger.error(
                f"[{self.name}] Handler for '{call.method}' failed: {e}",
                exc_info=True,
            )
            return MethodResult.error(HANDLER_ERROR, str(e))

        return MethodResult.success(value)

    def invoke(self, method: str, arguments: Any = None) -> MethodResult:
        """Shortcut for handle(MethodCall(method, arguments))"""
        return self.handle(MethodCall(method=method, arguments=arguments))

    def __repr__(self) -> str:
        return f"MethodChannel(name={self.name!r}, methods={self.methods})"
