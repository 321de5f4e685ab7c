"""Configuration of a monitoring session and the per-thread last status."""

from __future__ import annotations

import os
import threading
from typing import Any, Callable

from .errors import ErrorCode, FswatchError
from .events import Event, EventFlag
from .filters import EventTypeFilter, MonitorFilter
from .monitor_factory import MonitorType

SessionCallback = Callable[[list[Event], Any], None]

_state = threading.local()


def _set_last_error(code: ErrorCode | int) -> ErrorCode:
    _state.last_error = ErrorCode(code)
    return _state.last_error


def _fail(message: str, code: ErrorCode) -> FswatchError:
    _set_last_error(code)
    return FswatchError(message, code)


def init_library() -> None:
    """Initialise the library for the calling thread."""
    _set_last_error(ErrorCode.OK)


def last_error() -> ErrorCode:
    """Return the status of the last library call made by the calling thread."""
    return getattr(_state, "last_error", ErrorCode.OK)


class SessionSettings:
    """Everything a session needs to build and configure its monitor.

    Changes take effect the next time the session's monitor is started.
    """

    def __init__(self, monitor_type: MonitorType | int = MonitorType.SYSTEM_DEFAULT) -> None:
        try:
            self.monitor_type = MonitorType(monitor_type)
        except (ValueError, TypeError):
            raise _fail("Unsupported monitor.", ErrorCode.UNKNOWN_MONITOR_TYPE) from None
        self.paths: list[str] = []
        self.callback: SessionCallback | None = None
        self.data: Any = None
        self.latency: float = 0.0
        self.allow_overflow = False
        self.recursive = False
        self.directory_only = False
        self.follow_symlinks = False
        self.filters: list[MonitorFilter] = []
        self.event_type_filters: list[EventTypeFilter] = []
        self.properties: dict[str, str] = {}

    def add_path(self, path: str | os.PathLike[str]) -> None:
        """Add a path to watch; at least one is needed to start a monitor."""
        if path is None:
            raise _fail("Invalid path.", ErrorCode.INVALID_PATH)
        try:
            name = os.fspath(path)
        except TypeError:
            raise _fail("Invalid path.", ErrorCode.INVALID_PATH) from None
        self.paths.append(name)
        _set_last_error(ErrorCode.OK)

    def add_property(self, name: str, value: str) -> None:
        """Set the monitor property ``name`` to ``value``."""
        if name is None or value is None:
            raise _fail("Invalid property.", ErrorCode.INVALID_PROPERTY)
        self.properties[name] = value
        _set_last_error(ErrorCode.OK)

    def add_filter(self, monitor_filter: MonitorFilter) -> None:
        """Add a path filter."""
        self.filters.append(monitor_filter)
        _set_last_error(ErrorCode.OK)

    def add_event_type_filter(self, event_type: EventTypeFilter | EventFlag | int) -> None:
        """Add an event type filter; a bare flag is wrapped in one."""
        if not isinstance(event_type, EventTypeFilter):
            try:
                event_type = EventTypeFilter(EventFlag(event_type))
            except (ValueError, TypeError):
                raise _fail(f"Unknown event type: {event_type}", ErrorCode.UNKNOWN_VALUE) from None
        self.event_type_filters.append(event_type)
        _set_last_error(ErrorCode.OK)

    def set_callback(self, callback: SessionCallback, data: Any = None) -> None:
        """Set the function called with each batch of events and ``data``."""
        if callback is None or not callable(callback):
            raise _fail("Invalid callback.", ErrorCode.INVALID_CALLBACK)
        self.callback = callback
        self.data = data
        _set_last_error(ErrorCode.OK)

    def set_allow_overflow(self, allow_overflow: bool) -> None:
        """Allow the monitor to report an overflow as a change event."""
        self.allow_overflow = bool(allow_overflow)
        _set_last_error(ErrorCode.OK)

    def set_latency(self, latency: float) -> None:
        """Set the latency in seconds; zero keeps the monitor's own default."""
        if latency < 0:
            raise _fail("Invalid latency.", ErrorCode.INVALID_LATENCY)
        self.latency = float(latency)
        _set_last_error(ErrorCode.OK)

    def set_recursive(self, recursive: bool) -> None:
        """Choose whether watched directories are scanned recursively."""
        self.recursive = bool(recursive)
        _set_last_error(ErrorCode.OK)

    def set_directory_only(self, directory_only: bool) -> None:
        """Choose whether only directories are watched in a recursive scan."""
        self.directory_only = bool(directory_only)
        _set_last_error(ErrorCode.OK)

    def set_follow_symlinks(self, follow_symlinks: bool) -> None:
        """Choose whether symbolic links are followed."""
        self.follow_symlinks = bool(follow_symlinks)
        _set_last_error(ErrorCode.OK)