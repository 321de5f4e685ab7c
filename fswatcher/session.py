"""Monitoring sessions: build, configure, run and stop a monitor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ErrorCode, FswatchError
from .events import Event
from .monitor_factory import MonitorType, create_monitor
from .poll_monitor import PollMonitor
from .settings import SessionCallback, SessionSettings, _fail, _set_last_error


@dataclass(frozen=True)
class _CallbackContext:
    session: "Session"
    callback: SessionCallback
    data: Any


def _callback_proxy(events: list[Event], context: _CallbackContext | None) -> None:
    if context is None:
        raise FswatchError("The callback context has not been set.", ErrorCode.MISSING_CONTEXT)
    context.callback(list(events), context.data)


class Session(SessionSettings):
    """A monitoring session wrapping one monitor.

    The monitor is created on the first :meth:`start` from the session's
    settings; the callback and its data are captured at that moment.
    """

    def __init__(self, monitor_type: MonitorType | int = MonitorType.SYSTEM_DEFAULT) -> None:
        super().__init__(monitor_type)
        self._monitor: PollMonitor | None = None
        self._closed = False

    @property
    def monitor(self) -> PollMonitor | None:
        """The monitor built by this session, if any."""
        return self._monitor

    @property
    def closed(self) -> bool:
        """Whether the session has been closed."""
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise _fail("The session is unknown.", ErrorCode.SESSION_UNKNOWN)

    def _create_monitor(self) -> PollMonitor:
        if self.callback is None:
            raise _fail("The callback has not been set.", ErrorCode.CALLBACK_NOT_SET)
        if self._monitor is not None:
            raise _fail("The session already contains a monitor.",
                        ErrorCode.MONITOR_ALREADY_EXISTS)
        if not self.paths:
            raise _fail("The paths to watch have not been set.", ErrorCode.PATHS_NOT_SET)

        context = _CallbackContext(self, self.callback, self.data)
        try:
            monitor = create_monitor(self.monitor_type, list(self.paths),
                                     _callback_proxy, context)
        except FswatchError as exc:
            _set_last_error(exc.code)
            raise
        self._monitor = monitor
        return monitor

    def start(self) -> None:
        """Configure and run the monitor; blocks until the monitor is stopped."""
        self._check_open()
        monitor = self._monitor if self._monitor is not None else self._create_monitor()

        if monitor.is_running():
            raise _fail("A monitor is already running in this session.",
                        ErrorCode.MONITOR_ALREADY_RUNNING)

        monitor.allow_overflow = self.allow_overflow
        monitor.filters = list(self.filters)
        monitor.event_type_filters = list(self.event_type_filters)
        monitor.follow_symlinks = self.follow_symlinks
        if self.latency:
            monitor.latency = self.latency
        monitor.recursive = self.recursive
        monitor.directory_only = self.directory_only

        try:
            monitor.start()
        except FswatchError as exc:
            _set_last_error(exc.code)
            raise
        _set_last_error(ErrorCode.OK)

    def stop(self) -> None:
        """Ask a running monitor to stop; does nothing if it is not running."""
        self._check_open()
        if self._monitor is None:
            raise _fail("The session has no monitor.", ErrorCode.UNKNOWN_MONITOR_TYPE)
        if self._monitor.is_running():
            self._monitor.stop()
        _set_last_error(ErrorCode.OK)

    def is_running(self) -> bool:
        """Return whether the session has a monitor and it is running."""
        if self._closed or self._monitor is None:
            return False
        return self._monitor.is_running()

    def close(self) -> None:
        """Release the monitor and invalidate the session.

        Raises FswatchError with ``MONITOR_ALREADY_RUNNING`` if the monitor
        is still running.
        """
        if self._closed:
            _set_last_error(ErrorCode.OK)
            return
        if self._monitor is not None:
            if self._monitor.is_running():
                raise _fail("A monitor is running in this session.",
                            ErrorCode.MONITOR_ALREADY_RUNNING)
            self._monitor.context = None
            self._monitor = None
        self._closed = True
        _set_last_error(ErrorCode.OK)

    def __enter__(self) -> "Session":
        self._check_open()
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        if self._closed:
            return
        if self.is_running():
            self.stop()
            # The loop finishes on its own; keep its context for the last pass.
            self._monitor = None
            self._closed = True
            _set_last_error(ErrorCode.OK)
            return
        self.close()