"""A monitor that detects changes by periodically stating the watched paths."""

from __future__ import annotations

import os
import stat
import sys
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from .errors import ErrorCode, FswatchError
from .events import Event, EventFlag
from .filters import EventTypeFilter, MonitorFilter, accept_path
from .log import flogf
from .path_utils import get_directory_entries, stat_path

MIN_POLL_LATENCY = 1.0

Callback = Callable[[list[Event], Any], None]
_Visitor = Callable[[str, os.stat_result], bool]


def _elog(function: str, fmt: str, *args: object) -> None:
    flogf(sys.stderr, "%s: ", function)
    flogf(sys.stderr, fmt, *args)


@dataclass(frozen=True)
class WatchedFileInfo:
    """Modification and status change times of a tracked path, in seconds."""

    mtime: int
    ctime: int

    @classmethod
    def from_stat(cls, st: os.stat_result) -> "WatchedFileInfo":
        return cls(int(st.st_mtime), int(st.st_ctime))


class PollMonitor:
    """Stat-based monitor comparing successive scans of the watched paths."""

    def __init__(self, paths: Iterable[str | os.PathLike[str]], callback: Callback,
                 context: Any = None) -> None:
        if callback is None:
            raise FswatchError("Callback cannot be null.", ErrorCode.INVALID_CALLBACK)
        self.paths = [os.fspath(p) for p in paths]
        self.callback = callback
        self.context = context
        self.latency = 1.0
        self.recursive = False
        self.follow_symlinks = False
        self.allow_overflow = False
        self.directory_only = False
        self.filters: list[MonitorFilter] = []
        self.event_type_filters: list[EventTypeFilter] = []
        self.properties: dict[str, str] = {}

        self._previous: dict[str, WatchedFileInfo] = {}
        self._new: dict[str, WatchedFileInfo] = {}
        self._events: list[Event] = []
        self._curr_time = time.time()

        self._lock = threading.Lock()
        self._wake = threading.Event()
        self._running = False
        self._should_stop = False

    def _initial_visit(self, path: str, st: os.stat_result) -> bool:
        if path in self._previous:
            return False
        self._previous[path] = WatchedFileInfo.from_stat(st)
        return True

    def _intermediate_visit(self, path: str, st: os.stat_result) -> bool:
        if path in self._new:
            return False
        info = WatchedFileInfo.from_stat(st)
        self._new[path] = info

        previous = self._previous.pop(path, None)
        if previous is None:
            self._events.append(Event(path, self._curr_time, (EventFlag.Created,)))
            return True

        flags = []
        if info.mtime > previous.mtime:
            flags.append(EventFlag.Updated)
        if info.ctime > previous.ctime:
            flags.append(EventFlag.AttributeModified)
        if flags:
            self._events.append(Event(path, self._curr_time, tuple(flags)))
        return True

    def _scan(self, path: str, visit: _Visitor) -> None:
        try:
            if not os.path.lexists(path):
                return
            if self.follow_symlinks and os.path.islink(path):
                target = os.path.join(os.path.dirname(path), os.readlink(path))
                self._scan(target, visit)
                return
            if not accept_path(self.filters, path):
                return
            st = stat_path(path, self.follow_symlinks)
            if st is None or not visit(path, st):
                return
            if not self.recursive or not stat.S_ISDIR(st.st_mode):
                return
            for entry in get_directory_entries(path):
                self._scan(entry.path, visit)
        except OSError as exc:
            _elog("scan", "Filesystem error: %s", exc)

    def collect_initial_data(self) -> None:
        """Record the state of every watched path as the baseline."""
        for path in self.paths:
            self._scan(path, self._initial_visit)

    def collect_data(self) -> list[Event]:
        """Rescan the watched paths and return the changes since the last scan."""
        self._events = []
        for path in self.paths:
            self._scan(path, self._intermediate_visit)
        for path in self._previous:
            self._events.append(Event(path, self._curr_time, (EventFlag.Removed,)))
        self._previous = self._new
        self._new = {}
        events, self._events = self._events, []
        return events

    def notify_events(self, events: Iterable[Event]) -> None:
        """Filter ``events`` by type and path, then pass the rest to the callback."""
        allowed = {f.flag for f in self.event_type_filters}
        accepted = []
        for event in events:
            flags = tuple(f for f in event.flags if not allowed or f in allowed)
            if not flags or not accept_path(self.filters, event.path):
                continue
            accepted.append(Event(event.path, event.time, flags))
        if accepted:
            self.callback(accepted, self.context)

    def _run(self) -> None:
        self.collect_initial_data()
        while True:
            with self._lock:
                if self._should_stop:
                    break
            _elog("run", "Done scanning.\n")
            self._wake.wait(max(self.latency, MIN_POLL_LATENCY))
            self._curr_time = time.time()
            events = self.collect_data()
            if events:
                self.notify_events(events)

    def start(self) -> None:
        """Run the monitor loop in the calling thread until :meth:`stop`."""
        with self._lock:
            if self._running:
                return
            self._running = True
        try:
            self._run()
        finally:
            with self._lock:
                self._running = False
                self._should_stop = False
                self._wake.clear()

    def stop(self) -> None:
        """Ask a running monitor loop to finish."""
        with self._lock:
            self._should_stop = True
            self._wake.set()

    def is_running(self) -> bool:
        """Return whether the monitor loop is running."""
        with self._lock:
            return self._running