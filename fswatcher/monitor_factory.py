"""Registry of the available monitors and factory functions to create them."""

from __future__ import annotations

import os
from enum import IntEnum
from typing import Any, Iterable

from .errors import ErrorCode, FswatchError
from .poll_monitor import Callback, PollMonitor


class MonitorType(IntEnum):
    """Monitor kinds; ``SYSTEM_DEFAULT`` picks the platform's default monitor."""

    SYSTEM_DEFAULT = 0
    FSEVENTS = 1
    KQUEUE = 2
    INOTIFY = 3
    WINDOWS = 4
    POLL = 5
    FEN = 6


_DEFAULT_MONITOR_TYPE = MonitorType.POLL

_CREATORS = {
    MonitorType.POLL: PollMonitor,
}

_TYPES_BY_NAME = {
    "poll_monitor": MonitorType.POLL,
}


def _unsupported(monitor_type: object) -> FswatchError:
    return FswatchError("Unsupported monitor.", ErrorCode.UNKNOWN_MONITOR_TYPE)


def create_monitor(monitor_type: MonitorType | int,
                   paths: Iterable[str | os.PathLike[str]],
                   callback: Callback,
                   context: Any = None) -> PollMonitor:
    """Create a monitor of ``monitor_type`` watching ``paths``.

    Raises FswatchError with ``UNKNOWN_MONITOR_TYPE`` if the type is not
    available.
    """
    try:
        kind = MonitorType(monitor_type)
    except (ValueError, TypeError):
        raise _unsupported(monitor_type) from None

    if kind is MonitorType.SYSTEM_DEFAULT:
        kind = _DEFAULT_MONITOR_TYPE

    creator = _CREATORS.get(kind)
    if creator is None:
        raise _unsupported(kind)
    return creator(list(paths), callback, context)


def create_monitor_by_name(name: str,
                           paths: Iterable[str | os.PathLike[str]],
                           callback: Callback,
                           context: Any = None) -> PollMonitor | None:
    """Create the monitor registered as ``name``; return None if there is none."""
    kind = _TYPES_BY_NAME.get(name)
    if kind is None:
        return None
    return create_monitor(kind, paths, callback, context)


def get_types() -> list[str]:
    """Return the names of the available monitor types, in sorted order."""
    return sorted(_TYPES_BY_NAME)


def exists_type(name: str) -> bool:
    """Return whether a monitor type called ``name`` is available."""
    return name in _TYPES_BY_NAME