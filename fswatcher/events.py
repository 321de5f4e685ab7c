"""Change event flags and the event record delivered to callbacks."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntFlag

from .errors import ErrorCode, FswatchError


class EventFlag(IntFlag):
    """Backend-agnostic change flags; each is a power of two."""

    NoOp = 0
    PlatformSpecific = 1 << 0
    Created = 1 << 1
    Updated = 1 << 2
    Removed = 1 << 3
    Renamed = 1 << 4
    OwnerModified = 1 << 5
    AttributeModified = 1 << 6
    MovedFrom = 1 << 7
    MovedTo = 1 << 8
    IsFile = 1 << 9
    IsDir = 1 << 10
    IsSymLink = 1 << 11
    Link = 1 << 12
    Overflow = 1 << 13
    CloseWrite = 1 << 14


ALL_EVENT_FLAGS: tuple[EventFlag, ...] = (
    EventFlag.NoOp,
    EventFlag.PlatformSpecific,
    EventFlag.Created,
    EventFlag.Updated,
    EventFlag.Removed,
    EventFlag.Renamed,
    EventFlag.OwnerModified,
    EventFlag.AttributeModified,
    EventFlag.MovedFrom,
    EventFlag.MovedTo,
    EventFlag.IsFile,
    EventFlag.IsDir,
    EventFlag.IsSymLink,
    EventFlag.Link,
    EventFlag.Overflow,
    EventFlag.CloseWrite,
)

_FLAGS_BY_NAME = {flag.name: flag for flag in ALL_EVENT_FLAGS}
_NAMES_BY_VALUE = {int(flag): flag.name for flag in ALL_EVENT_FLAGS}


def get_event_flag_by_name(name: str) -> EventFlag:
    """Return the flag called ``name``; raise FswatchError if there is none."""
    try:
        return _FLAGS_BY_NAME[name]
    except (KeyError, TypeError):
        raise FswatchError(f"Unknown event type: {name}", ErrorCode.UNKNOWN_VALUE) from None


def get_event_flag_name(flag: EventFlag | int) -> str:
    """Return the name of a single flag; raise FswatchError if it is unknown."""
    try:
        return _NAMES_BY_VALUE[int(flag)]
    except (KeyError, TypeError, ValueError):
        raise FswatchError(f"Unknown event type: {flag}", ErrorCode.UNKNOWN_VALUE) from None


@dataclass(frozen=True)
class Event:
    """A change observed on ``path`` at ``time`` with the given flags."""

    path: str
    time: float
    flags: tuple[EventFlag, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", tuple(EventFlag(f) for f in self.flags))