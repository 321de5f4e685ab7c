"""Path filters and event type filters."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable

from .errors import ErrorCode, FswatchError
from .events import EventFlag


class FilterType(IntEnum):
    """Whether a path filter includes or excludes matching paths."""

    INCLUDE = 0
    EXCLUDE = 1


@dataclass(frozen=True)
class MonitorFilter:
    """A regular expression that includes or excludes event paths."""

    text: str
    type: FilterType = FilterType.EXCLUDE
    case_sensitive: bool = True
    extended: bool = False
    _regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", FilterType(self.type))
        flags = 0 if self.case_sensitive else re.IGNORECASE
        try:
            compiled = re.compile(self.text, flags)
        except (re.error, TypeError) as exc:
            raise FswatchError(
                f"An error occurred during the compilation of {self.text}: {exc}",
                ErrorCode.INVALID_REGEX,
            ) from exc
        object.__setattr__(self, "_regex", compiled)

    def matches(self, path: str) -> bool:
        """Return whether the expression matches anywhere in ``path``."""
        return self._regex.search(path) is not None


@dataclass(frozen=True)
class EventTypeFilter:
    """Accepts events carrying the given flag."""

    flag: EventFlag

    def __post_init__(self) -> None:
        object.__setattr__(self, "flag", EventFlag(self.flag))


def accept_path(filters: Iterable[MonitorFilter], path: str) -> bool:
    """Decide whether ``path`` passes ``filters``.

    A path matching an including filter is accepted whatever the other
    filters say; a path matching only excluding filters is rejected; a path
    matching no filter is accepted.
    """
    excluded = False
    for monitor_filter in filters:
        if not monitor_filter.matches(path):
            continue
        if monitor_filter.type is FilterType.INCLUDE:
            return True
        excluded = True
    return not excluded