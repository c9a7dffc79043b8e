"""Path and event-type filtering, and bubbling of event flags."""

from __future__ import annotations

import re
import string
from dataclasses import dataclass
from typing import Iterable

from .event import Event, EventFlag
from .exceptions import ErrorCode, FswError
from .filters import FilterType, MonitorFilter

_POSIX_CLASSES = {
    "alpha": "a-zA-Z",
    "digit": "0-9",
    "alnum": "a-zA-Z0-9",
    "upper": "A-Z",
    "lower": "a-z",
    "space": r" \t\n\r\f\v",
    "blank": r" \t",
    "punct": "".join("\\" + ch for ch in string.punctuation),
    "xdigit": "0-9A-Fa-f",
    "cntrl": r"\x00-\x1f\x7f",
    "print": r"\x20-\x7e",
    "graph": r"\x21-\x7e",
}


@dataclass(frozen=True)
class EventTypeFilter:
    """Accepts events of a single type."""

    flag: EventFlag


def _translate_bracket(pattern: str, start: int) -> tuple[str, int]:
    """Translate the bracket expression at *start*; return it and the next index."""
    end = len(pattern)
    index = start + 1
    out = ["["]
    if index < end and pattern[index] == "^":
        out.append("^")
        index += 1
    if index < end and pattern[index] == "]":
        out.append(r"\]")
        index += 1
    while index < end:
        char = pattern[index]
        if char == "]":
            out.append("]")
            return "".join(out), index + 1
        if char == "[" and index + 1 < end and pattern[index + 1] in ":.=":
            kind = pattern[index + 1]
            close = pattern.find(kind + "]", index + 2)
            if close == -1:
                raise re.error("unterminated character class")
            name = pattern[index + 2:close]
            if kind == ":":
                if name not in _POSIX_CLASSES:
                    raise re.error(f"unknown character class {name!r}")
                out.append(_POSIX_CLASSES[name])
            elif len(name) == 1:
                out.append(re.escape(name))
            else:
                raise re.error(f"unsupported collating element {name!r}")
            index = close + 2
            continue
        out.append("\\" + char if char in "\\[&~|" else char)
        index += 1
    raise re.error("unterminated bracket expression")


def _translate(pattern: str, extended: bool) -> str:
    """Translate a POSIX basic or extended regular expression."""
    out: list[str] = []
    index = 0
    end = len(pattern)
    at_start = True
    while index < end:
        char = pattern[index]
        if char == "[":
            piece, index = _translate_bracket(pattern, index)
            out.append(piece)
            at_start = False
            continue
        if char == "\\":
            if index + 1 >= end:
                raise re.error("trailing backslash")
            escaped = pattern[index + 1]
            index += 2
            if not extended and escaped in "(){}":
                out.append(escaped)
                at_start = escaped == "("
            elif not extended and escaped in "123456789":
                out.append("\\" + escaped)
                at_start = False
            else:
                out.append(re.escape(escaped))
                at_start = False
            continue
        if char == "*" and at_start:
            out.append(r"\*")
            at_start = False
        elif char == "^":
            out.append("^" if extended or at_start else r"\^")
        elif not extended and char in "(){}+?|":
            out.append("\\" + char)
            at_start = False
        else:
            out.append(char)
            at_start = extended and char in "(|"
        index += 1
    return "".join(out)


def _compile(monitor_filter: MonitorFilter) -> re.Pattern[str]:
    flags = 0 if monitor_filter.case_sensitive else re.IGNORECASE
    try:
        return re.compile(_translate(monitor_filter.text, monitor_filter.extended), flags)
    except re.error:
        raise FswError(
            f"An error occurred during the compilation of {monitor_filter.text}",
            ErrorCode.INVALID_REGEX,
        ) from None


class PathFilterSet:
    """An ordered list of compiled path filters."""

    def __init__(self) -> None:
        self._filters: list[tuple[re.Pattern[str], FilterType]] = []

    def __len__(self) -> int:
        return len(self._filters)

    def add(self, monitor_filter: MonitorFilter) -> None:
        """Compile *monitor_filter* and append it; raise FswError if invalid."""
        self._filters.append((_compile(monitor_filter), monitor_filter.type))

    def accept(self, path: str) -> bool:
        """Return whether *path* passes the filters.

        The first matching inclusion filter accepts the path; otherwise a
        matching exclusion filter rejects it.
        """
        excluded = False
        for regex, kind in self._filters:
            if regex.search(path):
                if kind is FilterType.INCLUDE:
                    return True
                excluded = kind is FilterType.EXCLUDE
        return not excluded


class EventTypeFilterSet:
    """A list of accepted event types; an empty list accepts everything."""

    def __init__(self) -> None:
        self._filters: list[EventTypeFilter] = []

    def __len__(self) -> int:
        return len(self._filters)

    def add(self, type_filter: EventTypeFilter) -> None:
        """Append an event type filter."""
        self._filters.append(type_filter)

    def replace(self, filters: Iterable[EventTypeFilter]) -> None:
        """Replace all filters with *filters*."""
        self._filters = list(filters)

    def accept(self, event_type: EventFlag) -> bool:
        """Return whether *event_type* is accepted."""
        if not self._filters:
            return True
        return any(flt.flag == event_type for flt in self._filters)

    def filter_flags(self, event: Event) -> list[EventFlag]:
        """Return the flags of *event* that are accepted."""
        if not self._filters:
            return list(event.flags)
        return [flag for flag in event.flags if self.accept(flag)]


def bubble_events(events: Iterable[Event]) -> list[Event]:
    """Merge the flags of events sharing the same time and path.

    The result is ordered by (time, path) and each event's flags are
    distinct and sorted.
    """
    merged: dict[tuple[int, str], set[EventFlag]] = {}
    for event in events:
        merged.setdefault((event.time, event.path), set()).update(event.flags)
    return [
        Event(path, time, tuple(sorted(flags)))
        for (time, path), flags in sorted(merged.items())
    ]