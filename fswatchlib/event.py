"""File change events and their flags."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .exceptions import ErrorCode, FswError


class EventFlag(IntEnum):
    """Type of a change event."""

    NO_OP = 0
    PLATFORM_SPECIFIC = 1 << 0
    CREATED = 1 << 1
    UPDATED = 1 << 2
    REMOVED = 1 << 3
    RENAMED = 1 << 4
    OWNER_MODIFIED = 1 << 5
    ATTRIBUTE_MODIFIED = 1 << 6
    MOVED_FROM = 1 << 7
    MOVED_TO = 1 << 8
    IS_FILE = 1 << 9
    IS_DIR = 1 << 10
    IS_SYM_LINK = 1 << 11
    LINK = 1 << 12
    OVERFLOW = 1 << 13
    CLOSE_WRITE = 1 << 14

    def __str__(self) -> str:
        return event_flag_name(self)


_NAMES: dict[EventFlag, str] = {
    EventFlag.NO_OP: "NoOp",
    EventFlag.PLATFORM_SPECIFIC: "PlatformSpecific",
    EventFlag.CREATED: "Created",
    EventFlag.UPDATED: "Updated",
    EventFlag.REMOVED: "Removed",
    EventFlag.RENAMED: "Renamed",
    EventFlag.OWNER_MODIFIED: "OwnerModified",
    EventFlag.ATTRIBUTE_MODIFIED: "AttributeModified",
    EventFlag.MOVED_FROM: "MovedFrom",
    EventFlag.MOVED_TO: "MovedTo",
    EventFlag.IS_FILE: "IsFile",
    EventFlag.IS_DIR: "IsDir",
    EventFlag.IS_SYM_LINK: "IsSymLink",
    EventFlag.LINK: "Link",
    EventFlag.OVERFLOW: "Overflow",
    EventFlag.CLOSE_WRITE: "CloseWrite",
}

_FLAGS_BY_NAME: dict[str, EventFlag] = {name: flag for flag, name in _NAMES.items()}


@dataclass(frozen=True)
class Event:
    """A file change event: path, time, flags and optional correlation id."""

    path: str
    time: int
    flags: tuple[EventFlag, ...] = field(default_factory=tuple)
    correlation_id: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "flags", tuple(self.flags))


def event_flag_by_name(name: str) -> EventFlag:
    """Return the flag whose name is *name*."""
    try:
        return _FLAGS_BY_NAME[name]
    except KeyError:
        raise FswError(f"Unknown event type: {name}", ErrorCode.UNKNOWN_VALUE) from None


def event_flag_name(flag: int) -> str:
    """Return the name of *flag*."""
    try:
        return _NAMES[EventFlag(flag)]
    except (ValueError, KeyError):
        raise FswError("Unknown event type.", ErrorCode.UNKNOWN_VALUE) from None