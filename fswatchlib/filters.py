"""Path filters and the parser of filter files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

ErrorHandler = Optional[Callable[[str], None]]

_FILTER_GRAMMAR = re.compile(r"([+-])([ei]*) (.+)", re.DOTALL)


class FilterType(Enum):
    """Whether a filter includes or excludes matching paths."""

    INCLUDE = "include"
    EXCLUDE = "exclude"


@dataclass
class MonitorFilter:
    """A regular expression used to accept or reject paths."""

    text: str
    type: FilterType = FilterType.INCLUDE
    case_sensitive: bool = True
    extended: bool = False


def _is_unescaped_space(text: str, index: int) -> bool:
    if text[index] != " ":
        return False
    prefix = text[:index]
    backslashes = len(prefix) - len(prefix.rstrip("\\"))
    return backslashes % 2 == 0


def parse_filter(line: str, err_handler: ErrorHandler = None) -> Optional[MonitorFilter]:
    """Parse one filter line; return None for blank, comment or invalid lines.

    Invalid lines are reported to *err_handler* when one is given.
    """
    if not line or line.startswith("#"):
        return None

    match = _FILTER_GRAMMAR.fullmatch(line)
    if match is None:
        if err_handler:
            err_handler(line)
        return None

    kind, flags, text = match.groups()
    result = MonitorFilter(
        text="",
        type=FilterType.INCLUDE if kind == "+" else FilterType.EXCLUDE,
    )
    for flag in flags:
        if flag == "e":
            result.extended = True
        else:
            result.case_sensitive = False

    # Trim unescaped trailing spaces; the first character is never trimmed.
    while len(text) > 1 and _is_unescaped_space(text, len(text) - 1):
        text = text[:-1]

    if not text or text == " ":
        if err_handler:
            err_handler(line)
        return None

    result.text = text
    return result


def read_filters(path: str, err_handler: ErrorHandler = None) -> list[MonitorFilter]:
    """Read filters from a file holding one filter per line."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as handle:
            content = handle.read()
    except OSError as exc:
        raise FileNotFoundError(f"File not found: {path}") from exc

    parsed = (parse_filter(line, err_handler) for line in content.split("\n"))
    return [flt for flt in parsed if flt is not None]