# fswatchlib

Building blocks for file system change monitoring: change events and their
flags, path filters read from filter files, path and event-type filtering of
event batches, and small helpers for listing directories and inspecting paths.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## Errors (`fswatchlib.exceptions`)

`FswError` carries a message (`cause`, also what `str()` returns) and an error
code (`code`, also what `int()` returns). The codes are the members of
`ErrorCode`: `OK`, `UNKNOWN_ERROR` (the default), `UNKNOWN_VALUE`,
`CALLBACK_NOT_SET`, `INVALID_LATENCY`, `INVALID_REGEX` and
`UNKNOWN_MONITOR_TYPE`.

## Events (`fswatchlib.event`)

`Event` is a frozen dataclass with a `path`, a `time`, a tuple of `EventFlag`
values in `flags` and a `correlation_id`, which defaults to 0. Any iterable
given as `flags` is stored as a tuple.

`EventFlag` is an integer enum: `NO_OP`, `PLATFORM_SPECIFIC`, `CREATED`,
`UPDATED`, `REMOVED`, `RENAMED`, `OWNER_MODIFIED`, `ATTRIBUTE_MODIFIED`,
`MOVED_FROM`, `MOVED_TO`, `IS_FILE`, `IS_DIR`, `IS_SYM_LINK`, `LINK`,
`OVERFLOW` and `CLOSE_WRITE`. Each flag has a display name in CamelCase:

```python
from fswatchlib.event import EventFlag, event_flag_by_name, event_flag_name

event_flag_by_name("Created")          # EventFlag.CREATED
event_flag_name(EventFlag.CREATED)     # "Created"
str(EventFlag.IS_SYM_LINK)             # "IsSymLink"
```

Both functions raise `FswError` with `ErrorCode.UNKNOWN_VALUE` for a name or
value they do not know.

## Path filters (`fswatchlib.filters`)

A filter file holds one filter on each line:

```
# comment lines and empty lines are skipped
- \.git/
+i \.PY$
-e ^/tmp/.*\.(o|a)$
```

Each line starts with `+` (include) or `-` (exclude), then any of the flags `e`
(extended regular expression) and `i` (case insensitive), then one space and
the pattern. Unescaped spaces at the end of the pattern are dropped.

```python
from fswatchlib.filters import parse_filter, read_filters

filters = read_filters("filters.txt", err_handler=print)
single = parse_filter("+e \\.(c|h)$")
```

`read_filters` returns the valid filters as `MonitorFilter` objects and passes
each malformed line to `err_handler`, if one is given. It raises
`FileNotFoundError` when the file cannot be opened. `parse_filter` handles one
line and returns `None` for a blank, comment or malformed line.

A `MonitorFilter` has `text`, `type` (`FilterType.INCLUDE` or
`FilterType.EXCLUDE`), `case_sensitive` (default `True`) and `extended`
(default `False`).

## Filtering (`fswatchlib.filtering`)

`PathFilterSet` compiles filters and checks paths against them. Patterns are
POSIX basic regular expressions, or extended ones when `extended` is set,
including bracket classes such as `[[:digit:]]`. A pattern that cannot be
compiled raises `FswError` with `ErrorCode.INVALID_REGEX`.

```python
from fswatchlib.filtering import PathFilterSet
from fswatchlib.filters import FilterType, MonitorFilter

path_filters = PathFilterSet()
path_filters.add(MonitorFilter(r"\.log$", FilterType.EXCLUDE))
path_filters.add(MonitorFilter(r"important", FilterType.INCLUDE))

path_filters.accept("/var/app/debug.log")      # False
path_filters.accept("/var/app/important.log")  # True
path_filters.accept("/var/app/data.txt")       # True
```

A path is accepted when it matches an include filter, or when it matches no
exclude filter.

`EventTypeFilterSet` holds `EventTypeFilter` values. With no filters every
event type is accepted; otherwise only the listed flags are. `add` appends a
filter, `replace` swaps in a new list, `accept(flag)` checks one flag and
`filter_flags(event)` returns the accepted flags of an event as a list.

`bubble_events(events)` merges events that share a time and a path into one
event carrying all their flags. The result is ordered by time and path, and
each event's flags are distinct and sorted.

## Path helpers (`fswatchlib.path_utils`)

- `get_directory_entries(path)`: the paths of the direct entries of a
  directory, sorted by name. Raises `OSError` if the directory cannot be
  listed.
- `get_subdirectories(path)`: the paths of the direct subdirectories, sorted by
  name. Returns an empty list if the directory cannot be listed.
- `stat_path(path, follow_symlink=False)`: an `os.stat_result`, or `None` if
  the path cannot be inspected. With `follow_symlink` true the link itself is
  examined (`os.lstat`); otherwise links are resolved (`os.stat`).

## What this package does not do

The package has no monitor: nothing in it watches paths, waits for changes
from the operating system or delivers events to a callback, and it has no
command-line program. It supplies the events, filters and helpers that such a
watcher would use; collecting change events is left to the caller.