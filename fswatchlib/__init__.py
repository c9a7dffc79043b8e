"""Change events, path filters, event filtering and path helpers for file system monitoring."""

__version__ = "1.18.0"
__all__ = [
    "event",
    "exceptions",
    "filtering",
    "filters",
    "path_utils",
]