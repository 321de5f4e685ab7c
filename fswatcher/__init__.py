"""Watch files and directories for changes using a stat-based polling monitor."""

__version__ = "0.1.0"
__all__ = [
    "errors",
    "events",
    "filters",
    "log",
    "monitor_factory",
    "path_utils",
    "poll_monitor",
    "session",
    "settings",
]