# fswatcher

`fswatcher` watches files and directories for changes and reports them to a
callback. Changes are found by a polling monitor. It stats the watched paths
at intervals and compares their modification and status-change times. It
therefore works on any platform where `os.stat` works.

It has no dependencies beyond the standard library.

## Concepts

- **Events**: `fswatcher.events.Event` is a frozen dataclass with a `path`, a
  `time` (seconds since the epoch) and a tuple of `flags`. The flags are
  `EventFlag` values such as `Created`, `Updated`, `Removed` and
  `AttributeModified`. To convert between flags and their names, use
  `get_event_flag_by_name` and `get_event_flag_name`. Both raise
  `FswatchError` with `ErrorCode.UNKNOWN_VALUE` when the name or flag is
  unknown.
- **Filters**: `fswatcher.filters.MonitorFilter(text, type, case_sensitive,
  extended)` is a regular expression. It is searched for anywhere in a path.
  - Its `FilterType` is `INCLUDE` or `EXCLUDE`.
  - An invalid expression raises `FswatchError` with
    `ErrorCode.INVALID_REGEX`.
  - `accept_path(filters, path)` applies these rules in order. A path that
    matches an include filter is accepted. A path that matches only exclude
    filters is rejected. A path that matches no filter is accepted.
  - `EventTypeFilter(flag)` limits which event flags are reported.
- **Monitors**: `fswatcher.poll_monitor.PollMonitor(paths, callback, context)`
  is the monitor.
  - Its attributes are `latency`, `recursive`, `follow_symlinks`, `filters`
    and `event_type_filters`.
  - `start()` runs the polling loop in the calling thread until `stop()` is
    called.
  - The loop waits at least one second between scans.
  - `collect_initial_data()` records a baseline. `collect_data()` rescans and
    returns the events since the previous scan.
- **Factory**: `fswatcher.monitor_factory` provides `create_monitor`,
  `create_monitor_by_name`, `get_types` and `exists_type`.
  - `MonitorType.SYSTEM_DEFAULT` and `MonitorType.POLL` both create a
    `PollMonitor`.
  - The only registered name is `poll_monitor`.
- **Sessions**: `fswatcher.session.Session` holds the settings for a monitor:
  paths, callback, latency, recursion, symlink following and filters. It then
  builds and runs that monitor. A session is also a context manager.

## Example: a session

    import threading
    import time

    from fswatcher.monitor_factory import MonitorType
    from fswatcher.session import Session

    def on_events(events, data):
        for event in events:
            print(event.path, [flag.name for flag in event.flags])

    with Session(MonitorType.SYSTEM_DEFAULT) as session:
        session.add_path("my/path")
        session.set_callback(on_events, None)
        session.set_recursive(True)
        session.set_latency(1.0)

        worker = threading.Thread(target=session.start)
        worker.start()
        time.sleep(5)
        session.stop()
        worker.join()

`Session.start` blocks until the monitor stops. Run it in its own thread if
the caller needs to keep working.

Settings take effect the next time the session starts its monitor.

## Example: scanning by hand

    from fswatcher.poll_monitor import PollMonitor

    monitor = PollMonitor(["my/path"], lambda events, ctx: None)
    monitor.recursive = True
    monitor.collect_initial_data()
    # ... files change ...
    for event in monitor.collect_data():
        print(event.path, event.flags)

## Errors

Failures raise `fswatcher.errors.FswatchError`. Its `code` attribute is an
`ErrorCode`, for example:

- `ErrorCode.PATHS_NOT_SET`
- `ErrorCode.CALLBACK_NOT_SET`
- `ErrorCode.INVALID_LATENCY`
- `ErrorCode.MONITOR_ALREADY_RUNNING`

Session and settings calls also record their status for the calling thread.
Read it with `fswatcher.settings.last_error()`. Reset it with
`fswatcher.settings.init_library()`.

## Logging

Diagnostic output is off by default. Turn it on with
`fswatcher.log.set_verbose(True)`.

The functions in `fswatcher.log` write only while verbose mode is on:

- `log` and `logf` write to standard output.
- `flog` and `flogf` write to a given stream.
- `log_perror` and `logf_perror` write to standard error.

## Limitations

- Only the polling monitor is available. Asking for `FSEVENTS`, `KQUEUE`,
  `INOTIFY`, `WINDOWS` or `FEN` raises `FswatchError` with
  `ErrorCode.UNKNOWN_MONITOR_TYPE`.
- Times are compared at whole-second resolution. Two changes to a file within
  the same second as the previous scan are not told apart.
- A session stores `allow_overflow`, `directory_only` and properties set with
  `add_property`, but the polling monitor does not act on them.
- The `extended` field of `MonitorFilter` has no effect. Expressions always
  use Python's `re` syntax.
- There is no command-line program. The package is a library only.