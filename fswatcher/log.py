"""Verbose-mode diagnostic logging and printf-style formatting."""

from __future__ import annotations

import sys
from typing import TextIO

_verbose = False


def is_verbose() -> bool:
    """Return whether verbose mode is active."""
    return _verbose


def set_verbose(verbose: bool) -> None:
    """Turn verbose mode on or off."""
    global _verbose
    _verbose = bool(verbose)


def string_from_format(fmt: str, *args: object) -> str:
    """Format ``fmt`` printf-style; a formatting error yields an empty string."""
    try:
        return fmt % args
    except (TypeError, ValueError, KeyError):
        return ""


def log(msg: str) -> None:
    """Write ``msg`` to standard output when verbose."""
    if _verbose:
        sys.stdout.write(msg)


def flog(stream: TextIO, msg: str) -> None:
    """Write ``msg`` to ``stream`` when verbose."""
    if _verbose:
        stream.write(msg)


def logf(fmt: str, *args: object) -> None:
    """Format and write a message to standard output when verbose."""
    if _verbose:
        sys.stdout.write(string_from_format(fmt, *args))


def flogf(stream: TextIO, fmt: str, *args: object) -> None:
    """Format and write a message to ``stream`` when verbose."""
    if _verbose:
        stream.write(string_from_format(fmt, *args))


def _perror(msg: str) -> None:
    current = sys.exc_info()[1]
    if isinstance(current, OSError) and current.strerror:
        detail = current.strerror
    elif current is not None:
        detail = str(current)
    else:
        detail = ""
    line = f"{msg}: {detail}" if msg and detail else (msg or detail)
    sys.stderr.write(line + "\n")


def log_perror(msg: str) -> None:
    """Write ``msg`` and the error being handled to standard error when verbose."""
    if _verbose:
        _perror(msg)


def logf_perror(fmt: str, *args: object) -> None:
    """Format a message and report it like :func:`log_perror` when verbose."""
    if _verbose:
        _perror(string_from_format(fmt, *args))