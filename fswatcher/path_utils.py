"""Helpers to list directories and stat paths."""

from __future__ import annotations

import os
import sys

from .log import flogf, logf_perror


def _elog(function: str, fmt: str, *args: object) -> None:
    flogf(sys.stderr, "%s: ", function)
    flogf(sys.stderr, fmt, *args)


def get_directory_entries(path: str | os.PathLike[str]) -> list[os.DirEntry[str]]:
    """Return the direct entries of ``path``; an unreadable directory gives none."""
    try:
        with os.scandir(path) as it:
            return list(it)
    except OSError as exc:
        _elog("get_directory_entries", "Error accessing directory: %s", exc)
        return []


def get_subdirectories(path: str | os.PathLike[str]) -> list[os.DirEntry[str]]:
    """Return the direct subdirectories of ``path``."""
    entries: list[os.DirEntry[str]] = []
    try:
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_dir():
                    entries.append(entry)
    except OSError as exc:
        _elog("get_subdirectories", "Error accessing directory: %s", exc)
    return entries


def stat_path(path: str | os.PathLike[str], follow_symlink: bool) -> os.stat_result | None:
    """Stat ``path``, or lstat it when ``follow_symlink`` is true.

    Returns ``None`` and reports the error in verbose mode on failure.
    """
    name = os.fspath(path)
    if follow_symlink:
        try:
            return os.lstat(name)
        except OSError:
            logf_perror("Cannot lstat %s", name)
            return None
    try:
        return os.stat(name)
    except OSError:
        logf_perror("Cannot stat %s", name)
        return None