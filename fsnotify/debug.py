"""Formatting of the FSNOTIFY_DEBUG trace lines for each kernel interface."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from datetime import datetime
from typing import TextIO

from .op import _quote

PREFIX = "FSNOTIFY_DEBUG:"

INOTIFY_NAMES: tuple[tuple[str, int], ...] = (
    ("IN_ACCESS", 0x1),
    ("IN_ATTRIB", 0x4),
    ("IN_CLOSE", 0x18),
    ("IN_CLOSE_NOWRITE", 0x10),
    ("IN_CLOSE_WRITE", 0x8),
    ("IN_CREATE", 0x100),
    ("IN_DELETE", 0x200),
    ("IN_DELETE_SELF", 0x400),
    ("IN_IGNORED", 0x8000),
    ("IN_ISDIR", 0x40000000),
    ("IN_MODIFY", 0x2),
    ("IN_MOVE", 0xC0),
    ("IN_MOVED_FROM", 0x40),
    ("IN_MOVED_TO", 0x80),
    ("IN_MOVE_SELF", 0x800),
    ("IN_OPEN", 0x20),
    ("IN_Q_OVERFLOW", 0x4000),
    ("IN_UNMOUNT", 0x2000),
)

_NOTE_BASIC: tuple[tuple[str, int], ...] = (
    ("NOTE_ATTRIB", 0x8),
    ("NOTE_DELETE", 0x1),
    ("NOTE_EXTEND", 0x4),
    ("NOTE_LINK", 0x10),
    ("NOTE_RENAME", 0x20),
    ("NOTE_WRITE", 0x2),
)

KQUEUE_NAMES: dict[str, tuple[tuple[str, int], ...]] = {
    "darwin": _NOTE_BASIC,
    "dragonfly": _NOTE_BASIC,
    "netbsd": _NOTE_BASIC,
    "freebsd": (
        ("NOTE_DELETE", 0x1),
        ("NOTE_WRITE", 0x2),
        ("NOTE_EXTEND", 0x4),
        ("NOTE_ATTRIB", 0x8),
        ("NOTE_LINK", 0x10),
        ("NOTE_RENAME", 0x20),
        ("NOTE_REVOKE", 0x40),
        ("NOTE_OPEN", 0x80),
        ("NOTE_CLOSE", 0x100),
        ("NOTE_CLOSE_WRITE", 0x200),
        ("NOTE_READ", 0x400),
    ),
    "openbsd": (
        ("NOTE_ATTRIB", 0x8),
        ("NOTE_DELETE", 0x1),
        ("NOTE_EXTEND", 0x4),
        ("NOTE_LINK", 0x10),
        ("NOTE_RENAME", 0x20),
        ("NOTE_TRUNCATE", 0x80),
        ("NOTE_WRITE", 0x2),
    ),
}

FEN_NAMES: tuple[tuple[str, int], ...] = (
    ("FILE_ACCESS", 0x1),
    ("FILE_MODIFIED", 0x2),
    ("FILE_ATTRIB", 0x4),
    ("FILE_TRUNC", 0x100000),
    ("FILE_NOFOLLOW", 0x10000000),
    ("FILE_DELETE", 0x10),
    ("FILE_RENAME_TO", 0x20),
    ("FILE_RENAME_FROM", 0x40),
    ("UNMOUNTED", 0x20000000),
    ("MOUNTEDOVER", 0x40000000),
    ("FILE_EXCEPTION", 0x60000070),
)

WINDOWS_NAMES: tuple[tuple[str, int], ...] = (
    ("FILE_ACTION_ADDED", 1),
    ("FILE_ACTION_REMOVED", 2),
    ("FILE_ACTION_MODIFIED", 3),
    ("FILE_ACTION_RENAMED_OLD_NAME", 4),
    ("FILE_ACTION_RENAMED_NEW_NAME", 5),
)


def describe_mask(mask: int, names: Iterable[tuple[str, int]], separator: str) -> str:
    """Name every flag fully set in mask; leftover bits are shown in hex."""
    labels = []
    unknown = mask
    for label, bits in names:
        if mask & bits == bits:
            labels.append(label)
            unknown ^= bits
    if unknown > 0:
        labels.append(f"0x{unknown:x}")
    return separator.join(labels)


def format_timestamp(when: datetime | None = None) -> str:
    """Format a time as HH:MM:SS with nine fractional digits."""
    when = when if when is not None else datetime.now()
    return f"{when.strftime('%H:%M:%S')}.{when.microsecond:06d}000"


def format_inotify(name: str, mask: int, cookie: int = 0, when: datetime | None = None) -> str:
    """Format a trace line for an inotify event."""
    desc = describe_mask(mask, INOTIFY_NAMES, "|")
    cookie_text = f"(cookie: {cookie}) " if cookie > 0 else ""
    return f"{PREFIX} {format_timestamp(when)}  {desc:<30} → {cookie_text}{_quote(name)}"


def _kqueue_platform(platform: str | None) -> str:
    plat = sys.platform if platform is None else platform
    for key in KQUEUE_NAMES:
        if plat.startswith(key):
            return key
    raise ValueError(f"fsnotify: not a kqueue platform: {plat!r}")


def format_kqueue(
    name: str, mask: int, platform: str | None = None, when: datetime | None = None
) -> str:
    """Format a trace line for a kqueue event on the given platform."""
    names = KQUEUE_NAMES[_kqueue_platform(platform)]
    mask &= 0xFFFFFFFF
    desc = describe_mask(mask, names, " | ")
    return f"{PREFIX} {format_timestamp(when)}  {mask:10d}:{desc:<20} → {_quote(name)}"


def format_fen(name: str, mask: int, when: datetime | None = None) -> str:
    """Format a trace line for an illumos/Solaris file event."""
    desc = describe_mask(mask, FEN_NAMES, " | ")
    return f"{PREFIX} {format_timestamp(when)}  {mask:10d}:{desc:<30} → {_quote(name)}"


def format_windows(name: str, mask: int, when: datetime | None = None) -> str:
    """Format a trace line for a ReadDirectoryChangesW action."""
    desc = describe_mask(mask, WINDOWS_NAMES, " | ")
    path = name.replace("\\", "/")
    return f"{PREFIX} {format_timestamp(when)}  {desc:<65} → {_quote(path)}"


def emit(line: str, stream: TextIO | None = None) -> None:
    """Write one trace line to stream (standard error by default)."""
    out = sys.stderr if stream is None else stream
    out.write(line + "\n")
    out.flush()