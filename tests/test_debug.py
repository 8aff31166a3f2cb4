import io
import re
from datetime import datetime

import pytest

from fsnotify.debug import (
    FEN_NAMES,
    INOTIFY_NAMES,
    KQUEUE_NAMES,
    WINDOWS_NAMES,
    describe_mask,
    emit,
    format_fen,
    format_inotify,
    format_kqueue,
    format_timestamp,
    format_windows,
)

WHEN = datetime(2024, 1, 2, 11, 34, 23, 633087)
INOTIFY = dict(INOTIFY_NAMES)
FEN = dict(FEN_NAMES)
WINDOWS = dict(WINDOWS_NAMES)


def test_describe_mask_names_set_bits_in_order():
    names = [("A", 1), ("B", 2), ("C", 4)]
    assert describe_mask(5, names, "|") == "A|C"


def test_describe_mask_unknown_bits_in_hex():
    assert describe_mask(9, [("A", 1)], " | ") == "A | 0x8"


def test_describe_mask_empty():
    assert describe_mask(0, [("A", 1)], "|") == ""


def test_format_timestamp_nine_digits():
    assert format_timestamp(WHEN) == "11:34:23.633087000"


def test_format_timestamp_now_shape():
    stamp = format_timestamp()
    assert len(stamp) == 18
    assert stamp[2] == ":" and stamp[5] == ":" and stamp[8] == "."
    assert bool(re.fullmatch(r"\d\d:\d\d:\d\d\.\d{9}", stamp)) is True


def test_inotify_line_contents():
    mask = INOTIFY["IN_CREATE"] | INOTIFY["IN_ISDIR"]
    line = format_inotify("/tmp/file-1", mask, 0, WHEN)
    assert line.startswith("FSNOTIFY_DEBUG: " + format_timestamp(WHEN))
    assert "IN_CREATE|IN_ISDIR" in line
    assert line.endswith('→ "/tmp/file-1"')
    assert "cookie" not in line


def test_inotify_cookie():
    line = format_inotify("/tmp/x", INOTIFY["IN_MOVED_FROM"], 7, WHEN)
    assert "(cookie: 7) " in line
    assert line.endswith('(cookie: 7) "/tmp/x"')


def test_inotify_alignment():
    a = format_inotify("/a", INOTIFY["IN_CREATE"], 0, WHEN)
    b = format_inotify("/a", INOTIFY["IN_DELETE_SELF"], 0, WHEN)
    assert a.index("→") == b.index("→")


def test_inotify_quotes_name():
    line = format_inotify("a\tb", INOTIFY["IN_ATTRIB"], 0, WHEN)
    assert line.endswith('"a\\tb"')


def test_kqueue_platform_specific_names():
    note_open = dict(KQUEUE_NAMES["freebsd"])["NOTE_OPEN"]
    free = format_kqueue("/f", note_open, "freebsd14", WHEN)
    mac = format_kqueue("/f", note_open, "darwin", WHEN)
    assert "NOTE_OPEN" in free
    assert "NOTE_OPEN" not in mac
    assert f"0x{note_open:x}" in mac


def test_kqueue_mask_and_separator():
    names = dict(KQUEUE_NAMES["darwin"])
    mask = names["NOTE_WRITE"] | names["NOTE_EXTEND"]
    line = format_kqueue("/f", mask, "darwin", WHEN)
    assert f"{mask:10d}:" in line
    assert "NOTE_EXTEND | NOTE_WRITE" in line


def test_kqueue_unknown_platform():
    with pytest.raises(ValueError):
        format_kqueue("/f", 1, "linux", WHEN)


def test_fen_line():
    mask = FEN["FILE_DELETE"]
    line = format_fen("/f", mask, WHEN)
    assert "FILE_DELETE" in line
    assert "FILE_EXCEPTION" not in line
    assert f"{mask:10d}:" in line
    assert line.endswith('→ "/f"')


def test_windows_uses_forward_slashes():
    line = format_windows("C:\\dir\\file", WINDOWS["FILE_ACTION_ADDED"], WHEN)
    assert line.endswith('"C:/dir/file"')
    assert "FILE_ACTION_ADDED" in line


def test_emit_writes_line():
    buf = io.StringIO()
    line = format_windows("x", WINDOWS["FILE_ACTION_REMOVED"], WHEN)
    emit(line, buf)
    assert buf.getvalue() == line + "\n"