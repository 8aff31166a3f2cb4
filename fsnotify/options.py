"""Options for adding watches, and path helpers."""

from __future__ import annotations

import enum
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace

from .op import Op

DEFAULT_BUFFER_SIZE = 65536
DEFAULT_OPS = Op.CREATE | Op.WRITE | Op.REMOVE | Op.RENAME | Op.CHMOD


@dataclass(frozen=True)
class WatchOptions:
    """Settings for a single watch."""

    bufsize: int = DEFAULT_BUFFER_SIZE
    op: Op = DEFAULT_OPS
    send_create: bool = False


AddOption = Callable[[WatchOptions], WatchOptions]


class WatchFlag(enum.IntFlag):
    """How a watch came to exist."""

    BY_USER = 0x01
    RECURSE = 0x02


def get_options(*args: AddOption | None) -> WatchOptions:
    """Apply the given options, skipping None, on top of the defaults."""
    opts = WatchOptions()
    for option in args:
        if option is not None:
            opts = option(opts)
    return opts


def with_buffer_size(size: int) -> AddOption:
    """Set the read buffer size (only used by the Windows backend)."""
    return lambda opts: replace(opts, bufsize=size)


def with_ops(op: Op) -> AddOption:
    """Set which operations to listen for."""
    return lambda opts: replace(opts, op=Op(op))


def with_create() -> AddOption:
    """Send Create events for recursive watches."""
    return lambda opts: replace(opts, send_create=True)


def recursive_path(path: str, enable_recurse: bool = True) -> tuple[str, bool]:
    """Clean path and strip a trailing "/..." marking a recursive watch."""
    path = os.path.normpath(path)
    if not enable_recurse:
        return path, False
    if os.path.basename(path) == "...":
        return os.path.dirname(path) or ".", True
    return path, False


def debug_enabled(environ: Mapping[str, str] | None = None) -> bool:
    """Report whether FSNOTIFY_DEBUG is set to exactly "1"."""
    env = os.environ if environ is None else environ
    return env.get("FSNOTIFY_DEBUG") == "1"