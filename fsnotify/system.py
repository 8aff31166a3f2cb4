"""Platform helpers: EINTR retries, special files, and open flags."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Callable
from typing import TypeVar

from .errors import UnsupportedError

T = TypeVar("T")

_IS_WINDOWS = sys.platform == "win32"
_MAXFILES = 0

_O_CLOEXEC = {
    "darwin": 0x1000000,
    "freebsd": 0x100000,
    "netbsd": 0x400000,
    "openbsd": 0x10000,
    "dragonfly": 0x20000,
}
_O_EVTONLY_DARWIN = 0x8000
_O_NONBLOCK_BSD = 0x4
_O_RDONLY = 0x0


def ignoring_eintr(fn: Callable[[], T]) -> T:
    """Call fn, repeating the call while it is interrupted by a signal."""
    while True:
        try:
            return fn()
        except InterruptedError:
            continue


def has_privileges_for_symlink() -> bool:
    """Report whether symbolic links can be created by this process."""
    if not _IS_WINDOWS:
        return True
    with tempfile.TemporaryDirectory() as tmp:
        target = os.path.join(tmp, "target")
        with open(target, "w"):
            pass
        try:
            os.symlink(target, os.path.join(tmp, "link"))
        except (OSError, NotImplementedError):
            return False
    return True


def mkfifo(path: str | os.PathLike, mode: int = 0o644) -> None:
    """Create a named pipe."""
    if _IS_WINDOWS or not hasattr(os, "mkfifo"):
        raise UnsupportedError("no FIFOs on Windows")
    os.mkfifo(path, mode)


def mknod(path: str | os.PathLike, mode: int = 0o644, dev: int = 0) -> None:
    """Create a file system node."""
    if _IS_WINDOWS or not hasattr(os, "mknod"):
        raise UnsupportedError("no device nodes on Windows")
    os.mknod(path, mode, dev)


def max_files() -> int:
    """The configured open-file limit; unlimited on Windows."""
    if _IS_WINDOWS:
        return (1 << 64) - 1
    return _MAXFILES


def open_mode(platform: str | None = None) -> int:
    """Flags used to open watched paths with kqueue on the given platform."""
    plat = sys.platform if platform is None else platform
    for name, cloexec in _O_CLOEXEC.items():
        if plat.startswith(name):
            if name == "darwin":
                return _O_EVTONLY_DARWIN | cloexec
            return _O_NONBLOCK_BSD | _O_RDONLY | cloexec
    raise UnsupportedError(f"fsnotify: no kqueue open mode for {plat!r}")