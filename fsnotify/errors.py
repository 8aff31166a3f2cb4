"""Exceptions raised by the watcher."""


class FsnotifyError(Exception):
    """Base class for all errors raised by this package."""

    default_message = "fsnotify: error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NonExistentWatchError(FsnotifyError):
    """Raised when removing a path that was never added."""

    default_message = "fsnotify: can't remove non-existent watch"


class ClosedError(FsnotifyError):
    """Raised when operating on a watcher that is already closed."""

    default_message = "fsnotify: watcher already closed"


class EventOverflowError(FsnotifyError):
    """Reported when the kernel queue or read buffer overflowed."""

    default_message = "fsnotify: queue or buffer overflow"


class UnsupportedError(FsnotifyError):
    """Raised when an operation is not supported by the current backend."""

    default_message = "fsnotify: not supported with this backend"