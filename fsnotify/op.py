"""File operations and the events that carry them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}


def _quote(text: str) -> str:
    """Double-quote a string, escaping non-printable characters."""
    parts = []
    for ch in text:
        if ch in _ESCAPES:
            parts.append(_ESCAPES[ch])
        elif ch.isprintable():
            parts.append(ch)
        elif ord(ch) < 0x80:
            parts.append(f"\\x{ord(ch):02x}")
        elif ord(ch) < 0x10000:
            parts.append(f"\\u{ord(ch):04x}")
        else:
            parts.append(f"\\U{ord(ch):08x}")
    return '"' + "".join(parts) + '"'


class Op(enum.IntFlag):
    """A set of file operations."""

    CREATE = 1 << 0
    WRITE = 1 << 1
    REMOVE = 1 << 2
    RENAME = 1 << 3
    CHMOD = 1 << 4
    UNPORTABLE_OPEN = 1 << 5
    UNPORTABLE_READ = 1 << 6
    UNPORTABLE_CLOSE_WRITE = 1 << 7
    UNPORTABLE_CLOSE_READ = 1 << 8

    def has(self, other: int) -> bool:
        """Report whether any of the bits in other are set."""
        return bool(int(self) & int(other))

    def __str__(self) -> str:
        labels = [label for flag, label in _LABELS if self.has(flag)]
        return "|".join(labels) if labels else "[no events]"


_LABELS = (
    (Op.CREATE, "CREATE"),
    (Op.REMOVE, "REMOVE"),
    (Op.WRITE, "WRITE"),
    (Op.UNPORTABLE_OPEN, "OPEN"),
    (Op.UNPORTABLE_READ, "READ"),
    (Op.UNPORTABLE_CLOSE_WRITE, "CLOSE_WRITE"),
    (Op.UNPORTABLE_CLOSE_READ, "CLOSE_READ"),
    (Op.RENAME, "RENAME"),
    (Op.CHMOD, "CHMOD"),
)


@dataclass(frozen=True)
class Event:
    """A file system notification for one path."""

    name: str = ""
    op: Op = Op(0)
    renamed_from: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.op, Op):
            object.__setattr__(self, "op", Op(self.op))

    def has(self, op: int) -> bool:
        """Report whether this event has the given operation."""
        return self.op.has(op)

    def __str__(self) -> str:
        head = f"{str(self.op):<13} {_quote(self.name)}"
        if self.renamed_from:
            return f"{head} ← {_quote(self.renamed_from)}"
        return head