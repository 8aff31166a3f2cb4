"""File system notification building blocks: operations, events, options, delivery, debug formatting and diffs."""

__version__ = "0.1.0"

__all__ = ["errors", "op", "options", "shared", "debug", "system", "textdiff"]