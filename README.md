# fsnotify

Building blocks for file system notification tools: a bit-flag set of file
operations, immutable event values, watch options, a thread-safe event/error
delivery pair, readable formatting of raw kernel event masks, a few platform
helpers, and a small unified-diff helper for comparing expected and observed
text.

## What this package does not do

It does not watch anything. There is no watcher object, no inotify, kqueue,
FEN or Windows backend, and no command-line program: nothing here talks to
the operating system to receive file system events. The modules provide the
types and helpers such a watcher would be built from.

## Install

```
pip install .
pip install ".[test]"   # with pytest
```

## Operations and events (`fsnotify.op`)

`Op` is an `enum.IntFlag` with `CREATE`, `WRITE`, `REMOVE`, `RENAME`,
`CHMOD`, `UNPORTABLE_OPEN`, `UNPORTABLE_READ`, `UNPORTABLE_CLOSE_WRITE` and
`UNPORTABLE_CLOSE_READ`. `Op.has()` reports whether any of the given bits are
set; `str()` joins the names with `|`, or gives `[no events]`.

`Event` is a frozen dataclass with `name`, `op` and `renamed_from`.

```python
from fsnotify.op import Op, Event

ev = Event(name="/tmp/file", op=Op.CREATE | Op.CHMOD)
ev.has(Op.CREATE)      # True
str(ev)                # 'CREATE|CHMOD  "/tmp/file"'
str(Event("/tmp/new", Op.CREATE, renamed_from="/tmp/old"))
                       # 'CREATE        "/tmp/new" ← "/tmp/old"'
str(Op(0))             # '[no events]'
```

## Watch options (`fsnotify.options`)

`WatchOptions` holds `bufsize` (default 65536), `op` (default
`CREATE|WRITE|REMOVE|RENAME|CHMOD`) and `send_create` (default `False`).
`with_buffer_size()`, `with_ops()` and `with_create()` return option
functions; `get_options()` applies them, skipping `None`, on top of the
defaults. `WatchFlag` has `BY_USER` and `RECURSE`.

```python
from fsnotify.op import Op
from fsnotify.options import get_options, with_buffer_size, with_ops, recursive_path

opts = get_options(with_buffer_size(128 * 1024), with_ops(Op.CREATE | Op.WRITE))
opts.bufsize                            # 131072

recursive_path("/tmp/dir/...", True)    # ('/tmp/dir', True)
recursive_path("/tmp/dir/...", False)   # ('/tmp/dir/...', False)
```

`debug_enabled(environ=None)` reports whether `FSNOTIFY_DEBUG` is set to
exactly `1` (in `os.environ` unless another mapping is given).

## Delivering events (`fsnotify.shared`)

`Shared(events, errors)` pairs two `queue.Queue` objects with a closed flag.
`send_event()` and `send_error()` block until the item is queued and return
`True`, or return `False` once the pair is closed. Events without any
operation, and `None` errors, are dropped and count as sent. With a
`timeout`, a send that cannot be queued in time raises `TimeoutError`.
`close()` returns `True` if it was already closed; `is_closed()` reports the
state.

## Errors (`fsnotify.errors`)

All derive from `FsnotifyError`: `NonExistentWatchError`, `ClosedError`,
`EventOverflowError` and `UnsupportedError`, each with its default message.

## Debug output (`fsnotify.debug`)

`describe_mask(mask, names, separator)` names every flag fully set in a mask
and shows leftover bits in hex. `format_inotify()`, `format_kqueue()` (with a
`platform` such as `"freebsd"` or `"darwin"`), `format_fen()` and
`format_windows()` build one trace line each; `emit()` writes a line to
standard error or a given stream.

```python
from datetime import datetime
from fsnotify.debug import format_inotify

format_inotify("/tmp/file-1", 0x100, when=datetime(2024, 1, 1, 11, 34, 23, 633087))
# 'FSNOTIFY_DEBUG: 11:34:23.633087000  IN_CREATE                      → "/tmp/file-1"'
```

## Platform helpers (`fsnotify.system`)

- `ignoring_eintr(fn)` calls `fn` again while it raises `InterruptedError`.
- `has_privileges_for_symlink()` is `True` off Windows; on Windows it tries
  to create a link in a temporary directory.
- `mkfifo()` and `mknod()` create special files, raising `UnsupportedError`
  on Windows.
- `max_files()` returns `2**64 - 1` on Windows and `0` elsewhere.
- `open_mode(platform=None)` gives the open flags for macOS and the BSDs,
  raising `UnsupportedError` for other platforms.

## Diffs (`fsnotify.textdiff`)

`diff(have, want, *options)` returns a unified diff (empty when equal) with
`-have` and `+want` line prefixes. `DiffOpt.NORMALIZE_WHITESPACE` strips
whitespace at both ends of every line; `DiffOpt.JSON` pretty-prints both
inputs as JSON first. `diff_match()` accepts patterns in `want`: `%(YEAR)`,
`%(MONTH)`, `%(DAY)`, `%(UUID)`, `%(ANY)`, `%(ANY n)`, `%(ANY n,)`,
`%(ANY n,m)`, `%(NUMBER)` and `%(regex)`.

```python
from fsnotify.textdiff import diff, diff_match, DiffOpt

diff("a\nb", "a\nc")
# '\n--- have\n+++ want\n@@ -1,2 +1,2 @@\n      a\n-have b\n+want c\n'
diff('{"a": "x"}', '{  "a":   "x"}', DiffOpt.JSON)   # ''
diff_match("Hello xy", "Hello %(ANY 2)")           # ''
```

The lower-level pieces are public too: `SequenceMatcher` with
`find_longest_match()`, `matching_blocks()`, `get_opcodes()` and
`get_grouped_opcodes()`, the `Match` and `OpCode` tuples,
`format_range_unified()`, `split_lines()` and `make_unified_diff()`.

## Tests

```
pytest
```