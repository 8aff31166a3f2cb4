"""Line-based unified diffs with optional pattern matching in the wanted text."""

from __future__ import annotations

import enum
import json
import re
from collections.abc import Callable, Sequence
from datetime import datetime, timezone
from typing import Any, NamedTuple

Comparer = Callable[[str, str], bool]


class DiffOpt(enum.IntEnum):
    """Options that change how the inputs are prepared before diffing."""

    # Remove all whitespace at the start and end of every line.
    NORMALIZE_WHITESPACE = 1
    # Parse both inputs as JSON and pretty-print them before diffing.
    JSON = 2


class Match(NamedTuple):
    """A matching block: a[a:a+size] equals b[b:b+size]."""

    a: int
    b: int
    size: int


class OpCode(NamedTuple):
    """One step turning a[i1:i2] into b[j1:j2].

    Tags are "r" (replace), "d" (delete), "i" (insert) and "e" (equal).
    """

    tag: str
    i1: int
    i2: int
    j1: int
    j2: int


def _equal(a: str, b: str) -> bool:
    return a == b


class SequenceMatcher:
    """Find matching blocks between two sequences of strings.

    Pairs of lines are first found by exact equality; matches are then
    extended on both ends with the ``cmp`` function.
    """

    def __init__(
        self,
        a: Sequence[str] | None,
        b: Sequence[str] | None,
        cmp: Comparer | None = None,
    ) -> None:
        self.a = list(a or [])
        self.b = list(b or [])
        self.cmp = cmp if cmp is not None else _equal

    def find_longest_match(self, alo: int, ahi: int, blo: int, bhi: int) -> Match:
        """Longest matching block in a[alo:ahi] and b[blo:bhi].

        Of all maximal blocks the one starting earliest in a is returned, and
        of those the one starting earliest in b. Returns (alo, blo, 0) when
        nothing matches.
        """
        b2j: dict[str, list[int]] = {}
        for j, line in enumerate(self.b):
            b2j.setdefault(line, []).append(j)

        besti, bestj, bestsize = alo, blo, 0
        j2len: dict[int, int] = {}
        for i in range(alo, ahi):
            newj2len: dict[int, int] = {}
            for j in b2j.get(self.a[i], ()):
                if j < blo:
                    continue
                if j >= bhi:
                    break
                k = j2len.get(j - 1, 0) + 1
                newj2len[j] = k
                if k > bestsize:
                    besti, bestj, bestsize = i - k + 1, j - k + 1, k
            j2len = newj2len

        while besti > alo and bestj > blo and self.cmp(self.a[besti - 1], self.b[bestj - 1]):
            besti, bestj, bestsize = besti - 1, bestj - 1, bestsize + 1
        while (
            besti + bestsize < ahi
            and bestj + bestsize < bhi
            and self.cmp(self.a[besti + bestsize], self.b[bestj + bestsize])
        ):
            bestsize += 1

        return Match(besti, bestj, bestsize)

    def _collect_blocks(self, alo: int, ahi: int, blo: int, bhi: int, out: list[Match]) -> None:
        match = self.find_longest_match(alo, ahi, blo, bhi)
        i, j, k = match
        if k > 0:
            if alo < i and blo < j:
                self._collect_blocks(alo, i, blo, j, out)
            out.append(match)
            if i + k < ahi and j + k < bhi:
                self._collect_blocks(i + k, ahi, j + k, bhi, out)

    def matching_blocks(self) -> list[Match]:
        """Non-adjacent matching blocks, ending with a (len(a), len(b), 0) sentinel."""
        matched: list[Match] = []
        self._collect_blocks(0, len(self.a), 0, len(self.b), matched)

        blocks: list[Match] = []
        i1 = j1 = k1 = 0
        for i2, j2, k2 in matched:
            if i1 + k1 == i2 and j1 + k1 == j2:
                k1 += k2
            else:
                if k1 > 0:
                    blocks.append(Match(i1, j1, k1))
                i1, j1, k1 = i2, j2, k2
        if k1 > 0:
            blocks.append(Match(i1, j1, k1))

        blocks.append(Match(len(self.a), len(self.b), 0))
        return blocks

    def get_opcodes(self) -> list[OpCode]:
        """Steps describing how to turn a into b."""
        codes: list[OpCode] = []
        i = j = 0
        for ai, bj, size in self.matching_blocks():
            tag = ""
            if i < ai and j < bj:
                tag = "r"
            elif i < ai:
                tag = "d"
            elif j < bj:
                tag = "i"
            if tag:
                codes.append(OpCode(tag, i, ai, j, bj))

            i, j = ai + size, bj + size
            if size > 0:
                codes.append(OpCode("e", ai, i, bj, j))
        return codes

    def get_grouped_opcodes(self, n: int = 3) -> list[list[OpCode]]:
        """Group changes with up to n lines of context; negative n means 3."""
        if n < 0:
            n = 3
        codes = self.get_opcodes() or [OpCode("e", 0, 1, 0, 1)]

        first = codes[0]
        if first.tag == "e":
            codes[0] = OpCode(
                first.tag, max(first.i1, first.i2 - n), first.i2, max(first.j1, first.j2 - n), first.j2
            )
        last = codes[-1]
        if last.tag == "e":
            codes[-1] = OpCode(
                last.tag, last.i1, min(last.i2, last.i1 + n), last.j1, min(last.j2, last.j1 + n)
            )

        nn = n + n
        groups: list[list[OpCode]] = []
        group: list[OpCode] = []
        for tag, i1, i2, j1, j2 in codes:
            if tag == "e" and i2 - i1 > nn:
                group.append(OpCode(tag, i1, min(i2, i1 + n), j1, min(j2, j1 + n)))
                groups.append(group)
                group = []
                i1, j1 = max(i1, i2 - n), max(j1, j2 - n)
            group.append(OpCode(tag, i1, i2, j1, j2))

        if group and not (len(group) == 1 and group[0].tag == "e"):
            groups.append(group)
        return groups


def format_range_unified(start: int, stop: int) -> str:
    """Format a line range the way unified diff hunk headers do."""
    beginning = start + 1
    length = stop - start
    if length == 1:
        return f"{beginning}"
    if length == 0:
        beginning -= 1
    return f"{beginning},{length}"


def split_lines(text: str) -> list[str]:
    """Split text into lines that each end with a newline."""
    return [line + "\n" for line in text.split("\n")]


def make_unified_diff(
    a: Sequence[str],
    b: Sequence[str],
    context: int = 3,
    matcher: SequenceMatcher | None = None,
) -> str:
    """Render a unified diff of two lists of newline-terminated lines."""
    if matcher is None:
        matcher = SequenceMatcher(a, b)

    out: list[str] = []
    for group in matcher.get_grouped_opcodes(context):
        if not out:
            out.append("--- have\n")
            out.append("+++ want\n")

        first, last = group[0], group[-1]
        out.append(
            f"@@ -{format_range_unified(first.i1, last.i2)} "
            f"+{format_range_unified(first.j1, last.j2)} @@\n"
        )
        for tag, i1, i2, j1, j2 in group:
            if tag == "e":
                out.extend("      " + line for line in a[i1:i2])
                continue
            if tag in ("r", "d"):
                out.extend("-have " + line for line in a[i1:i2])
            if tag in ("r", "i"):
                out.extend("+want " + line for line in b[j1:j2])
    return "".join(out)


_WHITESPACE = re.compile(r"(^[\t\n\f\r ]+|[\t\n\f\r ]+$)", re.MULTILINE)

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid JSON literal {name}")


def _normalize_numbers(value: Any) -> Any:
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return int(value)
        return value
    if isinstance(value, dict):
        return {key: _normalize_numbers(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_normalize_numbers(item) for item in value]
    return value


def _indent_json(text: str) -> str:
    data = json.loads(text, parse_int=float, parse_constant=_reject_constant)
    rendered = json.dumps(
        _normalize_numbers(data),
        indent=4,
        sort_keys=True,
        ensure_ascii=False,
        separators=(",", ": "),
    )
    for char, escape in _HTML_ESCAPES.items():
        rendered = rendered.replace(char, escape)
    return rendered


def _format_json(text: str, label: str) -> str:
    if not text:
        text = "{}"
    try:
        return _indent_json(text)
    except ValueError as err:
        return f"diff: ERROR formatting {label}: {err}\ntext: {text}"


def _apply_options(have: str, want: str, options: Sequence[DiffOpt]) -> tuple[str, str]:
    for option in options:
        if option == DiffOpt.NORMALIZE_WHITESPACE:
            have = _WHITESPACE.sub("", have)
            want = _WHITESPACE.sub("", want)
        elif option == DiffOpt.JSON:
            have = _format_json(have, "have")
            want = _format_json(want, "want")
    return have, want


def diff(have: str, want: str, *args: DiffOpt) -> str:
    """Unified diff of two strings; empty when they are the same."""
    have, want = _apply_options(have, want, args)
    result = make_unified_diff(split_lines(have.strip()), split_lines(want.strip()), 3)
    return "\n" + result if result else ""


_META_CHARS = frozenset("\\.+*?()|[]{}^$")
_PLACEHOLDER = re.compile(r"%\\\(.+?\\\)")
_UUID = "[0-9A-Fa-f]{8}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{4}-[0-9A-Fa-f]{12}"


def _quote_meta(text: str) -> str:
    return "".join("\\" + ch if ch in _META_CHARS else ch for ch in text)


def _expand_placeholder(found: re.Match) -> str:
    token = found.group(0)
    if token == r"%\(UUID\)":
        return _UUID
    if token == r"%\(ANY\)":
        return ".+?"
    if token == r"%\(NUMBER\)":
        return r"\d+?"
    if token.startswith(r"%\(ANY "):
        return f".{{{token[7:-2]}}}?"
    if token.startswith(r"%\(NUMBER "):
        return rf"\d{{{token[10:-2]}}}?"
    return token[3:-2].replace("\\", "")


def _regex_search(line: str, pattern: str) -> bool:
    return re.search(pattern, line, re.ASCII) is not None


def diff_match(have: str, want: str, *args: DiffOpt) -> str:
    """Like diff(), but want may hold patterns.

    Patterns: %(YEAR), %(MONTH), %(DAY) (current UTC date), %(UUID),
    %(ANY), %(ANY n), %(ANY n,), %(ANY n,m), %(NUMBER) with the same
    lengths, and %(regex) for any expression without a backslash.
    """
    have, want = _apply_options(have, want, args)

    now = datetime.now(timezone.utc)
    for token, value in (
        ("%(YEAR)", f"{now.year}"),
        ("%(MONTH)", f"{now.month:02d}"),
        ("%(DAY)", f"{now.day:02d}"),
    ):
        want = want.replace(token, value)

    want_re = _PLACEHOLDER.sub(_expand_placeholder, _quote_meta(want))
    if re.search(r"\A" + want_re + r"\Z", have, re.ASCII):
        return ""

    a = split_lines(have.strip())
    b = split_lines(want_re.strip())
    result = make_unified_diff(a, b, 3, SequenceMatcher(a, b, _regex_search))
    if not result:
        return "diff_match: strings didn't match but no diff?"
    return "\n" + result