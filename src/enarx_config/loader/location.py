"""Best-effort source positions for configuration errors.

pydantic reports *where in the data* a value was rejected, e.g.
``("files", 1, "name")``; this module maps such a path back to a 1-based
``(line, column)`` in the TOML text.  Only the shapes ``Enarx.toml`` files
are written in are recognised:

* the *n*-th ``[[key]]`` array-of-tables header, for any path below
  ``key[n]``.  The position is that of the header, since that is where
  the entry begins;
* otherwise a top-level ``key = value`` line or a ``[key]`` table header.
  An error inside an inline array (``files = [...]``) lands here.

Lines that begin inside a multi-line string are skipped, so a ``\"""``
block containing ``[[files]]`` does not shift the entry count.  Dotted
keys and other exotic layouts yield ``None``.
"""
from __future__ import annotations

import re
from collections.abc import Iterator

_ARRAY_HEADER_RE = re.compile(r"^(\s*)\[\[\s*([A-Za-z0-9_-]+)\s*\]\]")
_TABLE_HEADER_RE = re.compile(r"^(\s*)\[\s*([A-Za-z0-9_-]+)\s*\]")
_KEY_RE = re.compile(r"^(\s*)([A-Za-z0-9_-]+)\s*=")

_MULTILINE_DELIMITERS = ('"""', "'''")

Line = tuple[int, str]


def locate(text: str, path: tuple[str | int, ...]) -> tuple[int, int] | None:
    """Return the ``(line, column)`` where *path* begins in *text*."""
    if not path or not isinstance(path[0], str):
        return None
    key = path[0]
    lines = list(_code_lines(text))

    if len(path) > 1 and isinstance(path[1], int):
        position = _locate_array_entry(lines, key, path[1])
        if position is not None:
            return position
    return _locate_key(lines, key)


def _locate_array_entry(lines: list[Line], key: str, index: int) -> tuple[int, int] | None:
    seen = -1
    for lineno, line in lines:
        match = _ARRAY_HEADER_RE.match(line)
        if match is None or match.group(2) != key:
            continue
        seen += 1
        if seen == index:
            return lineno, len(match.group(1)) + 1
    return None


def _locate_key(lines: list[Line], key: str) -> tuple[int, int] | None:
    in_root = True
    for lineno, line in lines:
        if _ARRAY_HEADER_RE.match(line):
            in_root = False
            continue
        header = _TABLE_HEADER_RE.match(line)
        if header is not None:
            if header.group(2) == key:
                return lineno, len(header.group(1)) + 1
            in_root = False
            continue
        if in_root:
            assignment = _KEY_RE.match(line)
            if assignment is not None and assignment.group(2) == key:
                return lineno, len(assignment.group(1)) + 1
    return None


# ---------------------------------------------------------------------------
# Multi-line strings
# ---------------------------------------------------------------------------

def _code_lines(text: str) -> Iterator[Line]:
    """Yield ``(lineno, line)`` for lines that do not start inside a
    multi-line string."""
    delimiter: str | None = None
    for lineno, line in enumerate(text.splitlines(), start=1):
        if delimiter is None:
            yield lineno, line
        delimiter = _open_delimiter(line, delimiter)


def _open_delimiter(line: str, delimiter: str | None) -> str | None:
    """Scan *line* and return the delimiter of the multi-line string still
    open at its end, or ``None``."""
    i = 0
    while i < len(line):
        if delimiter is not None:
            if delimiter == '"""' and line[i] == "\\":
                i += 2
            elif line.startswith(delimiter, i):
                i += 3
                # Up to two quotes may directly precede the closing delimiter.
                while i < len(line) and line[i] == delimiter[0]:
                    i += 1
                delimiter = None
            else:
                i += 1
            continue

        char = line[i]
        if char == "#":
            break
        if line.startswith(_MULTILINE_DELIMITERS, i):
            delimiter = line[i : i + 3]
            i += 3
        elif char in "\"'":
            i = _skip_string(line, i)
        else:
            i += 1
    return delimiter


def _skip_string(line: str, start: int) -> int:
    quote = line[start]
    i = start + 1
    while i < len(line):
        if quote == '"' and line[i] == "\\":
            i += 2
            continue
        if line[i] == quote:
            return i + 1
        i += 1
    return i
