"""Name resolution for pre-opened file descriptors.

The runtime exports one name per descriptor, in ``files`` order.  The
name is the explicit ``name`` when present; otherwise streams fall back
to their kind and ``connect`` entries fall back to their host.  A
``listen`` entry always carries its own name.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import assert_never

from enarx_config.files.specs import (
    ConnectFile,
    FileSpec,
    ListenFile,
    NullFile,
    StderrFile,
    StdinFile,
    StdoutFile,
)


def resolve_name(spec: FileSpec) -> str:
    """Return the externally visible name of *spec*.

    Never fails.  Adding a variant to :data:`FileSpec` without handling
    it here is caught by static type checkers via ``assert_never``.
    """
    match spec:
        case NullFile(name=name):
            return "null" if name is None else name
        case StdinFile(name=name):
            return "stdin" if name is None else name
        case StdoutFile(name=name):
            return "stdout" if name is None else name
        case StderrFile(name=name):
            return "stderr" if name is None else name
        case ListenFile(name=name):
            return name
        case ConnectFile(name=name, host=host):
            return host if name is None else name
        case _:
            assert_never(spec)


def file_names(files: Iterable[FileSpec]) -> list[str]:
    """Resolve the names of *files*, preserving order.

    Duplicates are returned as-is.
    """
    return [resolve_name(spec) for spec in files]
