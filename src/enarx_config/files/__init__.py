"""Enarx config files subpackage -- pre-opened file descriptor entries.

This subpackage provides:

* **Variants** -- one frozen model per ``kind`` plus the
  :data:`FileSpec` discriminated union (:mod:`~enarx_config.files.specs`).
* **Name resolution** -- the names the runtime exports in ``FD_NAMES``
  (:mod:`~enarx_config.files.naming`).
"""
from __future__ import annotations

from enarx_config.files.naming import file_names, resolve_name
from enarx_config.files.specs import (
    ConnectFile,
    FileSpec,
    ListenFile,
    NullFile,
    StderrFile,
    StdinFile,
    StdoutFile,
    default_files,
    parse_file_spec,
)

__all__ = [
    # Variants
    "NullFile",
    "StdinFile",
    "StdoutFile",
    "StderrFile",
    "ListenFile",
    "ConnectFile",
    "FileSpec",
    "default_files",
    "parse_file_spec",
    # Naming
    "resolve_name",
    "file_names",
]
