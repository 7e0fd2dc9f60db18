"""Enarx config -- configuration for a WASI application in an Enarx Keep.

An ``Enarx.toml`` document describes the environment, arguments and
pre-opened file descriptors handed to the application::

    [[files]]
    kind = "stdin"

    [[files]]
    name = "LISTEN"
    kind = "listen"
    prot = "tls"
    port = 12345

Layers
------
0. Core types and errors (:mod:`enarx_config.core`)
1. File descriptor entries and name resolution (:mod:`enarx_config.files`)
2. Application config (:mod:`enarx_config.config`)
3. Document loading (:mod:`enarx_config.loader`)
"""
from __future__ import annotations

__version__ = "0.6.0"

# ---------------------------------------------------------------------------
# Level 2 -- Application config
# ---------------------------------------------------------------------------
from enarx_config.config import ApplicationConfig

# ---------------------------------------------------------------------------
# Level 0 -- Core types and errors
# ---------------------------------------------------------------------------
from enarx_config.core.errors import (
    ConfigError,
    InvalidFieldValue,
    InvalidFileName,
    MalformedDocument,
    MissingField,
    StructuralError,
    UnknownFileKind,
    ValidationFailure,
)
from enarx_config.core.types import (
    DEFAULT_ADDRESS,
    DEFAULT_PORT,
    FD_NAMES_SEPARATOR,
    FileKind,
    FileName,
    Protocol,
)

# ---------------------------------------------------------------------------
# Level 1 -- File descriptor entries
# ---------------------------------------------------------------------------
from enarx_config.files import (
    ConnectFile,
    FileSpec,
    ListenFile,
    NullFile,
    StderrFile,
    StdinFile,
    StdoutFile,
    default_files,
    file_names,
    parse_file_spec,
    resolve_name,
)

# ---------------------------------------------------------------------------
# Level 3 -- Document loading
# ---------------------------------------------------------------------------
from enarx_config.loader import (
    config_from_dict,
    load_config,
    parse_config,
    parse_config_json,
    serialize_config,
)

__all__ = [
    # Meta
    "__version__",
    # Core types
    "DEFAULT_ADDRESS",
    "DEFAULT_PORT",
    "FD_NAMES_SEPARATOR",
    "FileKind",
    "FileName",
    "Protocol",
    # Error hierarchy
    "ConfigError",
    "StructuralError",
    "MalformedDocument",
    "UnknownFileKind",
    "MissingField",
    "InvalidFieldValue",
    "ValidationFailure",
    "InvalidFileName",
    # Files
    "NullFile",
    "StdinFile",
    "StdoutFile",
    "StderrFile",
    "ListenFile",
    "ConnectFile",
    "FileSpec",
    "default_files",
    "parse_file_spec",
    "resolve_name",
    "file_names",
    # Config
    "ApplicationConfig",
    # Loader
    "parse_config",
    "load_config",
    "config_from_dict",
    "serialize_config",
    "parse_config_json",
]
