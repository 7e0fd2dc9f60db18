"""Enarx config error-code hierarchy.

Every way a configuration document can be rejected is represented as a
concrete exception class.

Hierarchy
---------
::

    ConfigError
    +-- StructuralError      (EC-E1xx)
    |   +-- MalformedDocument
    |   +-- UnknownFileKind
    |   +-- MissingField
    |   +-- InvalidFieldValue
    +-- ValidationFailure    (EC-E2xx)
        +-- InvalidFileName

Usage
-----
Catch by category::

    try:
        config = parse_config(text)
    except StructuralError:
        # handles MalformedDocument, UnknownFileKind, MissingField, ...
        ...
"""
from __future__ import annotations

from typing import Any

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

class ConfigError(Exception):
    """Base exception for all configuration errors.

    Attributes
    ----------
    code : str
        Error code, e.g. ``"EC-E100"``.
    message : str
        Human-readable description of what was rejected.
    details : dict[str, Any]
        Machine-readable context specific to the error instance.
    resolution : str
        Suggested fix for the document author.
    path : tuple[str | int, ...]
        Location of the offending value inside the document, e.g.
        ``("files", 0, "name")``.  Empty when unknown.
    line, column : int | None
        1-based position in the source text, when it could be located.
    """

    code: str = "EC-E000"
    message: str = "Invalid configuration"
    resolution: str = ""

    def __init__(
        self,
        message: str | None = None,
        *,
        details: dict[str, Any] | None = None,
        resolution: str | None = None,
        path: tuple[str | int, ...] = (),
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        self.details: dict[str, Any] = details or {}
        if message is not None:
            self.message = message
        if resolution is not None:
            self.resolution = resolution
        self.path = tuple(path)
        self.line = line
        self.column = column
        super().__init__(self.message)

    @property
    def field(self) -> str | None:
        """Top-level key of the document the error belongs to."""
        if self.path and isinstance(self.path[0], str):
            return self.path[0]
        return None

    @property
    def line_col(self) -> tuple[int, int] | None:
        if self.line is None or self.column is None:
            return None
        return self.line, self.column

    def to_dict(self) -> dict[str, Any]:
        """Serialise the error for machine consumption."""
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
        }
        if self.path:
            payload["path"] = list(self.path)
        if self.line_col is not None:
            payload["line"], payload["column"] = self.line_col
        if self.details:
            payload["detail"] = self.details
        if self.resolution:
            payload["resolution"] = self.resolution
        return {"error": payload}

    def __str__(self) -> str:
        text = self.message
        if self.field is not None:
            text += f" for key `{self.field}`"
        if self.line_col is not None:
            text += " at line {} column {}".format(*self.line_col)
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


# ===================================================================
# Category base classes
# ===================================================================

class StructuralError(ConfigError):
    """EC-E1xx -- The document does not have the expected shape."""

    code = "EC-E1XX"


class ValidationFailure(ConfigError):
    """EC-E2xx -- A value has the right shape but is not acceptable."""

    code = "EC-E2XX"


# ===================================================================
# EC-E1xx  Structural errors
# ===================================================================

class MalformedDocument(StructuralError):
    """EC-E100 -- The document is not valid TOML or not a table."""

    code = "EC-E100"
    message = "Malformed configuration document"
    resolution = "Fix the TOML syntax; the top level must be a table."


class UnknownFileKind(StructuralError):
    """EC-E101 -- A ``[[files]]`` entry has an unrecognised ``kind``."""

    code = "EC-E101"
    message = "Unknown file descriptor kind"
    resolution = (
        "Use one of the supported kinds: null, stdin, stdout, stderr, "
        "listen, connect."
    )


class MissingField(StructuralError):
    """EC-E102 -- A required field is absent."""

    code = "EC-E102"
    message = "Missing required field"
    resolution = (
        "Every entry needs a `kind`; `listen` entries need a `name` and "
        "`connect` entries need a `host`."
    )


class InvalidFieldValue(StructuralError):
    """EC-E103 -- A field holds a value of the wrong type or range."""

    code = "EC-E103"
    message = "Invalid field value"


# ===================================================================
# EC-E2xx  Validation errors
# ===================================================================

class InvalidFileName(ValidationFailure):
    """EC-E200 -- A descriptor ``name`` contains the reserved ``:``."""

    code = "EC-E200"
    message = "invalid value for `name` contains ':'"
    resolution = (
        "Remove ':' from the name; it separates entries of FD_NAMES."
    )
