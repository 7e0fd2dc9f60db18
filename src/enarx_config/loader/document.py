"""Loading and serialising ``Enarx.toml`` documents.

This module provides:

* **parse_config / load_config** -- decode TOML text (or a file) into an
  :class:`~enarx_config.config.ApplicationConfig`.
* **config_from_dict** -- validate an already-decoded document.
* **serialize_config / parse_config_json** -- compact JSON form of a
  validated config, using the document keys (``addr``, ``prot``).

Every failure is raised as a :class:`~enarx_config.core.errors.ConfigError`
subclass with the underlying ``tomllib`` or pydantic exception chained.
When the source text is available the error is also located to a line
and column.

All helpers are synchronous and side-effect-free apart from reading the
file in :func:`load_config`.
"""
from __future__ import annotations

import logging
import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from enarx_config.config import ApplicationConfig
from enarx_config.core.errors import (
    ConfigError,
    InvalidFieldValue,
    InvalidFileName,
    MalformedDocument,
    MissingField,
    UnknownFileKind,
)
from enarx_config.core.types import FileKind
from enarx_config.loader.location import locate

logger = logging.getLogger(__name__)

_TOML_POSITION_RE = re.compile(
    r"\s*\(at (?:line (\d+), column (\d+)|end of document)\)\s*$"
)
_FILE_KINDS: frozenset[str] = frozenset(kind.value for kind in FileKind)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def parse_config(text: str | bytes, *, source: str = "<string>") -> ApplicationConfig:
    """Parse TOML *text* into an :class:`ApplicationConfig`.

    Parameters
    ----------
    text:
        The document.  ``bytes`` are decoded as UTF-8.
    source:
        Label used in error details and log messages, usually a path.

    Raises
    ------
    MalformedDocument
        If the text is not valid UTF-8 or not valid TOML.
    UnknownFileKind, MissingField, InvalidFieldValue, InvalidFileName
        If the document does not validate.  The error is located to a
        line and column where possible.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedDocument(
                f"document is not valid UTF-8: {exc.reason}",
                details={"source": source},
            ) from exc

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise _decode_error(exc, source) from exc

    return _build(data, source=source, text=text)


def load_config(path: str | os.PathLike[str]) -> ApplicationConfig:
    """Read and parse the ``Enarx.toml`` at *path*.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    MalformedDocument
        If *path* is a directory.
    ConfigError
        As for :func:`parse_config`.
    """
    path = Path(path)
    try:
        raw = path.read_bytes()
    except IsADirectoryError as exc:
        raise MalformedDocument(
            f"config path is a directory: {path}",
            details={"source": str(path)},
        ) from exc
    return parse_config(raw, source=str(path))


def config_from_dict(data: Mapping[str, Any]) -> ApplicationConfig:
    """Validate an already-decoded document.

    Section defaults apply only to keys that are absent; in particular a
    present-but-empty ``files`` list stays empty.
    """
    return _build(data, source="<mapping>", text=None)


def _build(data: Any, *, source: str, text: str | None) -> ApplicationConfig:
    if not isinstance(data, Mapping):
        raise MalformedDocument(
            f"document must be a table, got {type(data).__name__}",
            details={"source": source},
        )
    if "files" not in data:
        logger.debug("%s has no files section; using stdin, stdout, stderr", source)

    try:
        config = ApplicationConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise translate_validation_error(exc, source=source, text=text) from exc

    logger.debug("Parsed %s: %d file descriptor(s)", source, len(config.files))
    return config


# ---------------------------------------------------------------------------
# Serialisation
# ---------------------------------------------------------------------------

def serialize_config(config: ApplicationConfig) -> str:
    """Serialise *config* to a compact JSON string using document keys."""
    return config.model_dump_json(by_alias=True)


def parse_config_json(raw: str | bytes) -> ApplicationConfig:
    """Parse the output of :func:`serialize_config` back into a config.

    Text that is not JSON at all raises :class:`MalformedDocument`.
    """
    try:
        return ApplicationConfig.model_validate_json(raw)
    except ValidationError as exc:
        raise translate_validation_error(exc, source="<json>", text=None) from exc


# ---------------------------------------------------------------------------
# Error translation
# ---------------------------------------------------------------------------

def translate_validation_error(
    exc: ValidationError,
    *,
    source: str = "<mapping>",
    text: str | None = None,
) -> ConfigError:
    """Map the first error of a pydantic ``ValidationError`` onto the
    :mod:`enarx_config.core.errors` hierarchy.

    The discriminator tag pydantic inserts into union locations is
    dropped, so a bad name in the second entry has the path
    ``("files", 1, "name")``.
    """
    error = exc.errors()[0]
    error_type = error["type"]
    ctx = error.get("ctx") or {}
    path = _document_path(error["loc"])
    details: dict[str, Any] = {"source": source, "error_count": exc.error_count()}

    result: ConfigError
    if error_type == "json_invalid":
        result = MalformedDocument(f"invalid JSON: {ctx.get('error')}", details=details)
    elif error_type == "invalid_file_name":
        details["name"] = error["input"]
        result = InvalidFileName(details=details, path=path)
    elif error_type == "union_tag_invalid":
        tag = ctx.get("tag")
        details["kind"] = tag
        result = UnknownFileKind(
            f"unknown variant `{tag}`, expected one of {ctx.get('expected_tags')}",
            details=details,
            path=path + ("kind",),
        )
    elif error_type == "union_tag_not_found":
        result = MissingField(
            "missing field `kind`", details=details, path=path + ("kind",)
        )
    elif error_type == "missing":
        result = MissingField(
            f"missing field `{path[-1]}`", details=details, path=path
        )
    else:
        details["type"] = error_type
        result = InvalidFieldValue(
            f"invalid value for `{_dotted(path)}`: {error['msg']}",
            details=details,
            path=path,
        )

    if text is not None:
        position = locate(text, result.path)
        if position is not None:
            result.line, result.column = position
    return result


def _document_path(loc: tuple[str | int, ...]) -> tuple[str | int, ...]:
    path: list[str | int] = []
    for index, part in enumerate(loc):
        if (
            isinstance(part, str)
            and part in _FILE_KINDS
            and index > 0
            and isinstance(loc[index - 1], int)
        ):
            continue
        path.append(part)
    return tuple(path)


def _dotted(path: tuple[str | int, ...]) -> str:
    text = ""
    for part in path:
        if isinstance(part, int):
            text += f"[{part}]"
        else:
            text += f".{part}" if text else part
    return text or "<document>"


def _decode_error(exc: tomllib.TOMLDecodeError, source: str) -> MalformedDocument:
    message = getattr(exc, "msg", None) or str(exc)
    line = getattr(exc, "lineno", None)
    column = getattr(exc, "colno", None)

    match = _TOML_POSITION_RE.search(message)
    if match is not None:
        if line is None and match.group(1) is not None:
            line, column = int(match.group(1)), int(match.group(2))
        message = message[: match.start()]

    return MalformedDocument(
        f"invalid TOML: {message}",
        details={"source": source},
        line=line,
        column=column,
    )
