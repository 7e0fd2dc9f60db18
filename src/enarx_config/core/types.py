"""Enarx config shared value types.

This module defines the value types and enums shared by the file
descriptor variants and the top-level application config.  All public
symbols are re-exported from ``enarx_config``.

Key design decisions:
* ``FileName`` is an ``Annotated`` ``str`` so that it validates when a
  document is parsed but stays a plain ``str`` everywhere else.  The
  fixed fallback labels (``"stdin"`` and friends) never go through it.
* Enums use *string* values so they serialise back to the exact
  spelling used in ``Enarx.toml``.
"""
from __future__ import annotations

import enum
from typing import Annotated

from pydantic import AfterValidator
from pydantic_core import PydanticCustomError

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_PORT: int = 443
"""Port used by ``listen`` and ``connect`` entries when none is given."""

DEFAULT_ADDRESS: str = "::"
"""Address a ``listen`` entry binds to when none is given (IPv6 any)."""

FD_NAMES_SEPARATOR: str = ":"
"""Separator of the ``FD_NAMES`` list exported by the runtime."""


# ---------------------------------------------------------------------------
# FileName -- validated descriptor name
# ---------------------------------------------------------------------------

def _validate_file_name(value: str) -> str:
    if FD_NAMES_SEPARATOR in value:
        raise PydanticCustomError(
            "invalid_file_name",
            "invalid value for `name` contains ':'",
            {"name": value},
        )
    return value


FileName = Annotated[str, AfterValidator(_validate_file_name)]
"""Name of a file descriptor, exported in the ``FD_NAMES`` variable.

Untrusted input containing ``:`` is rejected; the string is otherwise
kept verbatim (the empty string included).
"""


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Protocol(enum.StrEnum):
    """Transport wrapper for network file descriptors."""

    TLS = "tls"
    """Transparently wrap the TCP connection with TLS."""

    TCP = "tcp"
    """Plain TCP connection."""

    @property
    def encrypted(self) -> bool:
        return self is Protocol.TLS


class FileKind(enum.StrEnum):
    """Values of the ``kind`` discriminator of a ``[[files]]`` entry."""

    NULL = "null"
    STDIN = "stdin"
    STDOUT = "stdout"
    STDERR = "stderr"
    LISTEN = "listen"
    CONNECT = "connect"

