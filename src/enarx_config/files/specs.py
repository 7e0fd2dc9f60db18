"""Pre-opened file descriptor variants.

Each ``[[files]]`` entry of an ``Enarx.toml`` document is one of six
shapes, selected by its ``kind`` key:

* ``null`` / ``stdin`` / ``stdout`` / ``stderr`` -- console streams and
  ``/dev/null``; only an optional ``name``.
* ``listen`` -- a TCP listen socket; ``name`` is required.
* ``connect`` -- an outbound TCP stream; ``host`` is required.

:data:`FileSpec` is the discriminated union of these models.  Every model
is frozen, so a parsed entry can be shared freely.
"""
from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from enarx_config.core.types import DEFAULT_ADDRESS, DEFAULT_PORT, FileName, Protocol

_FILE_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True)

Port = Annotated[int, Field(ge=0, le=65535, strict=True)]


# ---------------------------------------------------------------------------
# Streams
# ---------------------------------------------------------------------------

class NullFile(BaseModel):
    """File descriptor to ``/dev/null``."""

    model_config = _FILE_MODEL_CONFIG

    kind: Literal["null"] = "null"
    name: FileName | None = None


class StdinFile(BaseModel):
    """File descriptor to the host's stdin."""

    model_config = _FILE_MODEL_CONFIG

    kind: Literal["stdin"] = "stdin"
    name: FileName | None = None


class StdoutFile(BaseModel):
    """File descriptor to the host's stdout."""

    model_config = _FILE_MODEL_CONFIG

    kind: Literal["stdout"] = "stdout"
    name: FileName | None = None


class StderrFile(BaseModel):
    """File descriptor to the host's stderr."""

    model_config = _FILE_MODEL_CONFIG

    kind: Literal["stderr"] = "stderr"
    name: FileName | None = None


# ---------------------------------------------------------------------------
# Sockets
# ---------------------------------------------------------------------------

class ListenFile(BaseModel):
    """File descriptor to a TCP listen socket.

    Unlike every other kind, a listen socket has nothing to fall back on
    for its name, so ``name`` must be given explicitly.
    """

    model_config = _FILE_MODEL_CONFIG

    kind: Literal["listen"] = "listen"
    name: FileName
    address: str = Field(
        default=DEFAULT_ADDRESS,
        alias="addr",
        description="Address to listen on.",
    )
    port: Port = Field(default=DEFAULT_PORT, description="Port to listen on.")
    protocol: Protocol = Field(
        default=Protocol.TLS,
        alias="prot",
        description="Transport wrapper applied to accepted connections.",
    )


class ConnectFile(BaseModel):
    """File descriptor to a TCP stream socket connected to ``host``."""

    model_config = _FILE_MODEL_CONFIG

    kind: Literal["connect"] = "connect"
    name: FileName | None = None
    host: str = Field(description="Host address to connect to.")
    port: Port = Field(default=DEFAULT_PORT, description="Port to connect to.")
    protocol: Protocol = Field(
        default=Protocol.TLS,
        alias="prot",
        description="Transport wrapper applied to the connection.",
    )


# ---------------------------------------------------------------------------
# Union
# ---------------------------------------------------------------------------

FileSpec = Annotated[
    Union[NullFile, StdinFile, StdoutFile, StderrFile, ListenFile, ConnectFile],
    Field(discriminator="kind"),
]
"""Parameters for a pre-opened file descriptor, tagged by ``kind``."""

_FILE_SPEC_ADAPTER: TypeAdapter[FileSpec] = TypeAdapter(FileSpec)


def parse_file_spec(data: object) -> FileSpec:
    """Validate a single ``[[files]]`` entry.

    Raises :class:`pydantic.ValidationError`; callers that want the
    :mod:`enarx_config.core.errors` hierarchy go through the loader.
    """
    return _FILE_SPEC_ADAPTER.validate_python(data)


def default_files() -> tuple[FileSpec, ...]:
    """Files used when a document has no ``files`` key at all."""
    return (StdinFile(), StdoutFile(), StderrFile())
