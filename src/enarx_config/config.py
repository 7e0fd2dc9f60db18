"""Top-level configuration of an Enarx WASI application.

Defines :class:`ApplicationConfig`, the validated form of a whole
``Enarx.toml`` document.  Every section is optional; a document that
omits all of them yields the same value as ``ApplicationConfig()``.
"""
from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, AnyUrl, BaseModel, ConfigDict, Field, PlainSerializer

from enarx_config.files.naming import file_names
from enarx_config.files.specs import FileSpec, default_files


def _read_only(env: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(env))


def _as_dict(env: Mapping[str, str]) -> dict[str, str]:
    return dict(env)


Environment = Annotated[
    Mapping[str, str],
    AfterValidator(_read_only),
    PlainSerializer(_as_dict, return_type=dict[str, str]),
]
"""Read-only ``name -> value`` mapping; serialises as a plain table."""


class ApplicationConfig(BaseModel):
    """Configuration for an Enarx WASI application.

    Example document::

        args = ["--verbose"]

        [env]
        RUST_LOG = "info"

        [[files]]
        kind = "stdin"

        [[files]]
        name = "LISTEN"
        kind = "listen"
        prot = "tls"
        port = 12345

    The ``files`` default applies only when the key is missing.  An
    explicit ``files = []`` gives the application no descriptors at all.

    The value is immutable all the way down: ``files`` and ``args`` are
    tuples and ``env`` is a read-only mapping, so a config can be hashed
    and shared between threads.
    """

    model_config = ConfigDict(frozen=True)

    env: Environment = Field(
        default_factory=lambda: MappingProxyType({}),
        description="Environment variables to provide to the application.",
    )
    args: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Arguments to provide to the application.",
    )
    files: tuple[FileSpec, ...] = Field(
        default_factory=default_files,
        description=(
            "Pre-opened file descriptors, in descriptor order. Defaults "
            "to stdin, stdout and stderr."
        ),
    )
    steward: AnyUrl | None = Field(
        default=None,
        description="Optional Steward (attestation service) URL.",
    )

    def file_names(self) -> list[str]:
        """Names of :attr:`files` in descriptor order."""
        return file_names(self.files)

    def __hash__(self) -> int:
        steward = None if self.steward is None else str(self.steward)
        return hash((frozenset(self.env.items()), self.args, self.files, steward))
