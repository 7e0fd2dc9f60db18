"""Shared fixtures for Enarx config conformance tests.

Provides the reference ``Enarx.toml`` document used across levels and
helpers for building one-entry documents.
"""
from __future__ import annotations

import pytest

from enarx_config.config import ApplicationConfig
from enarx_config.loader.document import parse_config

# ---------------------------------------------------------------------------
# Reference document: one entry of every kind, mixed defaults
# ---------------------------------------------------------------------------
REFERENCE_DOCUMENT = """
        [[files]]
        kind = "stdin"

        [[files]]
        name = "X"
        kind = "listen"
        prot = "tcp"
        port = 9000

        [[files]]
        kind = "stdout"

        [[files]]
        kind = "null"

        [[files]]
        kind = "stderr"

        [[files]]
        kind = "connect"
        host = "example.com"
"""

REFERENCE_NAMES = ["stdin", "X", "stdout", "null", "stderr", "example.com"]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def reference_config() -> ApplicationConfig:
    return parse_config(REFERENCE_DOCUMENT)


# ---------------------------------------------------------------------------
# Document helpers
# ---------------------------------------------------------------------------
def single_entry(**fields: object) -> str:
    """Render a document with one ``[[files]]`` entry holding *fields*."""
    lines = ["[[files]]"]
    for key, value in fields.items():
        if isinstance(value, str):
            lines.append(f'{key} = "{value}"')
        else:
            lines.append(f"{key} = {value}")
    return "\n".join(lines) + "\n"
