#!/usr/bin/env python3
"""Enarx config quickstart.

Demonstrates the core workflow:

1. Parse an ``Enarx.toml`` document.
2. Walk the pre-opened files in descriptor order.
3. Resolve the names a runtime would export in ``FD_NAMES``.
4. Show how an invalid document is reported.

Run:
    python examples/quickstart.py
"""
from __future__ import annotations

from enarx_config import (
    FD_NAMES_SEPARATOR,
    ConfigError,
    ConnectFile,
    ListenFile,
    parse_config,
    resolve_name,
)

DOCUMENT = """
args = ["--port", "8443"]

[env]
RUST_LOG = "info"

[[files]]
kind = "stdin"

[[files]]
kind = "stdout"

[[files]]
kind = "stderr"

[[files]]
name = "LISTEN"
kind = "listen"
port = 8443

[[files]]
kind = "connect"
host = "db.example.com"
port = 5432
prot = "tcp"
"""


def main() -> None:
    # -- Step 1: Parse ------------------------------------------------------
    config = parse_config(DOCUMENT, source="quickstart")
    print(f"[1] Parsed config: {len(config.files)} files, args={config.args}")

    # -- Step 2: Walk the files ---------------------------------------------
    print("[2] Pre-opened files:")
    for fd, spec in enumerate(config.files):
        line = f"    fd {fd}: {spec.kind:<7} name={resolve_name(spec)!r}"
        if isinstance(spec, ListenFile):
            line += f" listen on [{spec.address}]:{spec.port} ({spec.protocol})"
        elif isinstance(spec, ConnectFile):
            line += f" connect to {spec.host}:{spec.port} ({spec.protocol})"
        print(line)

    # -- Step 3: FD_NAMES ---------------------------------------------------
    print(f"[3] FD_NAMES={FD_NAMES_SEPARATOR.join(config.file_names())}")

    # -- Step 4: Errors -----------------------------------------------------
    try:
        parse_config('[[files]]\nkind = "null"\nname = "bad:name"\n')
    except ConfigError as exc:
        print(f"[4] Rejected: {exc} ({exc.code})")


if __name__ == "__main__":
    main()
