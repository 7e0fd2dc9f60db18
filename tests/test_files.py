"""Tests for enarx_config file descriptor entries.

Covers:

1. **Dispatch** -- ``kind`` selects the variant; unknown and missing
   tags are rejected.
2. **Defaults** -- address, port and protocol of network entries.
3. **Required fields** -- ``listen.name`` and ``connect.host``.
4. **Field validation** -- names, ports, aliases, unknown keys.
5. **Immutability** -- frozen, hashable models.
6. **Name resolution** -- fallback per variant, ordering, duplicates.
"""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from enarx_config.core.types import Protocol
from enarx_config.files.naming import file_names, resolve_name
from enarx_config.files.specs import (
    ConnectFile,
    ListenFile,
    NullFile,
    StderrFile,
    StdinFile,
    StdoutFile,
    default_files,
    parse_file_spec,
)

# ===================================================================
# Dispatch
# ===================================================================


class TestDispatch:
    """``kind`` maps to exactly one variant."""

    @pytest.mark.parametrize(
        ("kind", "cls"),
        [
            ("null", NullFile),
            ("stdin", StdinFile),
            ("stdout", StdoutFile),
            ("stderr", StderrFile),
        ],
    )
    def test_stream_kinds(self, kind: str, cls: type) -> None:
        spec = parse_file_spec({"kind": kind})
        assert type(spec) is cls
        assert spec.name is None

    def test_listen(self) -> None:
        spec = parse_file_spec({"kind": "listen", "name": "X"})
        assert isinstance(spec, ListenFile)

    def test_connect(self) -> None:
        spec = parse_file_spec({"kind": "connect", "host": "example.com"})
        assert isinstance(spec, ConnectFile)

    def test_unknown_kind(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_file_spec({"kind": "pipe"})
        assert excinfo.value.errors()[0]["type"] == "union_tag_invalid"

    def test_missing_kind(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_file_spec({"name": "X"})
        assert excinfo.value.errors()[0]["type"] == "union_tag_not_found"

    def test_kind_is_case_sensitive(self) -> None:
        with pytest.raises(ValidationError):
            parse_file_spec({"kind": "STDIN"})

    def test_variant_rejects_foreign_kind(self) -> None:
        with pytest.raises(ValidationError):
            NullFile(kind="stdin")


# ===================================================================
# Defaults
# ===================================================================


class TestNetworkDefaults:

    def test_listen_defaults(self) -> None:
        spec = parse_file_spec({"kind": "listen", "name": "X"})
        assert spec.address == "::"
        assert spec.port == 443
        assert spec.protocol is Protocol.TLS

    def test_connect_defaults(self) -> None:
        spec = parse_file_spec({"kind": "connect", "host": "example.com"})
        assert spec.name is None
        assert spec.port == 443
        assert spec.protocol is Protocol.TLS

    def test_explicit_values_override_defaults(self) -> None:
        spec = parse_file_spec(
            {"kind": "listen", "name": "X", "addr": "127.0.0.1", "port": 9000, "prot": "tcp"}
        )
        assert spec == ListenFile(name="X", address="127.0.0.1", port=9000, protocol=Protocol.TCP)

    def test_default_files(self) -> None:
        assert default_files() == (StdinFile(), StdoutFile(), StderrFile())

    def test_default_files_are_immutable(self) -> None:
        files = default_files()
        with pytest.raises(AttributeError):
            files.append(NullFile())  # type: ignore[attr-defined]
        assert len(default_files()) == 3


# ===================================================================
# Required fields
# ===================================================================


class TestRequiredFields:

    def test_listen_requires_name(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_file_spec({"kind": "listen", "port": 9000})
        error = excinfo.value.errors()[0]
        assert error["type"] == "missing"
        assert error["loc"][-1] == "name"

    def test_connect_requires_host(self) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_file_spec({"kind": "connect", "name": "X"})
        error = excinfo.value.errors()[0]
        assert error["type"] == "missing"
        assert error["loc"][-1] == "host"

    def test_connect_name_is_optional(self) -> None:
        assert ConnectFile(host="example.com").name is None


# ===================================================================
# Field validation
# ===================================================================


class TestFieldValidation:

    @pytest.mark.parametrize("kind", ["null", "stdin", "stdout", "stderr"])
    def test_stream_name_validated(self, kind: str) -> None:
        with pytest.raises(ValidationError) as excinfo:
            parse_file_spec({"kind": kind, "name": "test:"})
        assert excinfo.value.errors()[0]["type"] == "invalid_file_name"

    def test_listen_name_validated(self) -> None:
        with pytest.raises(ValidationError):
            parse_file_spec({"kind": "listen", "name": "a:b"})

    def test_connect_name_validated(self) -> None:
        with pytest.raises(ValidationError):
            parse_file_spec({"kind": "connect", "name": "a:b", "host": "h"})

    def test_connect_host_may_contain_colon(self) -> None:
        spec = parse_file_spec({"kind": "connect", "host": "::1"})
        assert spec.host == "::1"

    def test_direct_construction_validates(self) -> None:
        with pytest.raises(ValidationError):
            StdinFile(name="in:put")

    def test_empty_name_accepted(self) -> None:
        assert parse_file_spec({"kind": "null", "name": ""}).name == ""

    @pytest.mark.parametrize("port", [-1, 65536, "443", 443.5, True])
    def test_invalid_port(self, port: object) -> None:
        with pytest.raises(ValidationError):
            parse_file_spec({"kind": "listen", "name": "X", "port": port})

    @pytest.mark.parametrize("port", [0, 1, 8080, 65535])
    def test_valid_port(self, port: int) -> None:
        assert parse_file_spec({"kind": "connect", "host": "h", "port": port}).port == port

    def test_unknown_protocol(self) -> None:
        with pytest.raises(ValidationError):
            parse_file_spec({"kind": "connect", "host": "h", "prot": "udp"})

    def test_field_names_accepted_as_well_as_document_keys(self) -> None:
        spec = parse_file_spec(
            {"kind": "listen", "name": "X", "address": "0.0.0.0", "protocol": "tcp"}
        )
        assert spec.address == "0.0.0.0"
        assert spec.protocol is Protocol.TCP

    def test_unknown_keys_ignored(self) -> None:
        assert parse_file_spec({"kind": "null", "mode": "rw"}) == NullFile()


# ===================================================================
# Immutability
# ===================================================================


class TestImmutability:

    def test_frozen(self) -> None:
        spec = ListenFile(name="X")
        with pytest.raises(ValidationError):
            spec.port = 80

    def test_hashable(self) -> None:
        specs = {StdinFile(), StdinFile(), ConnectFile(host="h")}
        assert len(specs) == 2


# ===================================================================
# Name resolution
# ===================================================================


class TestResolveName:

    @pytest.mark.parametrize(
        ("spec", "expected"),
        [
            (NullFile(), "null"),
            (StdinFile(), "stdin"),
            (StdoutFile(), "stdout"),
            (StderrFile(), "stderr"),
            (ConnectFile(host="example.com"), "example.com"),
        ],
    )
    def test_fallback(self, spec: object, expected: str) -> None:
        assert resolve_name(spec) == expected

    @pytest.mark.parametrize(
        "spec",
        [
            NullFile(name="N"),
            StdinFile(name="N"),
            StdoutFile(name="N"),
            StderrFile(name="N"),
            ListenFile(name="N"),
            ConnectFile(name="N", host="example.com"),
        ],
    )
    def test_explicit_name_wins(self, spec: object) -> None:
        assert resolve_name(spec) == "N"

    def test_empty_name_is_explicit(self) -> None:
        assert resolve_name(StdinFile(name="")) == ""

    def test_listen_ignores_address(self) -> None:
        assert resolve_name(ListenFile(name="api", address="10.0.0.1")) == "api"

    def test_file_names_keeps_order(self) -> None:
        files = [StderrFile(), ListenFile(name="X"), StdinFile()]
        assert file_names(files) == ["stderr", "X", "stdin"]

    def test_file_names_keeps_duplicates(self) -> None:
        files = [StdinFile(), StdinFile(), NullFile(name="stdin")]
        assert file_names(files) == ["stdin", "stdin", "stdin"]

    def test_file_names_empty(self) -> None:
        assert file_names([]) == []
