"""Enarx config loader subpackage -- TOML in, validated config out.

* **Documents** -- parsing, file loading, JSON serialisation and error
  translation (:mod:`~enarx_config.loader.document`).
* **Locations** -- mapping error paths to TOML line/column
  (:mod:`~enarx_config.loader.location`).
"""
from __future__ import annotations

from enarx_config.loader.document import (
    config_from_dict,
    load_config,
    parse_config,
    parse_config_json,
    serialize_config,
    translate_validation_error,
)
from enarx_config.loader.location import locate

__all__ = [
    "parse_config",
    "load_config",
    "config_from_dict",
    "serialize_config",
    "parse_config_json",
    "translate_validation_error",
    "locate",
]
