"""Cargo metadata loading."""

from __future__ import annotations

from cargo_topo.metadata.loader import (
    load_workspace,
    parse_metadata,
    read_metadata_file,
    run_cargo_metadata,
)

__all__ = [
    "load_workspace",
    "parse_metadata",
    "read_metadata_file",
    "run_cargo_metadata",
]
