"""Compact output: crate names only, one per line."""

from __future__ import annotations

from cargo_topo.models import TopoResult
from cargo_topo.formatter.base import BaseFormatter


class CompactFormatter(BaseFormatter):

    def format_order(self, result: TopoResult) -> str:
        return "\n".join(result.names)

    def format_layers(self, result: TopoResult) -> str:
        # One layer per line, space separated
        return "\n".join(
            " ".join(node.name for node in layer) for layer in result.layers
        )
