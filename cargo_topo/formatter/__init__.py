"""Formatter registry."""

from __future__ import annotations

from cargo_topo.models import TopoResult
from cargo_topo.formatter.base import BaseFormatter
from cargo_topo.formatter.compact_formatter import CompactFormatter
from cargo_topo.formatter.detailed_formatter import DetailedFormatter

_compact = CompactFormatter()
_detailed = DetailedFormatter()


def get_formatter(compact: bool) -> BaseFormatter:
    return _compact if compact else _detailed


def render(result: TopoResult) -> str:
    """Render a topo result according to its config."""
    return get_formatter(result.config.compact).format(result)


__all__ = ["BaseFormatter", "CompactFormatter", "DetailedFormatter", "get_formatter", "render"]
