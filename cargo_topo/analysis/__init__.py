"""Graph construction and ordering."""

from __future__ import annotations

from cargo_topo.analysis.dependency_graph import DependencyGraphBuilder
from cargo_topo.analysis.graph_models import DependencyGraph
from cargo_topo.analysis.topo_sort import find_cycle, topological_layers, topological_sort

__all__ = [
    "DependencyGraph",
    "DependencyGraphBuilder",
    "find_cycle",
    "topological_layers",
    "topological_sort",
]
