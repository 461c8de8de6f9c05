"""Abstract base formatter."""

from __future__ import annotations

import abc

from cargo_topo.models import DependencyKind, PackageNode, TopoResult

WORKSPACE_MARKER = "📦"
EXTERNAL_MARKER = "📄"
DEV_MARKER = "🧪"


class BaseFormatter(abc.ABC):
    """Base class for result renderers."""

    @abc.abstractmethod
    def format_order(self, result: TopoResult) -> str:
        """Render the linear order."""

    @abc.abstractmethod
    def format_layers(self, result: TopoResult) -> str:
        """Render the layered order."""

    def format(self, result: TopoResult) -> str:
        if result.config.layers:
            return self.format_layers(result)
        return self.format_order(result)

    @staticmethod
    def marker(node: PackageNode) -> str:
        return WORKSPACE_MARKER if node.is_workspace_member else EXTERNAL_MARKER

    @staticmethod
    def runtime_dependencies(result: TopoResult, node: PackageNode) -> list[PackageNode]:
        """Direct dependencies of ``node`` in the filtered graph, dev-only edges left out."""
        graph = result.graph
        return [
            dep for dep in graph.dependencies_of(node.id)
            if graph.edge_kinds[(node.id, dep.id)] - {DependencyKind.DEV}
        ]
