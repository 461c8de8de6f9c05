"""Data models for the filtered dependency graph."""

from __future__ import annotations

from dataclasses import dataclass, field

from cargo_topo.models import DependencyKind, PackageNode


@dataclass
class DependencyGraph:
    nodes: dict[str, PackageNode] = field(default_factory=dict)
    forward: dict[str, set[str]] = field(default_factory=dict)  # dependent -> {dependencies}
    reverse: dict[str, set[str]] = field(default_factory=dict)  # dependency -> {dependents}
    edge_kinds: dict[tuple[str, str], set[DependencyKind]] = field(default_factory=dict)

    def add_node(self, node: PackageNode) -> None:
        self.nodes[node.id] = node
        self.forward.setdefault(node.id, set())
        self.reverse.setdefault(node.id, set())

    def add_edge(self, source_id: str, target_id: str, kind: DependencyKind) -> None:
        self.forward.setdefault(source_id, set()).add(target_id)
        self.reverse.setdefault(target_id, set()).add(source_id)
        self.edge_kinds.setdefault((source_id, target_id), set()).add(kind)

    @property
    def edges(self) -> list[tuple[str, str]]:
        return sorted(self.edge_kinds)

    def dependencies_of(self, node_id: str) -> list[PackageNode]:
        return sorted(
            (self.nodes[t] for t in self.forward.get(node_id, ())),
            key=lambda n: n.sort_key,
        )
