"""Data models for the cargo-topo pipeline."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cargo_topo.analysis.graph_models import DependencyGraph


class DependencyKind(enum.Enum):
    NORMAL = "normal"
    BUILD = "build"
    DEV = "dev"


@dataclass(frozen=True)
class PackageNode:
    """A single crate in the resolved workspace graph."""
    id: str
    name: str
    version: str
    is_workspace_member: bool = False

    @property
    def sort_key(self) -> tuple[str, str, str]:
        return (self.name, self.version, self.id)

    @property
    def label(self) -> str:
        return f"{self.name} ({self.version})"


@dataclass(frozen=True)
class DependencyLink:
    """``source_id`` depends on ``target_id``."""
    source_id: str
    target_id: str
    kind: DependencyKind = DependencyKind.NORMAL


@dataclass
class WorkspaceGraph:
    """Raw workspace graph as loaded from cargo metadata."""
    nodes: dict[str, PackageNode] = field(default_factory=dict)
    links: list[DependencyLink] = field(default_factory=list)
    workspace_root: str | None = None

    def add_package(self, node: PackageNode) -> PackageNode:
        self.nodes[node.id] = node
        return node

    def add_link(self, source_id: str, target_id: str,
                 kind: DependencyKind = DependencyKind.NORMAL) -> DependencyLink:
        link = DependencyLink(source_id=source_id, target_id=target_id, kind=kind)
        self.links.append(link)
        return link

    def find_by_name(self, name: str) -> list[PackageNode]:
        return sorted(
            (node for node in self.nodes.values() if node.name == name),
            key=lambda n: n.sort_key,
        )

    def workspace_members(self) -> list[PackageNode]:
        return sorted(
            (node for node in self.nodes.values() if node.is_workspace_member),
            key=lambda n: n.sort_key,
        )

    def direct_links(self, package_id: str) -> list[DependencyLink]:
        return [link for link in self.links if link.source_id == package_id]


@dataclass
class TopoConfig:
    """Configuration for a topo run."""
    manifest_path: Path | None = None
    metadata_file: Path | None = None
    package: str | None = None
    exclude: list[str] = field(default_factory=list)
    include_all: bool = False
    include_dev: bool = False
    reverse: bool = False
    compact: bool = False
    layers: bool = False


@dataclass
class TopoResult:
    """Result of the topo pipeline."""
    config: TopoConfig
    source: WorkspaceGraph
    graph: DependencyGraph
    order: list[PackageNode] = field(default_factory=list)
    layers: list[list[PackageNode]] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [node.name for node in self.order]
