"""Dependency graph builder — filters the workspace graph down to what gets ordered."""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from cargo_topo.errors import PackageNotFoundError
from cargo_topo.models import DependencyKind, DependencyLink, TopoConfig, WorkspaceGraph
from cargo_topo.analysis.graph_models import DependencyGraph

logger = logging.getLogger(__name__)


class DependencyGraphBuilder:
    """Build a filtered dependency graph from a raw workspace graph."""

    def build(self, workspace: WorkspaceGraph, config: TopoConfig) -> DependencyGraph:
        # dev links only count with --include-dev, for scoping too
        links = [link for link in workspace.links if self._keep_link(link, config)]

        # Step 1: Scope to the closure of the selected package
        if config.package:
            roots = workspace.find_by_name(config.package)
            if not roots:
                raise PackageNotFoundError(config.package)
            keep = self._closure(links, (root.id for root in roots)) & set(workspace.nodes)
            logger.debug("package %r pulls in %d node(s)", config.package, len(keep))
        else:
            keep = set(workspace.nodes)

        # Step 2: Workspace members only unless --all
        if not config.include_all:
            keep = {
                node_id for node_id in keep
                if workspace.nodes[node_id].is_workspace_member
            }

        # Step 3: Drop excluded names
        excluded = set(config.exclude)
        if excluded:
            keep = {
                node_id for node_id in keep
                if workspace.nodes[node_id].name not in excluded
            }

        graph = DependencyGraph()
        for node_id in sorted(keep, key=lambda i: workspace.nodes[i].sort_key):
            graph.add_node(workspace.nodes[node_id])

        # Step 4: Edges survive only between surviving nodes
        dropped = 0
        for link in links:
            if link.source_id in graph.nodes and link.target_id in graph.nodes:
                graph.add_edge(link.source_id, link.target_id, link.kind)
            else:
                dropped += 1

        logger.debug(
            "filtered graph: %d node(s), %d edge(s), %d link(s) pruned",
            len(graph.nodes), len(graph.edge_kinds), dropped,
        )
        return graph

    @staticmethod
    def _keep_link(link: DependencyLink, config: TopoConfig) -> bool:
        return config.include_dev or link.kind is not DependencyKind.DEV

    @staticmethod
    def _closure(links: list[DependencyLink], roots: Iterable[str]) -> set[str]:
        """Every node reachable from ``roots`` along "depends on" links."""
        forward: dict[str, list[str]] = {}
        for link in links:
            forward.setdefault(link.source_id, []).append(link.target_id)

        seen = set(roots)
        queue = deque(seen)
        while queue:
            current = queue.popleft()
            for target in forward.get(current, ()):
                if target not in seen:
                    seen.add(target)
                    queue.append(target)
        return seen
