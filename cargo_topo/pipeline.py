"""Topo pipeline: load metadata -> build filtered graph -> sort."""

from __future__ import annotations

import logging

from cargo_topo.models import TopoConfig, TopoResult, WorkspaceGraph
from cargo_topo.metadata import load_workspace
from cargo_topo.analysis.dependency_graph import DependencyGraphBuilder
from cargo_topo.analysis.topo_sort import topological_layers, topological_sort

logger = logging.getLogger(__name__)

_builder = DependencyGraphBuilder()


def run_topo(config: TopoConfig, workspace: WorkspaceGraph | None = None) -> TopoResult:
    """Run the full pipeline.

    ``workspace`` skips metadata loading when the graph is already at hand.
    Raises any ``TopoError`` unchanged.
    """
    # Stage 1: Load
    if workspace is None:
        workspace = load_workspace(config)
    logger.debug("workspace: %d package(s)", len(workspace.nodes))

    # Stage 2: Build
    graph = _builder.build(workspace, config)
    if config.package and not config.include_all:
        roots = workspace.find_by_name(config.package)
        if not any(root.is_workspace_member for root in roots):
            logger.warning(
                "package %r is not a workspace member; pass --all to list its dependencies",
                config.package,
            )

    # Stage 3: Sort
    result = TopoResult(config=config, source=workspace, graph=graph)
    result.order = topological_sort(graph, reverse=config.reverse)
    if config.layers:
        result.layers = topological_layers(graph, reverse=config.reverse)
    return result
