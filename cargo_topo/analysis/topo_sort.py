"""Topological ordering of a filtered dependency graph.

Kahn's algorithm over the number of unresolved dependencies per node.
Eligible nodes sit in a heap keyed by ``PackageNode.sort_key`` so the
order is fully determined by the graph. Reverse order is the forward
order mirrored.
"""

from __future__ import annotations

import heapq
import logging

from cargo_topo.errors import CycleError
from cargo_topo.models import PackageNode
from cargo_topo.analysis.graph_models import DependencyGraph

logger = logging.getLogger(__name__)


def topological_sort(graph: DependencyGraph, reverse: bool = False) -> list[PackageNode]:
    """Return every node once, dependencies before dependents.

    Raises:
        CycleError: the graph is not acyclic. No partial order is returned.
    """
    pending = {node_id: len(graph.forward.get(node_id, ())) for node_id in graph.nodes}
    ready = [
        (graph.nodes[node_id].sort_key, node_id)
        for node_id, count in pending.items() if count == 0
    ]
    heapq.heapify(ready)

    order: list[PackageNode] = []
    while ready:
        _, node_id = heapq.heappop(ready)
        order.append(graph.nodes[node_id])
        for dependent in graph.reverse.get(node_id, ()):
            pending[dependent] -= 1
            if pending[dependent] == 0:
                heapq.heappush(ready, (graph.nodes[dependent].sort_key, dependent))

    if len(order) < len(graph.nodes):
        emitted = {node.id for node in order}
        _raise_cycle(graph, set(graph.nodes) - emitted)

    if reverse:
        order.reverse()
    logger.debug("sorted %d package(s), reverse=%s", len(order), reverse)
    return order


def topological_layers(graph: DependencyGraph, reverse: bool = False) -> list[list[PackageNode]]:
    """Group nodes into generations that can be built side by side.

    Layer 0 has no dependencies; layer n depends only on layers < n.
    """
    pending = {node_id: len(graph.forward.get(node_id, ())) for node_id in graph.nodes}
    current = [node_id for node_id, count in pending.items() if count == 0]

    layers: list[list[PackageNode]] = []
    placed = 0
    while current:
        layer = sorted((graph.nodes[i] for i in current), key=lambda n: n.sort_key)
        layers.append(layer)
        placed += len(layer)

        following: list[str] = []
        for node_id in current:
            for dependent in graph.reverse.get(node_id, ()):
                pending[dependent] -= 1
                if pending[dependent] == 0:
                    following.append(dependent)
        current = following

    if placed < len(graph.nodes):
        placed_ids = {node.id for layer in layers for node in layer}
        _raise_cycle(graph, set(graph.nodes) - placed_ids)

    if reverse:
        layers.reverse()
    return layers


def find_cycle(graph: DependencyGraph, remaining: set[str]) -> list[str]:
    """Walk dependency edges among ``remaining`` until a node repeats.

    Every node left over by Kahn's algorithm still has an unresolved
    dependency inside ``remaining``, so the walk always closes a loop.
    The returned path starts and ends with the same node id.
    """
    def key(node_id: str):
        return graph.nodes[node_id].sort_key

    current = min(remaining, key=key)
    path: list[str] = []
    position: dict[str, int] = {}
    while current not in position:
        position[current] = len(path)
        path.append(current)
        candidates = [t for t in graph.forward.get(current, ()) if t in remaining]
        current = min(candidates, key=key)

    return path[position[current]:] + [current]


def _raise_cycle(graph: DependencyGraph, remaining: set[str]) -> None:
    cycle = find_cycle(graph, remaining)
    names = [graph.nodes[node_id].name for node_id in cycle]
    logger.debug("%d package(s) left unordered; cycle: %s", len(remaining), names)
    raise CycleError(cycle, names)
