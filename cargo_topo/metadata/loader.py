"""Obtain ``cargo metadata`` output and turn it into a WorkspaceGraph."""

from __future__ import annotations

import json
import logging
import os
import subprocess
from pathlib import Path

from pydantic import ValidationError

from cargo_topo.errors import CargoNotFoundError, MetadataError
from cargo_topo.models import DependencyKind, PackageNode, TopoConfig, WorkspaceGraph
from cargo_topo.metadata.schema import CargoMetadata, NodeDep

logger = logging.getLogger(__name__)

_KIND_MAP = {
    None: DependencyKind.NORMAL,
    "normal": DependencyKind.NORMAL,
    "build": DependencyKind.BUILD,
    "dev": DependencyKind.DEV,
}


def cargo_executable() -> str:
    # Cargo exports CARGO to its subcommands
    return os.environ.get("CARGO", "cargo")


def run_cargo_metadata(manifest_path: Path | None = None, timeout: float = 120) -> dict:
    """Run ``cargo metadata --format-version 1`` and return the parsed JSON."""
    executable = cargo_executable()
    cmd = [executable, "metadata", "--format-version", "1"]
    if manifest_path is not None:
        cmd += ["--manifest-path", str(manifest_path)]

    logger.debug("running %s", " ".join(cmd))
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise CargoNotFoundError(executable) from e
    except subprocess.TimeoutExpired as e:
        raise MetadataError(f"cargo metadata timed out after {timeout:g}s") from e

    if result.returncode != 0:
        detail = result.stderr.strip() or f"exit code {result.returncode}"
        raise MetadataError(f"cargo metadata failed: {detail}")

    try:
        return json.loads(result.stdout)
    except json.JSONDecodeError as e:
        raise MetadataError(f"cargo metadata produced invalid JSON: {e}") from e


def read_metadata_file(path: Path) -> dict:
    """Load a saved ``cargo metadata`` dump."""
    try:
        return json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise MetadataError(f"Cannot read metadata file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise MetadataError(f"Invalid JSON in {path}: {e}") from e


def parse_metadata(raw: dict) -> WorkspaceGraph:
    """Convert cargo metadata JSON into a WorkspaceGraph."""
    try:
        metadata = CargoMetadata.model_validate(raw)
    except ValidationError as e:
        raise MetadataError(f"Unexpected cargo metadata layout: {e}") from e

    if metadata.resolve is None:
        raise MetadataError(
            "cargo metadata has no dependency resolution (was it run with --no-deps?)"
        )

    members = set(metadata.workspace_members)
    graph = WorkspaceGraph(workspace_root=metadata.workspace_root)
    for pkg in metadata.packages:
        graph.add_package(PackageNode(
            id=pkg.id,
            name=pkg.name,
            version=pkg.version,
            is_workspace_member=pkg.id in members,
        ))

    for node in metadata.resolve.nodes:
        if node.id not in graph.nodes:
            logger.warning("resolve node %s has no package entry; skipping", node.id)
            continue
        for dep in node.deps:
            for kind in _dep_kinds(dep):
                graph.add_link(node.id, dep.pkg, kind)

    logger.debug(
        "loaded %d package(s), %d workspace member(s), %d link(s)",
        len(graph.nodes), len(members), len(graph.links),
    )
    return graph


def load_workspace(config: TopoConfig) -> WorkspaceGraph:
    if config.metadata_file is not None:
        raw = read_metadata_file(config.metadata_file)
    else:
        raw = run_cargo_metadata(config.manifest_path)
    return parse_metadata(raw)


def _dep_kinds(dep: NodeDep) -> list[DependencyKind]:
    # Cargo < 1.41 omits dep_kinds
    if not dep.dep_kinds:
        return [DependencyKind.NORMAL]

    kinds: list[DependencyKind] = []
    for info in dep.dep_kinds:
        kind = _KIND_MAP.get(info.kind)
        if kind is None:
            raise MetadataError(f"Unknown dependency kind {info.kind!r} for {dep.pkg}")
        if kind not in kinds:
            kinds.append(kind)
    return kinds
