"""Detailed output with headers, markers, direct dependencies and dev-dependency report."""

from __future__ import annotations

from cargo_topo.models import DependencyKind, TopoResult
from cargo_topo.formatter.base import DEV_MARKER, BaseFormatter


class DetailedFormatter(BaseFormatter):

    def format_order(self, result: TopoResult) -> str:
        lines = self._header(result)
        for node in result.order:
            lines.append(f"{self.marker(node)} {node.label}")
            deps = self.runtime_dependencies(result, node) if node.is_workspace_member else []
            if deps:
                if result.config.include_all:
                    names = [f"{self.marker(d)} {d.name}" for d in deps]
                else:
                    names = [d.name for d in deps]
                lines.append(f"   └─ depends on: {', '.join(names)}")
            lines.append("")
        return self._with_dev_report(result, lines)

    def format_layers(self, result: TopoResult) -> str:
        lines = self._header(result)
        for index, layer in enumerate(result.layers):
            lines.append(f"Layer {index}: {', '.join(node.name for node in layer)}")
        return self._with_dev_report(result, lines)

    def format_dev_dependencies(self, result: TopoResult) -> str:
        """List raw dev-dependencies of every workspace member still in scope."""
        source = result.source
        lines: list[str] = []
        members = [n for n in result.graph.nodes.values() if n.is_workspace_member]
        for node in sorted(members, key=lambda n: n.sort_key):
            kinds: dict[str, set[DependencyKind]] = {}
            for link in source.direct_links(node.id):
                if link.target_id in source.nodes:
                    kinds.setdefault(link.target_id, set()).add(link.kind)

            # dev-only targets; a crate that is also a normal/build dep is not listed
            dev_names: list[str] = []
            for target_id, target_kinds in kinds.items():
                name = source.nodes[target_id].name
                if target_kinds == {DependencyKind.DEV} and name not in dev_names:
                    dev_names.append(name)
            if dev_names:
                lines.append(f"{DEV_MARKER} {node.name} dev-dependencies: {', '.join(dev_names)}")
        return "\n".join(lines)

    def _header(self, result: TopoResult) -> list[str]:
        config = result.config
        order = "reverse topological order" if config.reverse else "topological order"
        if config.package:
            title = f"Dependencies from '{config.package}' in {order}:"
        else:
            title = f"Workspace crates in {order}:"

        lines = [title]
        if config.exclude:
            lines.append(f"Excluding: {', '.join(config.exclude)}")
        lines.append("")
        return lines

    def _with_dev_report(self, result: TopoResult, lines: list[str]) -> str:
        text = "\n".join(lines).rstrip("\n")
        if result.config.include_dev:
            report = self.format_dev_dependencies(result)
            text += "\n\nDev-dependencies analysis:"
            if report:
                text += "\n" + report
        return text
