"""Tests for compact and detailed rendering."""

from pathlib import Path

from cargo_topo.formatter import CompactFormatter, DetailedFormatter, render
from cargo_topo.models import DependencyKind, PackageNode, TopoConfig, WorkspaceGraph
from cargo_topo.pipeline import run_topo

FIXTURES = Path(__file__).parent / "fixtures"


def _result(**config):
    return run_topo(TopoConfig(metadata_file=FIXTURES / "metadata.json", **config))


def _workspace(members=(), externals=(), links=()):
    ws = WorkspaceGraph()
    for name in members:
        ws.add_package(PackageNode(id=name, name=name, version="0.1.0", is_workspace_member=True))
    for name in externals:
        ws.add_package(PackageNode(id=name, name=name, version="1.0.0"))
    for source, target, kind in links:
        ws.add_link(source, target, kind)
    return ws


class TestCompact:
    def test_names_only(self):
        text = render(_result(compact=True))
        assert text == "utils\ncore-lib\napi-server\ntest-helpers"

    def test_compact_with_all(self):
        text = CompactFormatter().format(_result(compact=True, include_all=True))
        assert text.splitlines()[:2] == ["cc", "serde"]

    def test_compact_layers(self):
        text = render(_result(compact=True, layers=True))
        assert text == "utils\ncore-lib test-helpers\napi-server"

    def test_compact_skips_dev_report(self):
        assert "Dev-dependencies" not in render(_result(compact=True, include_dev=True))


class TestDetailed:
    def test_workspace_listing(self):
        text = render(_result())
        assert text == "\n".join([
            "Workspace crates in topological order:",
            "",
            "📦 utils (0.1.0)",
            "",
            "📦 core-lib (0.2.0)",
            "   └─ depends on: utils",
            "",
            "📦 api-server (0.3.0)",
            "   └─ depends on: core-lib",
            "",
            "📦 test-helpers (0.1.0)",
            "   └─ depends on: utils",
        ])

    def test_reverse_package_header(self):
        text = render(_result(package="core-lib", reverse=True))
        assert text.splitlines()[0] == "Dependencies from 'core-lib' in reverse topological order:"

    def test_excluding_line(self):
        lines = render(_result(exclude=["api-server", "test-helpers"])).splitlines()
        assert lines[1] == "Excluding: api-server, test-helpers"

    def test_all_marks_external(self):
        text = render(_result(include_all=True))
        assert "📄 serde (1.0.200)" in text
        assert "   └─ depends on: 📄 cc, 📄 serde" in text
        assert "   └─ depends on: 📄 serde, 📦 utils" in text

    def test_dev_report(self):
        text = render(_result(include_dev=True))
        head, report = text.split("\n\nDev-dependencies analysis:\n")
        assert report == "🧪 core-lib dev-dependencies: test-helpers"
        # dev edges are not listed as runtime dependencies
        assert "   └─ depends on: test-helpers" not in head

    def test_dev_report_respects_scope(self):
        formatter = DetailedFormatter()
        assert formatter.format_dev_dependencies(_result(package="api-server", exclude=["core-lib"])) == ""

    def test_layers(self):
        text = render(_result(layers=True))
        assert text.splitlines()[2:] == [
            "Layer 0: utils",
            "Layer 1: core-lib, test-helpers",
            "Layer 2: api-server",
        ]

    def test_dev_report_skips_crate_that_is_also_a_normal_dependency(self):
        ws = _workspace(members=["app", "lib"], links=[
            ("app", "lib", DependencyKind.NORMAL),
            ("app", "lib", DependencyKind.DEV),
        ])
        result = run_topo(TopoConfig(include_dev=True), workspace=ws)
        assert DetailedFormatter().format_dev_dependencies(result) == ""

    def test_dev_report_lists_dev_only_alongside_mixed(self):
        ws = _workspace(members=["app", "lib", "fixtures"], links=[
            ("app", "lib", DependencyKind.NORMAL),
            ("app", "lib", DependencyKind.DEV),
            ("app", "fixtures", DependencyKind.DEV),
        ])
        result = run_topo(TopoConfig(include_dev=True), workspace=ws)
        assert DetailedFormatter().format_dev_dependencies(result) == (
            "🧪 app dev-dependencies: fixtures"
        )

    def test_all_lists_dependencies_only_for_workspace_members(self):
        ws = _workspace(members=["app"], externals=["serde", "serde_derive"], links=[
            ("app", "serde", DependencyKind.NORMAL),
            ("serde", "serde_derive", DependencyKind.NORMAL),
        ])
        text = render(run_topo(TopoConfig(include_all=True), workspace=ws))
        assert text.splitlines()[2:] == [
            "📄 serde_derive (1.0.0)",
            "",
            "📄 serde (1.0.0)",
            "",
            "📦 app (0.1.0)",
            "   └─ depends on: 📄 serde",
        ]
