"""Tests for the full pipeline against the fixture workspace."""

from pathlib import Path

import pytest

from cargo_topo.errors import PackageNotFoundError
from cargo_topo.metadata import read_metadata_file, parse_metadata
from cargo_topo.models import TopoConfig
from cargo_topo.pipeline import run_topo

FIXTURES = Path(__file__).parent / "fixtures"


def _run(**config):
    return run_topo(TopoConfig(metadata_file=FIXTURES / "metadata.json", **config))


def test_default_order():
    assert _run().names == ["utils", "core-lib", "api-server", "test-helpers"]


def test_reverse_order():
    assert _run(reverse=True).names == ["test-helpers", "api-server", "core-lib", "utils"]


def test_include_dev_reorders():
    assert _run(include_dev=True).names == ["utils", "test-helpers", "core-lib", "api-server"]


def test_all_includes_external():
    assert _run(include_all=True).names == [
        "cc", "serde", "utils", "core-lib", "api-server", "test-helpers",
    ]


def test_package_scope():
    assert _run(package="core-lib").names == ["utils", "core-lib"]
    assert _run(package="core-lib", include_dev=True).names == [
        "utils", "test-helpers", "core-lib",
    ]


def test_package_scope_with_all():
    assert _run(package="core-lib", include_all=True).names == [
        "cc", "serde", "utils", "core-lib",
    ]


def test_external_package_without_all_is_empty():
    assert _run(package="serde").names == []


def test_exclude():
    assert _run(exclude=["core-lib"]).names == ["api-server", "utils", "test-helpers"]


def test_package_not_found():
    with pytest.raises(PackageNotFoundError):
        _run(package="does-not-exist")


def test_layers():
    result = _run(layers=True)
    assert [[n.name for n in layer] for layer in result.layers] == [
        ["utils"], ["core-lib", "test-helpers"], ["api-server"],
    ]


def test_prebuilt_workspace_skips_loading():
    workspace = parse_metadata(read_metadata_file(FIXTURES / "metadata.json"))
    result = run_topo(TopoConfig(metadata_file=Path("/nonexistent.json")), workspace=workspace)
    assert result.source is workspace
    assert result.names == ["utils", "core-lib", "api-server", "test-helpers"]
