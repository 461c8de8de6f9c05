"""Exceptions raised by cargo-topo."""

from __future__ import annotations


class TopoError(Exception):
    """Base class for every error cargo-topo reports."""


class PackageNotFoundError(TopoError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Package '{name}' not found in workspace")


class CycleError(TopoError):
    """The filtered graph has a dependency cycle, so no order exists."""

    def __init__(self, cycle: list[str], names: list[str] | None = None):
        self.cycle = list(cycle)
        self.names = list(names) if names is not None else list(cycle)
        super().__init__(
            "Dependency cycle detected: " + " -> ".join(self.names)
        )


class MetadataError(TopoError):
    """cargo metadata could not be obtained or understood."""


class CargoNotFoundError(MetadataError):
    def __init__(self, executable: str):
        self.executable = executable
        super().__init__(
            f"Could not run '{executable}'. Is cargo installed and on PATH?"
        )
