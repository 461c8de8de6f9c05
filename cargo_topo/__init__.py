"""cargo-topo: list Cargo workspace crates in topological dependency order."""

__version__ = "0.1.0"
