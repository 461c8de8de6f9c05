"""Click CLI with the topo subcommand.

Installed as ``cargo-topo`` so Cargo can run it as ``cargo topo``; Cargo
passes the subcommand name through as the first argument.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from cargo_topo import __version__
from cargo_topo.errors import TopoError
from cargo_topo.formatter import render
from cargo_topo.models import TopoConfig
from cargo_topo.pipeline import run_topo


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
def cli(verbose: bool):
    """cargo-topo: List workspace crates in topological dependency order."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


@cli.command()
@click.option("--manifest-path", "-m", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to the workspace Cargo.toml (defaults to current directory)")
@click.option("--metadata-file", type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Read saved `cargo metadata --format-version 1` output instead of running cargo")
@click.option("--reverse", "-r", is_flag=True, help="Show dependents before their dependencies")
@click.option("--include-dev", "-i", is_flag=True, help="Include dev-dependencies in analysis")
@click.option("--all", "-a", "include_all", is_flag=True,
              help="Show all dependencies, including external crates")
@click.option("--compact", "-c", is_flag=True, help="Print crate names only, one per line")
@click.option("--package", "-p", help="Only show this package and its dependencies")
@click.option("--exclude", multiple=True, help="Leave a package out (repeatable)")
@click.option("--layers", is_flag=True, help="Group crates into layers that can build in parallel")
def topo(
    manifest_path: Path | None,
    metadata_file: Path | None,
    reverse: bool,
    include_dev: bool,
    include_all: bool,
    compact: bool,
    package: str | None,
    exclude: tuple[str, ...],
    layers: bool,
):
    """List workspace crates in topological dependency order."""
    if manifest_path is not None and metadata_file is not None:
        raise click.UsageError("--manifest-path and --metadata-file are mutually exclusive")

    config = TopoConfig(
        manifest_path=manifest_path,
        metadata_file=metadata_file,
        package=package,
        exclude=list(exclude),
        include_all=include_all,
        include_dev=include_dev,
        reverse=reverse,
        compact=compact,
        layers=layers,
    )

    try:
        result = run_topo(config)
    except TopoError as e:
        raise click.ClickException(str(e))

    click.echo(render(result))


if __name__ == "__main__":
    cli()
