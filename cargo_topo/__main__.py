from cargo_topo.cli import cli

cli(prog_name="cargo-topo")
