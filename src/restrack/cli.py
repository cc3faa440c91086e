"""Root CLI group for restrack with global flags and command registration."""

from __future__ import annotations

import click

from restrack import __version__
from restrack.commands import register_commands
from restrack.commands._context import AppContext
from restrack.config.settings import RestrackSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="restrack")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only result messages.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option("--sample-data", is_flag=True, help="Start with sample residences.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    sample_data: bool,
) -> None:
    """restrack: residence tracker command-line front end."""
    ctx.ensure_object(dict)
    # Unset flags pass None so env vars and restrack.toml still apply.
    settings = RestrackSettings.from_cli(
        config_path=config_path,
        json_output=json_output or None,
        quiet=quiet or None,
        verbose=verbose or None,
        log_json=log_json or None,
        tracker={"sample_data": True} if sample_data else None,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
