"""Command: interactive (or piped) tracker session on stdin."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from restrack.commands._base import RestrackCommand

if TYPE_CHECKING:
    from restrack.commands._context import AppContext

PROMPT = "> "


@click.command(
    cls=RestrackCommand,
    examples="""\
  restrack shell
  restrack --sample-data shell
  printf 'add n/Loft p/123 e/a@bc.com a/Blk 1\\nlist\\n' | restrack shell""",
)
@click.pass_obj
def shell(app: AppContext) -> None:
    """Read tracker commands from stdin until EOF or 'exit'.

    Failed commands are reported and the session continues.
    """
    stream = sys.stdin
    interactive = stream.isatty() and not app.settings.json_output
    if interactive:
        click.echo(f"{app.settings.tracker.name}: type 'help' for commands, 'exit' to quit.")

    while True:
        if interactive:
            click.echo(PROMPT, nl=False)
        line = stream.readline()
        if not line:
            break
        if not line.strip():
            continue
        result = app.tracker.execute(line)
        app.emit(result, exit_on_error=False)
        if result.data.get("exit"):
            break
