"""Command: run one or more tracker lines non-interactively."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from restrack.commands._base import RestrackCommand

if TYPE_CHECKING:
    from restrack.commands._context import AppContext


@click.command(
    cls=RestrackCommand,
    examples="""\
  restrack run "add n/John Doe p/98765432 e/johnd@example.com a/311 Clementi Ave 2 clean/y"
  restrack run "add n/Loft p/123 e/a@bc.com a/Blk 1" "edit 1 t/friends" list
  restrack --sample-data run "find loft" "book 1 n/Jane Tan p/91234567 b/010125 050125"
  restrack --json run list""",
)
@click.argument("lines", nargs=-1, required=True)
@click.pass_obj
def run(app: AppContext, lines: tuple[str, ...]) -> None:
    """Execute tracker command LINES in order against one registry.

    Stops with exit code 1 at the first line that fails.
    """
    for line in lines:
        result = app.tracker.execute(line)
        app.emit(result)
        if result.data.get("exit"):
            break
