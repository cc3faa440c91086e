"""Subcommand modules for restrack.

Provides register_commands() which uses deferred imports to keep
``restrack --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from restrack.commands.run import run
    from restrack.commands.shell import shell

    cli.add_command(run)
    cli.add_command(shell)
