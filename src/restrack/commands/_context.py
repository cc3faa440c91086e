"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Owns the in-memory registry for the invocation and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from restrack.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from restrack.config.settings import RestrackSettings
    from restrack.domain.residence import Residence
    from restrack.services.registry import Registry
    from restrack.services.result import ServiceResult
    from restrack.services.tracker import TrackerService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The registry is created lazily so ``--help`` and ``--version`` never
    build it.  It lives for the whole invocation.
    """

    def __init__(self, settings: RestrackSettings) -> None:
        self.settings = settings
        self._registry: Registry | None = None
        self._tracker: TrackerService | None = None

        from restrack.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def registry(self) -> Registry:
        """The registry (created on first access, seeded if configured)."""
        if self._registry is None:
            from restrack.services.registry import Registry

            seed: list[Residence] = []
            if self.settings.tracker.sample_data:
                from restrack.services.sample import sample_residences

                seed = sample_residences()
            self._registry = Registry(seed)
        return self._registry

    @property
    def tracker(self) -> TrackerService:
        if self._tracker is None:
            from restrack.services.tracker import TrackerService

            self._tracker = TrackerService(self.registry)
        return self._tracker

    def emit(self, result: ServiceResult, *, exit_on_error: bool = True) -> None:
        """Format and output a ServiceResult.

        * Success: writes to stdout.
        * Failure: writes to stderr, then exits with code 1 unless
          *exit_on_error* is False (the interactive shell keeps going).
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            show_bookings=self.settings.display.show_bookings,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            return
        click.echo(output, err=True)
        if exit_on_error:
            raise SystemExit(1)
