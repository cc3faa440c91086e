"""Rich/JSON/quiet output selection.

The CLI renders ServiceResult for humans (Rich tables and styles) or
machines (--json).  The formatter picks the mode from OutputSettings.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from restrack.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from restrack.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """Output flags resolved from RestrackSettings."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    show_bookings: bool = True


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display.

    JSON wins over quiet; quiet wins over the default Rich rendering.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)
    if settings.quiet:
        return render_quiet(result)
    return render_result(result, verbose=settings.verbose, show_bookings=settings.show_bookings)
