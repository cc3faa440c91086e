"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to the message renderer.  User-supplied text is
always wrapped in :class:`~rich.text.Text` so brackets in addresses or
usage strings are never read as markup.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from restrack.output.console import create_console, get_output, style_for_clean

if TYPE_CHECKING:
    from rich.console import Console

    from restrack.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(
    result: ServiceResult,
    *,
    verbose: bool = False,
    show_bookings: bool = True,
) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_message)
        renderer(result, console, verbose=verbose, show_bookings=show_bookings)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render the bare message for ``--quiet`` mode."""
    if not result.ok:
        return f"ERROR: {result.message}"
    return result.message


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="rt.ok")
    op = Text(f"  {result.op}", style="rt.op")
    console.print(label, op, sep="", soft_wrap=True)


def _message(console: Console, result: ServiceResult) -> None:
    console.print(Text(f"  {result.message}"), soft_wrap=True)


def _residence_table(items: list[dict[str, Any]], *, show_bookings: bool) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", style="rt.index", justify="right", no_wrap=True)
    table.add_column("Name", style="rt.name")
    table.add_column("Address")
    table.add_column("Phone", no_wrap=True)
    table.add_column("Email")
    table.add_column("Clean")
    table.add_column("Tags")
    if show_bookings:
        table.add_column("Bookings")

    for item in items:
        clean = str(item.get("clean", ""))
        row: list[Text] = [
            Text(str(item.get("index", ""))),
            Text(str(item.get("name", ""))),
            Text(str(item.get("address", ""))),
            Text(str(item.get("phone", ""))),
            Text(str(item.get("email", ""))),
            Text(clean, style=style_for_clean(clean)),
            Text(", ".join(item.get("tags", []))),
        ]
        if show_bookings:
            row.append(Text("\n".join(item.get("bookings", []))))
        table.add_row(*row)
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="rt.error")
    op = Text(f"  {result.op}", style="rt.op")
    console.print(label, op, Text(": "), Text(msg), sep="", soft_wrap=True)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="rt.key"), soft_wrap=True)
        for k, v in err.detail.items():
            console.print(Text(f"  {k}: {v}", style="rt.key"), soft_wrap=True)


# ── Success renderers ─────────────────────────────────────────────────


def _render_message(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_bookings: bool = True
) -> None:
    """Render mutation and session results: status line plus feedback."""
    _status_line(console, result)
    _message(console, result)


def _render_view(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_bookings: bool = True
) -> None:
    """Render list/find results as a residence table."""
    _status_line(console, result)
    _message(console, result)
    items = result.data.get("items", [])
    if items:
        console.print(_residence_table(items, show_bookings=show_bookings))
    console.print(Text(f"{result.data.get('count', len(items))} residences"), soft_wrap=True)


def _render_help(
    result: ServiceResult, console: Console, *, verbose: bool = False, show_bookings: bool = True
) -> None:
    """Render the usage text without indentation so examples stay copyable."""
    console.print(Text(result.message), soft_wrap=True)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "add": _render_message,
    "edit": _render_message,
    "delete": _render_message,
    "book": _render_message,
    "unbook": _render_message,
    "clear": _render_message,
    "exit": _render_message,
    "list": _render_view,
    "find": _render_view,
    "help": _render_help,
}
