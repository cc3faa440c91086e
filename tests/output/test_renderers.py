"""Tests for Rich renderers."""

from __future__ import annotations

from typing import Any

from restrack.output.renderers import render_quiet, render_result
from restrack.services.result import ServiceError, ServiceResult


def _item(**overrides: Any) -> dict[str, Any]:
    item: dict[str, Any] = {
        "index": 1,
        "name": "Loft",
        "address": "Blk 9",
        "phone": "123",
        "email": "a@bc.com",
        "clean": "dirty",
        "tags": ["family"],
        "bookings": ["Jo (123): 010125 to 020125"],
    }
    item.update(overrides)
    return item


def _view(op: str = "list", items: list[dict[str, Any]] | None = None) -> ServiceResult:
    items = [_item()] if items is None else items
    return ServiceResult(
        ok=True,
        op=op,
        data={"message": "Listed all residences", "items": items, "count": len(items)},
    )


def _failure(message: str = "Unknown command", **detail: Any) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op="unknown",
        error=ServiceError(code="FORMAT", message=message, detail=detail),
    )


class TestRenderMessage:
    def test_status_and_feedback(self) -> None:
        result = ServiceResult(ok=True, op="add", data={"message": "New residence added: Loft"})
        output = render_result(result)
        assert output.splitlines() == ["OK  add", "  New residence added: Loft"]

    def test_brackets_are_not_markup(self) -> None:
        result = ServiceResult(ok=True, op="add", data={"message": "Added [bold]x[/bold]"})
        assert "[bold]x[/bold]" in render_result(result)

    def test_unknown_op_falls_back_to_message(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"message": "done"})
        assert "done" in render_result(result)


class TestRenderView:
    def test_table_contents(self) -> None:
        output = render_result(_view())
        for text in ("Name", "Loft", "Blk 9", "a@bc.com", "dirty", "family", "Bookings"):
            assert text in output
        assert "Jo (123): 010125 to 020125" in output
        assert output.rstrip().endswith("1 residences")

    def test_hide_bookings(self) -> None:
        output = render_result(_view(), show_bookings=False)
        assert "Bookings" not in output
        assert "010125" not in output

    def test_empty_view_has_no_table(self) -> None:
        output = render_result(_view(op="find", items=[]))
        assert "Name" not in output
        assert output.splitlines()[-1] == "0 residences"


class TestRenderHelp:
    def test_help_is_unindented(self) -> None:
        result = ServiceResult(
            ok=True, op="help", data={"message": "list: Lists all residences.", "show_help": True}
        )
        assert render_result(result) == "list: Lists all residences."


class TestRenderError:
    def test_error_line(self) -> None:
        assert render_result(_failure()) == "ERROR  unknown: Unknown command"

    def test_verbose_adds_code_and_detail(self) -> None:
        output = render_result(_failure("bad name", field="name"), verbose=True)
        assert "ERROR  unknown: bad name" in output
        assert "code: FORMAT" in output
        assert "field: name" in output

    def test_multiline_message_kept(self) -> None:
        output = render_result(_failure("Invalid command format! \nhelp: usage"))
        assert "help: usage" in output


class TestRenderQuiet:
    def test_success(self) -> None:
        result = ServiceResult(ok=True, op="clear", data={"message": "cleared"})
        assert render_quiet(result) == "cleared"

    def test_failure(self) -> None:
        assert render_quiet(_failure()) == "ERROR: Unknown command"
