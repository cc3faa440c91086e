"""TrackerService: one line of user input in, one ServiceResult out.

Pipeline: split verb -> parse -> execute against the registry -> report.
Parse failures and execution failures both become failed results whose
message is the error text verbatim; the registry is untouched in either
case.
"""

from __future__ import annotations

import logging
from typing import Any

from restrack.domain.errors import CommandExecutionError, ParseError, ValidationError
from restrack.domain.residence import Residence
from restrack.parsing.parsers import parse_command, split_command
from restrack.services.base import BaseService
from restrack.services.commands import ALL_COMMANDS, FindCommand, ListCommand
from restrack.services.result import ServiceResult

logger = logging.getLogger(__name__)

UNKNOWN_OP = "unknown"

_KNOWN_WORDS = frozenset(command.WORD for command in ALL_COMMANDS)
# Ops whose result carries the filtered view for display.
_VIEW_OPS = frozenset({ListCommand.WORD, FindCommand.WORD})


def residence_to_dict(residence: Residence, index: int) -> dict[str, Any]:
    """Flatten a residence for result payloads (JSON-safe)."""
    return {
        "index": index,
        "name": residence.name.value,
        "address": residence.address.value,
        "phone": residence.phone.value,
        "email": residence.email.value,
        "clean": residence.clean_label,
        "tags": residence.sorted_tags,
        "bookings": [str(booking) for booking in residence.bookings],
    }


def _op_for(line: str) -> str:
    try:
        word, _ = split_command(line)
    except ParseError:
        return UNKNOWN_OP
    return word if word in _KNOWN_WORDS else UNKNOWN_OP


class TrackerService(BaseService):
    """Runs tracker commands against the registry."""

    def execute(self, line: str) -> ServiceResult:
        op = _op_for(line)
        try:
            command = parse_command(line)
        except ValidationError as exc:
            return self._failure(op, exc.code, str(exc), field=exc.error.name.lower())
        except ParseError as exc:
            return self._failure(op, exc.code, str(exc))

        try:
            outcome = command.execute(self._registry)
        except CommandExecutionError as exc:
            return self._failure(op, exc.code, str(exc))

        logger.debug("Executed %s; registry holds %d residences", op, len(self._registry))
        data: dict[str, Any] = {"message": outcome.feedback}
        if outcome.show_help:
            data["show_help"] = True
        if outcome.exit:
            data["exit"] = True
        if op in _VIEW_OPS:
            items = self._view_items()
            data["items"] = items
            data["count"] = len(items)
        return ServiceResult(ok=True, op=op, data=data)

    def _view_items(self) -> list[dict[str, Any]]:
        return [
            residence_to_dict(residence, index)
            for index, residence in enumerate(self._registry.filtered_residences, start=1)
        ]
