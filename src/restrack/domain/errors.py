"""Error taxonomy for the command pipeline.

Parse-time errors (:class:`ParseError` and subclasses) abort command
construction.  :class:`CommandExecutionError` aborts a mutation before any
write reaches the registry.  Messages are shown to the user verbatim.
"""

from __future__ import annotations

from enum import StrEnum

from restrack.domain.fields import FieldError


class ParseError(Exception):
    """Raised when a command line cannot be turned into a command."""

    code = "PARSE"


class ValidationError(ParseError):
    """A single field failed its rule."""

    code = "VALIDATION"

    def __init__(self, error: FieldError) -> None:
        super().__init__(error.message)
        self.error = error


class ParseFormatError(ParseError):
    """Structural problem: unknown verb, missing prefix, bad index, nothing edited."""

    code = "FORMAT"


class ExecutionErrorKind(StrEnum):
    """Execution failures, each with a fixed message."""

    DUPLICATE_RESIDENCE = "DUPLICATE_RESIDENCE"
    INVALID_RESIDENCE_INDEX = "INVALID_RESIDENCE_INDEX"
    INVALID_BOOKING_INDEX = "INVALID_BOOKING_INDEX"
    DUPLICATE_BOOKING = "DUPLICATE_BOOKING"

    @property
    def message(self) -> str:
        return _EXECUTION_MESSAGES[self]


_EXECUTION_MESSAGES: dict[ExecutionErrorKind, str] = {
    ExecutionErrorKind.DUPLICATE_RESIDENCE: (
        "This residence already exists in the residence tracker"
    ),
    ExecutionErrorKind.INVALID_RESIDENCE_INDEX: "The residence index provided is invalid",
    ExecutionErrorKind.INVALID_BOOKING_INDEX: "The booking index provided is invalid",
    ExecutionErrorKind.DUPLICATE_BOOKING: "This booking already exists for the residence",
}


class CommandExecutionError(Exception):
    """Raised by ``Command.execute`` when the registry rejects the change."""

    def __init__(self, kind: ExecutionErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind

    @property
    def code(self) -> str:
        return self.kind.value
