"""Executable commands: the closed set of verbs the tracker understands.

Each command is a frozen dataclass produced by
:mod:`restrack.parsing.parsers` and exposes
``execute(registry) -> CommandResult``.  :data:`Command` is the union of
every variant; there is no shared base class.

INVARIANT: ``execute`` either completes its single registry write or
raises :class:`CommandExecutionError` before touching the registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar

from restrack.domain.errors import CommandExecutionError, ExecutionErrorKind
from restrack.domain.residence import Booking, EditResidenceDescriptor, Residence, apply_edit
from restrack.parsing.syntax import (
    PREFIX_ADDRESS,
    PREFIX_BOOKING,
    PREFIX_CLEAN_STATUS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
)
from restrack.services.registry import Registry, show_all_residences


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user plus UI flags."""

    feedback: str
    show_help: bool = False
    exit: bool = False


def _resolve_residence(registry: Registry, index: int) -> Residence:
    """Look up a one-based *index* in the currently filtered view."""
    shown = registry.filtered_residences
    if index < 1 or index > len(shown):
        raise CommandExecutionError(ExecutionErrorKind.INVALID_RESIDENCE_INDEX)
    return shown[index - 1]


# ---------------------------------------------------------------------------
# Residence mutations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class AddCommand:
    WORD: ClassVar[str] = "add"
    USAGE: ClassVar[str] = (
        f"{WORD}: Adds a residence to the residence tracker. "
        f"Parameters: {PREFIX_NAME}NAME {PREFIX_PHONE}PHONE {PREFIX_EMAIL}EMAIL "
        f"{PREFIX_ADDRESS}ADDRESS [{PREFIX_CLEAN_STATUS}y or n] [{PREFIX_TAG}TAG]...\n"
        f"Example: {WORD} {PREFIX_NAME}John Doe {PREFIX_PHONE}98765432 "
        f"{PREFIX_EMAIL}johnd@example.com {PREFIX_ADDRESS}311, Clementi Ave 2, #02-25 "
        f"{PREFIX_CLEAN_STATUS}y {PREFIX_TAG}friends {PREFIX_TAG}owesMoney"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New residence added: {}"

    residence: Residence

    def execute(self, registry: Registry) -> CommandResult:
        if registry.has_residence(self.residence):
            raise CommandExecutionError(ExecutionErrorKind.DUPLICATE_RESIDENCE)
        registry.add_residence(self.residence)
        return CommandResult(self.MESSAGE_SUCCESS.format(self.residence))


@dataclass(frozen=True)
class EditCommand:
    WORD: ClassVar[str] = "edit"
    USAGE: ClassVar[str] = (
        f"{WORD}: Edits the details of the residence identified by the index number used in "
        "the displayed residence list. Existing values will be overwritten by the input values.\n"
        f"Parameters: INDEX (must be a positive integer) [{PREFIX_NAME}NAME] "
        f"[{PREFIX_ADDRESS}ADDRESS] [{PREFIX_CLEAN_STATUS}y or n] [{PREFIX_TAG}TAG]...\n"
        f"Example: {WORD} 1 {PREFIX_NAME}Clementi Loft {PREFIX_CLEAN_STATUS}n"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Residence: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: int
    descriptor: EditResidenceDescriptor = field(default_factory=EditResidenceDescriptor)

    def execute(self, registry: Registry) -> CommandResult:
        target = _resolve_residence(registry, self.index)
        edited = apply_edit(target, self.descriptor)
        if not target.is_same_residence(edited) and registry.has_residence(edited):
            raise CommandExecutionError(ExecutionErrorKind.DUPLICATE_RESIDENCE)
        registry.set_residence(target, edited)
        registry.update_filter(show_all_residences)
        return CommandResult(self.MESSAGE_SUCCESS.format(edited))


@dataclass(frozen=True)
class DeleteCommand:
    WORD: ClassVar[str] = "delete"
    USAGE: ClassVar[str] = (
        f"{WORD}: Deletes the residence identified by the index number used in the displayed "
        "residence list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Residence: {}"

    index: int

    def execute(self, registry: Registry) -> CommandResult:
        target = _resolve_residence(registry, self.index)
        registry.delete_residence(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(target))


# ---------------------------------------------------------------------------
# Booking mutations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class BookCommand:
    WORD: ClassVar[str] = "book"
    USAGE: ClassVar[str] = (
        f"{WORD}: Adds a booking to the residence identified by the index number used in the "
        "displayed residence list.\n"
        f"Parameters: INDEX (must be a positive integer) {PREFIX_NAME}VISITOR_NAME "
        f"{PREFIX_PHONE}PHONE {PREFIX_BOOKING}START_DATE END_DATE (dates as DDMMYY)\n"
        f"Example: {WORD} 1 {PREFIX_NAME}Jane Tan {PREFIX_PHONE}91234567 "
        f"{PREFIX_BOOKING}010125 050125"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New booking added to {}: {}"

    index: int
    booking: Booking

    def execute(self, registry: Registry) -> CommandResult:
        target = _resolve_residence(registry, self.index)
        if self.booking in target.bookings:
            raise CommandExecutionError(ExecutionErrorKind.DUPLICATE_BOOKING)
        registry.set_residence(target, target.with_bookings([*target.bookings, self.booking]))
        return CommandResult(self.MESSAGE_SUCCESS.format(target.name, self.booking))


@dataclass(frozen=True)
class UnbookCommand:
    WORD: ClassVar[str] = "unbook"
    USAGE: ClassVar[str] = (
        f"{WORD}: Deletes a booking from the residence identified by the index number used in "
        "the displayed residence list.\n"
        "Parameters: RESIDENCE_INDEX BOOKING_INDEX (both must be positive integers)\n"
        f"Example: {WORD} 1 2"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted booking from {}: {}"

    residence_index: int
    booking_index: int

    def execute(self, registry: Registry) -> CommandResult:
        target = _resolve_residence(registry, self.residence_index)
        if self.booking_index < 1 or self.booking_index > len(target.bookings):
            raise CommandExecutionError(ExecutionErrorKind.INVALID_BOOKING_INDEX)
        removed = target.bookings[self.booking_index - 1]
        remaining = [b for i, b in enumerate(target.bookings, start=1) if i != self.booking_index]
        registry.set_residence(target, target.with_bookings(remaining))
        return CommandResult(self.MESSAGE_SUCCESS.format(target.name, removed))


# ---------------------------------------------------------------------------
# View and session commands
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class NameContainsKeywords:
    """Matches residences whose name contains any keyword as a whole word."""

    keywords: tuple[str, ...]

    def __call__(self, residence: Residence) -> bool:
        words = {word.lower() for word in residence.name.value.split()}
        return any(keyword.lower() in words for keyword in self.keywords)


@dataclass(frozen=True)
class FindCommand:
    WORD: ClassVar[str] = "find"
    USAGE: ClassVar[str] = (
        f"{WORD}: Finds all residences whose names contain any of the specified keywords "
        "(case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {WORD} clementi loft"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "{} residences listed!"

    predicate: NameContainsKeywords

    def execute(self, registry: Registry) -> CommandResult:
        registry.update_filter(self.predicate)
        return CommandResult(self.MESSAGE_SUCCESS.format(len(registry.filtered_residences)))


@dataclass(frozen=True)
class ListCommand:
    WORD: ClassVar[str] = "list"
    USAGE: ClassVar[str] = f"{WORD}: Lists all residences.\nExample: {WORD}"
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all residences"

    def execute(self, registry: Registry) -> CommandResult:
        registry.update_filter(show_all_residences)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ClearCommand:
    WORD: ClassVar[str] = "clear"
    USAGE: ClassVar[str] = f"{WORD}: Removes every residence.\nExample: {WORD}"
    MESSAGE_SUCCESS: ClassVar[str] = "Residence tracker has been cleared!"

    def execute(self, registry: Registry) -> CommandResult:
        registry.clear()
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ExitCommand:
    WORD: ClassVar[str] = "exit"
    USAGE: ClassVar[str] = f"{WORD}: Exits the residence tracker.\nExample: {WORD}"
    MESSAGE_SUCCESS: ClassVar[str] = "Exiting residence tracker as requested ..."

    def execute(self, registry: Registry) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)


@dataclass(frozen=True)
class HelpCommand:
    WORD: ClassVar[str] = "help"
    USAGE: ClassVar[str] = f"{WORD}: Shows program usage instructions.\nExample: {WORD}"

    def execute(self, registry: Registry) -> CommandResult:
        return CommandResult(help_text(), show_help=True)


Command = (
    AddCommand
    | EditCommand
    | DeleteCommand
    | BookCommand
    | UnbookCommand
    | FindCommand
    | ListCommand
    | ClearCommand
    | HelpCommand
    | ExitCommand
)

ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    BookCommand,
    UnbookCommand,
    FindCommand,
    ListCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)


def help_text() -> str:
    return "\n\n".join(command.USAGE for command in ALL_COMMANDS)
