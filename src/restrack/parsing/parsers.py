"""Per-verb parsers and the top-level command-line dispatcher.

``parse_command(line)`` splits off the verb and hands the remaining text
(leading whitespace intact, so the first prefix still counts) to that
verb's parser.  Parsers never touch the registry: they return a command
value or raise :class:`~restrack.domain.errors.ParseError`.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from restrack.domain.errors import ParseFormatError
from restrack.domain.fields import CleanStatusTag, Tag
from restrack.domain.residence import EditResidenceDescriptor, Residence
from restrack.parsing import util
from restrack.parsing.syntax import (
    PREFIX_ADDRESS,
    PREFIX_BOOKING,
    PREFIX_CLEAN_STATUS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_TAG,
    Prefix,
)
from restrack.parsing.tokenizer import ArgumentMultimap, tokenize
from restrack.services.commands import (
    AddCommand,
    BookCommand,
    ClearCommand,
    Command,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    NameContainsKeywords,
    UnbookCommand,
)

_COMMAND_FORMAT = re.compile(r"(?P<word>\S+)(?P<arguments>.*)", re.DOTALL)


def _require_prefixes(multimap: ArgumentMultimap, *prefixes: Prefix) -> bool:
    return all(prefix in multimap for prefix in prefixes)


def parse_add(args: str) -> AddCommand:
    multimap = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_PHONE,
        PREFIX_EMAIL,
        PREFIX_ADDRESS,
        PREFIX_CLEAN_STATUS,
        PREFIX_TAG,
    )
    if (
        not _require_prefixes(multimap, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
        or multimap.preamble
    ):
        raise util.invalid_format(AddCommand.USAGE)

    name = util.parse_name(multimap.get_value(PREFIX_NAME) or "")
    phone = util.parse_phone(multimap.get_value(PREFIX_PHONE) or "")
    email = util.parse_email(multimap.get_value(PREFIX_EMAIL) or "")
    address = util.parse_address(multimap.get_value(PREFIX_ADDRESS) or "")
    clean_raw = multimap.get_value(PREFIX_CLEAN_STATUS)
    clean_status = (
        frozenset() if clean_raw is None else frozenset({util.parse_clean_status(clean_raw)})
    )
    tags = util.parse_tags(multimap.get_all_values(PREFIX_TAG))

    residence = Residence(
        name=name,
        address=address,
        phone=phone,
        email=email,
        clean_status=clean_status,
        tags=tags,
    )
    return AddCommand(residence)


def _values_for_edit(values: list[str]) -> list[str] | None:
    """Apply the reset convention for set-valued fields.

    No occurrence means untouched (None).  A single empty occurrence means
    "clear": an empty list.  Anything else is validated as given.
    """
    if not values:
        return None
    if values == [""]:
        return []
    return values


def _parse_clean_status_for_edit(values: list[str]) -> frozenset[CleanStatusTag] | None:
    collected = _values_for_edit(values)
    return None if collected is None else util.parse_clean_statuses(collected)


def _parse_tags_for_edit(values: list[str]) -> frozenset[Tag] | None:
    collected = _values_for_edit(values)
    return None if collected is None else util.parse_tags(collected)


def parse_edit(args: str) -> EditCommand:
    # b/ is declared so booking text never leaks into another field's value.
    multimap = tokenize(
        args,
        PREFIX_NAME,
        PREFIX_ADDRESS,
        PREFIX_BOOKING,
        PREFIX_CLEAN_STATUS,
        PREFIX_TAG,
    )
    try:
        index = util.parse_index(multimap.preamble)
    except ParseFormatError as exc:
        raise util.invalid_format(EditCommand.USAGE) from exc

    descriptor = EditResidenceDescriptor()
    name_raw = multimap.get_value(PREFIX_NAME)
    if name_raw is not None:
        descriptor.name = util.parse_name(name_raw)
    address_raw = multimap.get_value(PREFIX_ADDRESS)
    if address_raw is not None:
        descriptor.address = util.parse_address(address_raw)
    descriptor.clean_status = _parse_clean_status_for_edit(
        multimap.get_all_values(PREFIX_CLEAN_STATUS)
    )
    descriptor.tags = _parse_tags_for_edit(multimap.get_all_values(PREFIX_TAG))

    if not descriptor.is_any_field_edited():
        raise ParseFormatError(EditCommand.MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_delete(args: str) -> DeleteCommand:
    try:
        return DeleteCommand(util.parse_index(args))
    except ParseFormatError as exc:
        raise util.invalid_format(DeleteCommand.USAGE) from exc


def parse_book(args: str) -> BookCommand:
    multimap = tokenize(args, PREFIX_NAME, PREFIX_PHONE, PREFIX_BOOKING)
    if not _require_prefixes(multimap, PREFIX_NAME, PREFIX_PHONE, PREFIX_BOOKING):
        raise util.invalid_format(BookCommand.USAGE)
    try:
        index = util.parse_index(multimap.preamble)
    except ParseFormatError as exc:
        raise util.invalid_format(BookCommand.USAGE) from exc

    dates = (multimap.get_value(PREFIX_BOOKING) or "").split()
    if len(dates) != 2:
        raise util.invalid_format(BookCommand.USAGE)

    visitor = util.parse_visitor_name(multimap.get_value(PREFIX_NAME) or "")
    phone = util.parse_phone(multimap.get_value(PREFIX_PHONE) or "")
    booking = util.parse_booking(visitor, phone, dates[0], dates[1])
    return BookCommand(index, booking)


def parse_unbook(args: str) -> UnbookCommand:
    try:
        residence_index, booking_index = util.parse_two_indices(args)
    except ParseFormatError as exc:
        raise util.invalid_format(UnbookCommand.USAGE) from exc
    return UnbookCommand(residence_index, booking_index)


def parse_find(args: str) -> FindCommand:
    keywords = tuple(args.split())
    if not keywords:
        raise util.invalid_format(FindCommand.USAGE)
    return FindCommand(NameContainsKeywords(keywords))


_PARSERS: dict[str, Callable[[str], Command]] = {
    AddCommand.WORD: parse_add,
    EditCommand.WORD: parse_edit,
    DeleteCommand.WORD: parse_delete,
    BookCommand.WORD: parse_book,
    UnbookCommand.WORD: parse_unbook,
    FindCommand.WORD: parse_find,
    ListCommand.WORD: lambda _args: ListCommand(),
    ClearCommand.WORD: lambda _args: ClearCommand(),
    HelpCommand.WORD: lambda _args: HelpCommand(),
    ExitCommand.WORD: lambda _args: ExitCommand(),
}


def split_command(line: str) -> tuple[str, str]:
    """Split *line* into ``(verb, arguments)``.

    Raises:
        ParseFormatError: on blank input.
    """
    match = _COMMAND_FORMAT.match(line.strip())
    if match is None:
        raise util.invalid_format(HelpCommand.USAGE)
    return match.group("word"), match.group("arguments")


def parse_command(line: str) -> Command:
    """Parse one line of user input into a command."""
    word, arguments = split_command(line)
    parser = _PARSERS.get(word)
    if parser is None:
        raise ParseFormatError(util.MESSAGE_UNKNOWN_COMMAND)
    return parser(arguments)
