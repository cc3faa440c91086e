"""Shared parsing helpers: indices and field values.

Each ``parse_*`` function trims its input and raises
:class:`~restrack.domain.errors.ValidationError` carrying the field's own
message when the rule fails.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TypeVar

from restrack.domain.errors import ParseFormatError, ValidationError
from restrack.domain.fields import (
    CleanStatusTag,
    Email,
    FieldValue,
    FieldViolation,
    Phone,
    ResidenceAddress,
    ResidenceName,
    Tag,
    VisitorName,
    parse_booking_dates,
)
from restrack.domain.residence import Booking

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"

_UNSIGNED_INT = re.compile(r"[0-9]+")

V = TypeVar("V", bound=FieldValue)


def invalid_format(usage: str) -> ParseFormatError:
    """Build the generic format error wrapping a verb's usage string."""
    return ParseFormatError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def is_non_zero_unsigned_integer(text: str) -> bool:
    return _UNSIGNED_INT.fullmatch(text) is not None and int(text) > 0


def parse_index(one_based: str) -> int:
    """Parse a one-based index.

    Raises:
        ParseFormatError: if the trimmed text is not a positive integer.
    """
    trimmed = one_based.strip()
    if not is_non_zero_unsigned_integer(trimmed):
        raise ParseFormatError(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def parse_two_indices(text: str) -> tuple[int, int]:
    """Parse exactly two whitespace-separated one-based indices."""
    parts = text.split()
    if len(parts) != 2:
        raise ParseFormatError(MESSAGE_INVALID_INDEX)
    return parse_index(parts[0]), parse_index(parts[1])


def parse_field(kind: type[V], raw: str) -> V:
    result = kind.from_raw(raw)
    if isinstance(result, FieldViolation):
        raise ValidationError(result.error)
    return result


def parse_name(raw: str) -> ResidenceName:
    return parse_field(ResidenceName, raw)


def parse_visitor_name(raw: str) -> VisitorName:
    return parse_field(VisitorName, raw)


def parse_address(raw: str) -> ResidenceAddress:
    return parse_field(ResidenceAddress, raw)


def parse_phone(raw: str) -> Phone:
    return parse_field(Phone, raw)


def parse_email(raw: str) -> Email:
    return parse_field(Email, raw)


def parse_clean_status(raw: str) -> CleanStatusTag:
    return parse_field(CleanStatusTag, raw)


def parse_clean_statuses(values: Iterable[str]) -> frozenset[CleanStatusTag]:
    return frozenset(parse_clean_status(value) for value in values)


def parse_tag(raw: str) -> Tag:
    return parse_field(Tag, raw)


def parse_tags(values: Iterable[str]) -> frozenset[Tag]:
    return frozenset(parse_tag(value) for value in values)


def parse_booking(visitor_name: VisitorName, phone: Phone, start: str, end: str) -> Booking:
    """Build a booking from already-validated visitor fields and raw dates."""
    dates = parse_booking_dates(start, end)
    if isinstance(dates, FieldViolation):
        raise ValidationError(dates.error)
    start_date, end_date = dates
    return Booking(visitor_name=visitor_name, phone=phone, start=start_date, end=end_date)
