"""Field value objects and their validation rules.

Every field the tracker accepts from user input is a frozen pydantic model
wrapping a single trimmed string.  Construction enforces the field rule;
``from_raw()`` is the total entry point used by the parsers: it strips the
raw input and returns either the value object or a :class:`FieldViolation`,
never raising for string input.

Each rule carries its own message template via :class:`FieldError` so the
caller can surface it verbatim.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import ClassVar, Self

from pydantic import BaseModel, field_validator


class FieldError(Enum):
    """Constraint violations, one per field rule, valued by their message."""

    NAME = (
        "Names should only contain alphanumeric characters and spaces, and it should not be blank"
    )
    ADDRESS = "Addresses can take any values, and it should not be blank"
    PHONE = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
    EMAIL = (
        "Emails should be of the format local-part@domain "
        "and adhere to the following constraints:\n"
        "1. The local-part should only contain alphanumeric characters and these special "
        "characters, excluding the parentheses, (+_.-). The local-part may not start or end "
        "with any special characters.\n"
        "2. This is followed by a '@' and then a domain name. The domain name is made up of "
        "domain labels separated by periods. The domain name must end with a domain label at "
        "least 2 characters long, have each domain label start and end with alphanumeric "
        "characters, and have each domain label consist of alphanumeric characters, separated "
        "only by hyphens, if any."
    )
    CLEAN_STATUS = "Clean status should be either y (clean) or n (dirty)"
    TAG = "Tags names should be alphanumeric"
    BOOKING_DATE = "Date is not in the expected format: DDMMYY"
    BOOKING_RANGE = "Booking start date should not be after its end date"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class FieldViolation:
    """Structured validation failure for one raw input."""

    error: FieldError
    raw: str

    @property
    def message(self) -> str:
        return self.error.message


# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

_ALNUM = "[A-Za-z0-9]"
_DOMAIN_LABEL = rf"{_ALNUM}+(?:-{_ALNUM}+)*"

NAME_PATTERN = re.compile(rf"{_ALNUM}[A-Za-z0-9 ]*")
ADDRESS_PATTERN = re.compile(r"\S.*", re.DOTALL)
PHONE_PATTERN = re.compile(r"[0-9]{3,}")
EMAIL_PATTERN = re.compile(
    rf"{_ALNUM}+(?:[+_.\-]{_ALNUM}+)*"
    # Final label is at least two characters, hyphens included.
    rf"@(?:{_DOMAIN_LABEL}\.)*(?=[A-Za-z0-9-]{{2,}}\Z){_DOMAIN_LABEL}"
)
CLEAN_STATUS_PATTERN = re.compile(r"[yn]")
TAG_PATTERN = re.compile(rf"{_ALNUM}+")
BOOKING_DATE_PATTERN = re.compile(r"[0-9]{6}")

BOOKING_DATE_FORMAT = "%d%m%y"


# ---------------------------------------------------------------------------
# Value objects
# ---------------------------------------------------------------------------


class FieldValue(BaseModel):
    """Base for single-string value objects.

    Subclasses declare ``PATTERN`` (matched against the whole value) and
    ``ERROR`` (the violation reported when it does not match).
    """

    model_config = {"frozen": True}

    PATTERN: ClassVar[re.Pattern[str]]
    ERROR: ClassVar[FieldError]

    value: str

    @field_validator("value")
    @classmethod
    def enforce_rule(cls, value: str) -> str:
        if not cls.is_valid(value):
            raise ValueError(cls.ERROR.message)
        return value

    @classmethod
    def is_valid(cls, candidate: str) -> bool:
        """Whether *candidate* satisfies this field's rule as given (no trimming)."""
        return cls.PATTERN.fullmatch(candidate) is not None

    @classmethod
    def from_raw(cls, raw: str) -> Self | FieldViolation:
        """Validate trimmed *raw* input into a value object or a violation."""
        trimmed = raw.strip()
        if not cls.is_valid(trimmed):
            return FieldViolation(error=cls.ERROR, raw=raw)
        return cls(value=trimmed)

    def __str__(self) -> str:
        return self.value


class ResidenceName(FieldValue):
    PATTERN = NAME_PATTERN
    ERROR = FieldError.NAME


class VisitorName(ResidenceName):
    """Booking visitor name; shares the residence-name rule."""


class ResidenceAddress(FieldValue):
    PATTERN = ADDRESS_PATTERN
    ERROR = FieldError.ADDRESS


class Phone(FieldValue):
    PATTERN = PHONE_PATTERN
    ERROR = FieldError.PHONE


class Email(FieldValue):
    PATTERN = EMAIL_PATTERN
    ERROR = FieldError.EMAIL


class CleanStatusTag(FieldValue):
    """``y`` (clean) or ``n`` (dirty), case-sensitive."""

    PATTERN = CLEAN_STATUS_PATTERN
    ERROR = FieldError.CLEAN_STATUS

    @property
    def is_clean(self) -> bool:
        return self.value == "y"

    @property
    def label(self) -> str:
        return "clean" if self.is_clean else "dirty"


class Tag(FieldValue):
    PATTERN = TAG_PATTERN
    ERROR = FieldError.TAG


# ---------------------------------------------------------------------------
# Booking dates
# ---------------------------------------------------------------------------


def parse_booking_date(raw: str) -> date | FieldViolation:
    """Parse a ``DDMMYY`` date.

    Any failure (wrong shape, day or month out of range) is reported as the
    single generic :attr:`FieldError.BOOKING_DATE` violation.
    """
    trimmed = raw.strip()
    if BOOKING_DATE_PATTERN.fullmatch(trimmed) is None:
        return FieldViolation(error=FieldError.BOOKING_DATE, raw=raw)
    try:
        return datetime.strptime(trimmed, BOOKING_DATE_FORMAT).date()
    except ValueError:
        return FieldViolation(error=FieldError.BOOKING_DATE, raw=raw)


def is_valid_booking_range(start: date, end: date) -> bool:
    return start <= end


def parse_booking_dates(start_raw: str, end_raw: str) -> tuple[date, date] | FieldViolation:
    """Parse both booking dates, then check the range.

    The range rule is only consulted once both dates parse, so a malformed
    date never reports as a range error.
    """
    start = parse_booking_date(start_raw)
    if isinstance(start, FieldViolation):
        return start
    end = parse_booking_date(end_raw)
    if isinstance(end, FieldViolation):
        return end
    if not is_valid_booking_range(start, end):
        return FieldViolation(error=FieldError.BOOKING_RANGE, raw=f"{start_raw} {end_raw}")
    return start, end


def format_booking_date(value: date) -> str:
    return value.strftime(BOOKING_DATE_FORMAT)
