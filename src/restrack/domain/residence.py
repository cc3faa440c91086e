"""Residence aggregate, bookings, and the sparse edit descriptor.

Residences are immutable.  Every change (edit, booking add/remove) builds a
new :class:`Residence` and the registry swaps it in for the old one.

Two residences are the *same residence* when name and address match, even
if contact details, clean status, tags, or bookings differ.  Full ``==``
compares every field.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from pydantic import BaseModel, model_validator

from restrack.domain.fields import (
    CleanStatusTag,
    Email,
    FieldError,
    Phone,
    ResidenceAddress,
    ResidenceName,
    Tag,
    VisitorName,
    format_booking_date,
    is_valid_booking_range,
)


class Booking(BaseModel):
    """A dated reservation held by one visitor."""

    model_config = {"frozen": True}

    visitor_name: VisitorName
    phone: Phone
    start: date
    end: date

    @model_validator(mode="after")
    def check_range(self) -> Booking:
        if not is_valid_booking_range(self.start, self.end):
            raise ValueError(FieldError.BOOKING_RANGE.message)
        return self

    def __str__(self) -> str:
        return (
            f"{self.visitor_name} ({self.phone}): "
            f"{format_booking_date(self.start)} to {format_booking_date(self.end)}"
        )


class Residence(BaseModel):
    """The tracked record.

    ``clean_status`` holds zero or one :class:`CleanStatusTag`; an empty set
    means the status was never recorded.
    """

    model_config = {"frozen": True}

    name: ResidenceName
    address: ResidenceAddress
    phone: Phone
    email: Email
    clean_status: frozenset[CleanStatusTag] = frozenset()
    tags: frozenset[Tag] = frozenset()
    bookings: tuple[Booking, ...] = ()

    def is_same_residence(self, other: Residence | None) -> bool:
        """Identity check used for duplicate detection."""
        if other is self:
            return True
        return other is not None and other.name == self.name and other.address == self.address

    @property
    def is_clean(self) -> bool:
        return any(tag.is_clean for tag in self.clean_status)

    @property
    def clean_label(self) -> str:
        if not self.clean_status:
            return "unset"
        return ", ".join(sorted(tag.label for tag in self.clean_status))

    @property
    def sorted_tags(self) -> list[str]:
        return sorted(tag.value for tag in self.tags)

    def with_bookings(self, bookings: Iterable[Booking]) -> Residence:
        """Copy of this residence with its booking collection replaced."""
        return self.model_copy(update={"bookings": tuple(bookings)})

    def __str__(self) -> str:
        parts = [
            str(self.name),
            f"Address: {self.address}",
            f"Phone: {self.phone}",
            f"Email: {self.email}",
            f"Clean: {self.clean_label}",
        ]
        if self.tags:
            parts.append(f"Tags: {', '.join(self.sorted_tags)}")
        if self.bookings:
            parts.append(f"Bookings: {len(self.bookings)}")
        return "; ".join(parts)


@dataclass
class EditResidenceDescriptor:
    """Fields to overlay onto an existing residence.

    ``None`` means "leave unchanged".  For the set-valued fields an empty
    frozenset is a real value: it clears the field.
    """

    name: ResidenceName | None = None
    address: ResidenceAddress | None = None
    clean_status: frozenset[CleanStatusTag] | None = None
    tags: frozenset[Tag] | None = None

    def is_any_field_edited(self) -> bool:
        return any(
            value is not None for value in (self.name, self.address, self.clean_status, self.tags)
        )


def apply_edit(residence: Residence, descriptor: EditResidenceDescriptor) -> Residence:
    """Overlay *descriptor* onto *residence*, returning a new residence.

    Phone, email, and bookings are not editable here and always carry
    forward from the original.
    """
    return Residence(
        name=descriptor.name if descriptor.name is not None else residence.name,
        address=descriptor.address if descriptor.address is not None else residence.address,
        phone=residence.phone,
        email=residence.email,
        clean_status=(
            descriptor.clean_status
            if descriptor.clean_status is not None
            else residence.clean_status
        ),
        tags=descriptor.tags if descriptor.tags is not None else residence.tags,
        bookings=residence.bookings,
    )
