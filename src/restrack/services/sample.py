"""Sample residences for seeding an empty registry (``[tracker] sample_data``)."""

from __future__ import annotations

from datetime import date

from restrack.domain.fields import (
    CleanStatusTag,
    Email,
    Phone,
    ResidenceAddress,
    ResidenceName,
    Tag,
    VisitorName,
)
from restrack.domain.residence import Booking, Residence


def _residence(
    name: str,
    address: str,
    phone: str,
    email: str,
    clean: str,
    *tags: str,
    bookings: tuple[Booking, ...] = (),
) -> Residence:
    return Residence(
        name=ResidenceName(value=name),
        address=ResidenceAddress(value=address),
        phone=Phone(value=phone),
        email=Email(value=email),
        clean_status=frozenset({CleanStatusTag(value=clean)}),
        tags=frozenset(Tag(value=tag) for tag in tags),
        bookings=bookings,
    )


def sample_residences() -> list[Residence]:
    return [
        _residence(
            "Clementi Loft",
            "311, Clementi Ave 2, #02-25",
            "87438807",
            "alexyeoh@example.com",
            "y",
            "friends",
            bookings=(
                Booking(
                    visitor_name=VisitorName(value="Bernice Yu"),
                    phone=Phone(value="99272758"),
                    start=date(2025, 1, 10),
                    end=date(2025, 1, 14),
                ),
            ),
        ),
        _residence(
            "Serangoon Flat",
            "Blk 30 Lorong 3 Serangoon Gardens, #07-18",
            "99272758",
            "berniceyu@example.com",
            "n",
            "colleagues",
            "friends",
        ),
        _residence(
            "Geylang Studio",
            "Blk 11 Ang Mo Kio Street 74, #11-04",
            "93210283",
            "charlotte@example.com",
            "y",
            "neighbours",
        ),
        _residence(
            "Tampines Suite",
            "Blk 436 Serangoon Gardens Street 26, #16-43",
            "91031282",
            "lidavid@example.com",
            "n",
            "family",
        ),
    ]
