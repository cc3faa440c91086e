"""Tests for the residence aggregate and edit merging."""

from __future__ import annotations

from datetime import date
from typing import Any

import pytest
from pydantic import ValidationError

from restrack.domain.fields import CleanStatusTag, ResidenceAddress, ResidenceName, Tag
from restrack.domain.residence import EditResidenceDescriptor, apply_edit


class TestBooking:
    def test_str(self, booking_factory: Any) -> None:
        assert str(booking_factory()) == "Jane Tan (91234567): 010125 to 050125"

    def test_end_before_start_rejected(self, booking_factory: Any) -> None:
        with pytest.raises(ValidationError, match="should not be after its end date"):
            booking_factory(start=date(2025, 1, 5), end=date(2025, 1, 1))

    def test_equality_is_by_value(self, booking_factory: Any) -> None:
        assert booking_factory() == booking_factory()
        assert booking_factory() != booking_factory(phone="99999999")


class TestResidenceIdentity:
    def test_same_name_and_address_is_same_residence(self, residence_factory: Any) -> None:
        original = residence_factory()
        other = residence_factory(phone="11111111", clean="n", tags=())
        assert original.is_same_residence(other)
        assert original != other

    def test_different_address_is_different_residence(self, residence_factory: Any) -> None:
        assert not residence_factory().is_same_residence(residence_factory(address="Elsewhere"))

    def test_none_is_never_same(self, residence_factory: Any) -> None:
        assert not residence_factory().is_same_residence(None)

    def test_full_equality(self, residence_factory: Any) -> None:
        assert residence_factory() == residence_factory()


class TestResidenceDisplay:
    def test_clean_labels(self, residence_factory: Any) -> None:
        assert residence_factory(clean="y").clean_label == "clean"
        assert residence_factory(clean="n").clean_label == "dirty"
        assert residence_factory(clean=None).clean_label == "unset"
        assert residence_factory(clean="y").is_clean
        assert not residence_factory(clean=None).is_clean

    def test_sorted_tags(self, residence_factory: Any) -> None:
        assert residence_factory(tags=("zeta", "alpha")).sorted_tags == ["alpha", "zeta"]

    def test_str_lists_fields(self, residence_factory: Any, booking_factory: Any) -> None:
        text = str(residence_factory(tags=("b", "a"), bookings=(booking_factory(),)))
        assert text == (
            "Clementi Loft; Address: 311 Clementi Ave 2; Phone: 98765432; "
            "Email: johnd@example.com; Clean: clean; Tags: a, b; Bookings: 1"
        )

    def test_str_omits_empty_collections(self, residence_factory: Any) -> None:
        text = str(residence_factory(tags=(), clean=None))
        assert "Tags" not in text
        assert "Bookings" not in text
        assert "Clean: unset" in text

    def test_with_bookings_keeps_other_fields(
        self, residence_factory: Any, booking_factory: Any
    ) -> None:
        original = residence_factory()
        updated = original.with_bookings([booking_factory()])
        assert updated.bookings == (booking_factory(),)
        assert original.bookings == ()
        assert updated.is_same_residence(original)


class TestApplyEdit:
    def test_empty_descriptor_is_no_op(self, residence_factory: Any) -> None:
        original = residence_factory()
        assert apply_edit(original, EditResidenceDescriptor()) == original

    def test_overlays_only_set_fields(self, residence_factory: Any) -> None:
        original = residence_factory()
        descriptor = EditResidenceDescriptor(name=ResidenceName(value="New Name"))
        edited = apply_edit(original, descriptor)
        assert edited.name.value == "New Name"
        assert edited.address == original.address
        assert edited.tags == original.tags
        assert edited.clean_status == original.clean_status

    def test_empty_set_clears(self, residence_factory: Any) -> None:
        edited = apply_edit(
            residence_factory(),
            EditResidenceDescriptor(clean_status=frozenset(), tags=frozenset()),
        )
        assert edited.clean_status == frozenset()
        assert edited.tags == frozenset()

    def test_sets_replace_rather_than_merge(self, residence_factory: Any) -> None:
        edited = apply_edit(
            residence_factory(tags=("friends",)),
            EditResidenceDescriptor(tags=frozenset({Tag(value="family")})),
        )
        assert edited.sorted_tags == ["family"]

    def test_carries_phone_email_and_bookings(
        self, residence_factory: Any, booking_factory: Any
    ) -> None:
        original = residence_factory(bookings=(booking_factory(),))
        edited = apply_edit(
            original, EditResidenceDescriptor(address=ResidenceAddress(value="Blk 9"))
        )
        assert edited.phone == original.phone
        assert edited.email == original.email
        assert edited.bookings == original.bookings

    def test_idempotent(self, residence_factory: Any) -> None:
        descriptor = EditResidenceDescriptor(
            name=ResidenceName(value="Loft B"),
            clean_status=frozenset({CleanStatusTag(value="n")}),
        )
        once = apply_edit(residence_factory(), descriptor)
        assert apply_edit(once, descriptor) == once

    def test_original_untouched(self, residence_factory: Any) -> None:
        original = residence_factory()
        apply_edit(original, EditResidenceDescriptor(name=ResidenceName(value="Other")))
        assert original.name.value == "Clementi Loft"


class TestEditDescriptor:
    def test_nothing_edited(self) -> None:
        assert not EditResidenceDescriptor().is_any_field_edited()

    def test_empty_set_counts_as_edited(self) -> None:
        assert EditResidenceDescriptor(tags=frozenset()).is_any_field_edited()

