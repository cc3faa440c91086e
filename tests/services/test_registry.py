"""Tests for the in-memory residence registry."""

from __future__ import annotations

from typing import Any

import pytest

from restrack.services.registry import Registry, show_all_residences


class TestRegistry:
    def test_starts_empty(self, registry: Registry) -> None:
        assert len(registry) == 0
        assert registry.residences == ()
        assert registry.filtered_residences == ()

    def test_add_keeps_insertion_order(self, registry: Registry, residence_factory: Any) -> None:
        first = residence_factory("A", "1")
        second = residence_factory("B", "2")
        registry.add_residence(first)
        registry.add_residence(second)
        assert registry.residences == (first, second)

    def test_add_duplicate_identity_rejected(
        self, registry: Registry, residence_factory: Any
    ) -> None:
        registry.add_residence(residence_factory())
        with pytest.raises(ValueError, match="already stored"):
            registry.add_residence(residence_factory(phone="11111111"))
        assert len(registry) == 1

    def test_seed_with_duplicates_rejected(self, residence_factory: Any) -> None:
        with pytest.raises(ValueError):
            Registry([residence_factory(), residence_factory()])

    def test_has_residence_uses_identity(
        self, populated_registry: Registry, residence_factory: Any
    ) -> None:
        assert populated_registry.has_residence(residence_factory(tags=(), clean="n"))
        assert not populated_registry.has_residence(residence_factory(address="Elsewhere"))

    def test_delete(self, populated_registry: Registry) -> None:
        target = populated_registry.residences[1]
        populated_registry.delete_residence(target)
        assert target not in populated_registry.residences
        assert len(populated_registry) == 2

    def test_delete_requires_exact_record(
        self, populated_registry: Registry, residence_factory: Any
    ) -> None:
        with pytest.raises(ValueError, match="not stored"):
            populated_registry.delete_residence(residence_factory(phone="00000"))

    def test_set_residence_replaces_in_place(
        self, populated_registry: Registry, residence_factory: Any
    ) -> None:
        target = populated_registry.residences[1]
        edited = residence_factory("Renamed", "Blk 30 Lorong 3")
        populated_registry.set_residence(target, edited)
        assert populated_registry.residences[1] == edited
        assert len(populated_registry) == 3

    def test_set_residence_rejects_collision(self, populated_registry: Registry) -> None:
        first, second, _ = populated_registry.residences
        colliding = second.model_copy(update={"name": first.name, "address": first.address})
        with pytest.raises(ValueError, match="already stored"):
            populated_registry.set_residence(second, colliding)
        assert populated_registry.residences[1] == second

    def test_filter_is_reevaluated(
        self, populated_registry: Registry, residence_factory: Any
    ) -> None:
        populated_registry.update_filter(lambda r: "Loft" in r.name.value)
        assert len(populated_registry.filtered_residences) == 1
        populated_registry.add_residence(residence_factory("Another Loft", "Blk 99"))
        assert len(populated_registry.filtered_residences) == 2

    def test_clear_resets_filter(
        self, populated_registry: Registry, residence_factory: Any
    ) -> None:
        populated_registry.update_filter(lambda r: False)
        populated_registry.clear()
        assert len(populated_registry) == 0
        populated_registry.add_residence(residence_factory())
        assert len(populated_registry.filtered_residences) == 1

    def test_show_all(self, residence_factory: Any) -> None:
        assert show_all_residences(residence_factory())
