"""In-memory residence registry with an explicit filter predicate.

The registry owns an ordered list of residences and the predicate that
defines the user's current view.  :attr:`Registry.filtered_residences`
re-evaluates the predicate on every access; nothing is cached, so the view
always reflects the latest writes.

INVARIANT: no two stored residences share an identity
(see :meth:`Residence.is_same_residence`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from restrack.domain.residence import Residence

logger = logging.getLogger(__name__)

ResidencePredicate = Callable[[Residence], bool]


def show_all_residences(_residence: Residence) -> bool:
    return True


class Registry:
    """Single-writer residence store consumed by :mod:`restrack.services.commands`."""

    def __init__(self, residences: Iterable[Residence] = ()) -> None:
        self._residences: list[Residence] = []
        self._predicate: ResidencePredicate = show_all_residences
        for residence in residences:
            self.add_residence(residence)

    def __len__(self) -> int:
        return len(self._residences)

    @property
    def residences(self) -> tuple[Residence, ...]:
        """Every stored residence, in insertion order."""
        return tuple(self._residences)

    @property
    def filtered_residences(self) -> tuple[Residence, ...]:
        """Residences matching the current filter, in insertion order."""
        return tuple(r for r in self._residences if self._predicate(r))

    def has_residence(self, residence: Residence) -> bool:
        """True if a residence with the same identity is stored."""
        return any(residence.is_same_residence(existing) for existing in self._residences)

    def add_residence(self, residence: Residence) -> None:
        """Store *residence*. Its identity must not already be present."""
        if self.has_residence(residence):
            raise ValueError(f"Residence already stored: {residence.name}")
        self._residences.append(residence)
        logger.debug("Added residence %s", residence.name)

    def delete_residence(self, target: Residence) -> None:
        """Remove *target*, which must be stored."""
        self._residences.pop(self._position_of(target))
        logger.debug("Deleted residence %s", target.name)

    def set_residence(self, target: Residence, edited: Residence) -> None:
        """Replace *target* with *edited* in place.

        *edited* may share *target*'s identity but no other stored
        residence's.
        """
        position = self._position_of(target)
        if not target.is_same_residence(edited) and self.has_residence(edited):
            raise ValueError(f"Residence already stored: {edited.name}")
        self._residences[position] = edited
        logger.debug("Replaced residence %s with %s", target.name, edited.name)

    def update_filter(self, predicate: ResidencePredicate) -> None:
        self._predicate = predicate

    def clear(self) -> None:
        """Drop every residence and reset the filter."""
        self._residences.clear()
        self._predicate = show_all_residences
        logger.debug("Cleared registry")

    def _position_of(self, target: Residence) -> int:
        for position, residence in enumerate(self._residences):
            if residence == target:
                return position
        raise ValueError(f"Residence not stored: {target.name}")
