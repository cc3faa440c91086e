"""Shared pytest fixtures and test helpers for restrack tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

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
from restrack.services.registry import Registry
from restrack.services.tracker import TrackerService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep tests away from real restrack.toml files and RESTRACK_* env vars."""
    for key in list(os.environ):
        if key.startswith("RESTRACK_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() side effects from CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app_logger = logging.getLogger("restrack")
    app_level = app_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app_logger.setLevel(app_level)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def make_booking(
    visitor: str = "Jane Tan",
    phone: str = "91234567",
    start: date = date(2025, 1, 1),
    end: date = date(2025, 1, 5),
) -> Booking:
    return Booking(
        visitor_name=VisitorName(value=visitor),
        phone=Phone(value=phone),
        start=start,
        end=end,
    )


def make_residence(
    name: str = "Clementi Loft",
    address: str = "311 Clementi Ave 2",
    *,
    phone: str = "98765432",
    email: str = "johnd@example.com",
    clean: str | None = "y",
    tags: tuple[str, ...] = ("friends",),
    bookings: tuple[Booking, ...] = (),
    **overrides: Any,
) -> Residence:
    """Build a valid residence; keyword overrides replace whole fields."""
    fields: dict[str, Any] = {
        "name": ResidenceName(value=name),
        "address": ResidenceAddress(value=address),
        "phone": Phone(value=phone),
        "email": Email(value=email),
        "clean_status": (
            frozenset() if clean is None else frozenset({CleanStatusTag(value=clean)})
        ),
        "tags": frozenset(Tag(value=tag) for tag in tags),
        "bookings": bookings,
    }
    fields.update(overrides)
    return Residence(**fields)


@pytest.fixture
def registry() -> Registry:
    """Empty registry."""
    return Registry()


@pytest.fixture
def populated_registry() -> Registry:
    """Three residences; the first holds one booking, the third has no clean status."""
    return Registry(
        [
            make_residence(bookings=(make_booking(),)),
            make_residence("Serangoon Flat", "Blk 30 Lorong 3", clean="n", tags=("colleagues",)),
            make_residence("Geylang Studio", "Blk 11 Street 74", clean=None, tags=()),
        ]
    )


@pytest.fixture
def tracker(registry: Registry) -> TrackerService:
    return TrackerService(registry)


@pytest.fixture
def populated_tracker(populated_registry: Registry) -> TrackerService:
    return TrackerService(populated_registry)


@pytest.fixture
def residence_factory() -> Any:
    """The :func:`make_residence` builder, for tests that need custom records."""
    return make_residence


@pytest.fixture
def booking_factory() -> Any:
    return make_booking
