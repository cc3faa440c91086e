"""Pydantic configuration sections with code-baked defaults.

Sparse TOML contract: defaults live here, restrack.toml only holds overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class TrackerConfig(BaseModel):
    """[tracker] section."""

    model_config = {"frozen": True}

    name: str = "Residence Tracker"
    sample_data: bool = False


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    show_bookings: bool = True
