"""Prefix definitions shared by the command parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Prefix:
    """Literal marker that starts a field value, e.g. ``n/``."""

    token: str

    def __str__(self) -> str:
        return self.token


PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_BOOKING = Prefix("b/")
PREFIX_CLEAN_STATUS = Prefix("clean/")
PREFIX_TAG = Prefix("t/")
