"""ServiceResult and ServiceError: the contract between the tracker and the CLI.

INVARIANT: every line handed to the tracker produces exactly one
ServiceResult.  The CLI formats it once; there is no partial output.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one tracker command.

    Attributes:
        ok: Whether the command succeeded.
        op: The command verb (e.g. ``"add"``), or ``"unknown"`` when the
            verb could not be determined.
        data: ``message`` plus command-specific payload on success.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    error: ServiceError | None = None

    @property
    def message(self) -> str:
        if self.ok:
            return str(self.data.get("message", ""))
        return self.error.message if self.error else "Unknown error"
