"""Tests for ServiceResult and ServiceError."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from restrack.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_message(self) -> None:
        result = ServiceResult(ok=True, op="list", data={"message": "Listed all residences"})
        assert result.message == "Listed all residences"
        assert result.error is None

    def test_success_without_message(self) -> None:
        assert ServiceResult(ok=True, op="list").message == ""

    def test_failure_message(self) -> None:
        result = ServiceResult(
            ok=False,
            op="delete",
            error=ServiceError(code="INVALID_RESIDENCE_INDEX", message="bad index"),
        )
        assert result.message == "bad index"
        assert result.error is not None
        assert result.error.detail == {}

    def test_failure_without_error(self) -> None:
        assert ServiceResult(ok=False, op="x").message == "Unknown error"

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="list")
        with pytest.raises(ValidationError):
            result.op = "add"  # type: ignore[misc]

    def test_json_round_trip(self) -> None:
        result = ServiceResult(
            ok=False,
            op="add",
            error=ServiceError(code="VALIDATION", message="m", detail={"field": "name"}),
        )
        assert ServiceResult.model_validate_json(result.model_dump_json()) == result
