"""BaseService: shared foundation for restrack services.

Every service receives the :class:`Registry` at construction time and
reports through :class:`ServiceResult`; services never raise for user
errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from restrack.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from restrack.services.registry import Registry

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes operating on one registry.

    Usage::

        class TrackerService(BaseService):
            def execute(self, line: str) -> ServiceResult:
                ...
                return self._failure(op, "FORMAT", "Unknown command")
    """

    def __init__(self, registry: Registry) -> None:
        self._registry = registry

    @property
    def registry(self) -> Registry:
        return self._registry

    @staticmethod
    def _failure(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        logger.debug("%s failed with %s: %s", op, code, message)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
