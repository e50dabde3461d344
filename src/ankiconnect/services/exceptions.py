"""Service layer exceptions.

Domain-level failures. The bridge signals many of them through a
``false`` or ``null`` result instead of an error string; the service
layer turns those into the exceptions below.
"""

from __future__ import annotations

from typing import Any

from ankiconnect.exceptions import AnkiConnectError, ValidationError

__all__ = [
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ActionFailedError",
    "ConstructionError",
]


class ServiceError(AnkiConnectError):
    """Base exception for service layer errors.

    Attributes:
        message: Human-readable error message
        details: Additional error context

    Example:
        >>> raise ServiceError("Operation failed", details={"action": "sync"})
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotFoundError(ServiceError):
    """Raised when a media file, card or note does not exist.

    ``details["missing"]`` lists the missing IDs for card and note
    lookups.

    Example:
        >>> raise NotFoundError("Cards not found: 123, 456", details={"missing": [123, 456]})
    """

    @property
    def missing(self) -> list[Any]:
        return list(self.details.get("missing", []))


class ActionFailedError(ServiceError):
    """Raised when the bridge answers ``false``/``null`` for an action.

    Example:
        >>> raise ActionFailedError("Failed to load profile 'User 1'")
    """

    pass


class ConstructionError(ServiceError):
    """Raised when the bridge speaks an older protocol than the client.

    No façade is produced.
    """

    pass
