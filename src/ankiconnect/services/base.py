"""Shared plumbing for the façade services.

Every service method funnels through :meth:`ServiceBase._invoke`, which
looks the action up in :data:`~ankiconnect.services.outcomes.OUTCOMES`,
performs the round trip and maps failure results to service exceptions.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import structlog

from ankiconnect.protocol.client import Client
from ankiconnect.protocol.validators import Predicate
from ankiconnect.services.exceptions import NotFoundError, ServiceError
from ankiconnect.services.outcomes import OUTCOMES

logger = structlog.get_logger(__name__)

SECONDS_PER_DAY = 86400


def zip_ids(ids: Sequence[int], values: Sequence[Any]) -> dict[int, Any]:
    """Pair each requested ID with the value at the same position."""
    return dict(zip(ids, values))


def normalize_interval(value: int) -> int:
    """Convert a raw interval to seconds.

    Negative values are already seconds (learning steps); non-negative
    values are whole days.

    Example:
        >>> normalize_interval(-120), normalize_interval(3)
        (120, 259200)
    """
    if value < 0:
        return -value
    return value * SECONDS_PER_DAY


def index_by_id(
    ids: Iterable[int],
    records: Iterable[dict[str, Any]],
    key: str,
    label: str,
) -> dict[int, dict[str, Any]]:
    """Key lookup records by their embedded ID and check none is missing.

    Args:
        ids: IDs that were requested
        records: Objects returned by the bridge
        key: Member holding the ID (e.g., "cardId")
        label: Plural noun used in the error message (e.g., "Cards")

    Returns:
        Requested ID to record

    Raises:
        NotFoundError: If any requested ID has no record; ``missing`` lists
            them in request order without duplicates
    """
    found: dict[int, dict[str, Any]] = {}
    for record in records:
        record_id = record.get(key)
        if isinstance(record_id, int) and not isinstance(record_id, bool):
            found[record_id] = record

    missing = [i for i in dict.fromkeys(ids) if i not in found]
    if missing:
        raise NotFoundError(
            f"{label} not found: {', '.join(str(i) for i in missing)}",
            details={"missing": missing},
        )
    return found


class ServiceBase:
    """Base class holding the protocol client shared by all services.

    Args:
        client: Protocol client used for every call
    """

    def __init__(self, client: Client) -> None:
        self._client = client

    @property
    def client(self) -> Client:
        """Protocol client this façade talks through."""
        return self._client

    def _invoke(
        self,
        action: str,
        params: dict[str, Any] | None = None,
        *,
        shape: Predicate | None = None,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> Any:
        """Call an action and apply its outcome rule.

        Args:
            action: Remote action name
            params: Action parameters
            shape: Overrides the table's shape (e.g., to pin a batch length)
            message: Failure message (default: "<action> failed")
            details: Failure details (default: action and params)

        Returns:
            The raw result, known not to be a failure value

        Raises:
            ActionFailedError: The result signals a failed action
            NotFoundError: The result signals a missing resource
        """
        outcome = OUTCOMES[action]
        result = self._client.call(action, params, shape or outcome.shape)
        if details is None:
            details = {"action": action, "params": params}
        try:
            outcome.check(result, message or f"{action} failed", details)
        except ServiceError as e:
            logger.warning("action_failed", action=action, error=type(e).__name__)
            raise
        return result
