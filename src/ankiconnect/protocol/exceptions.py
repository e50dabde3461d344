"""Protocol layer exceptions.

These exceptions are raised by the protocol client when the bridge
reports an error, answers with a result of the wrong shape, or answers
with something that is not a response envelope at all.
"""

from __future__ import annotations

from typing import Any

from ankiconnect.exceptions import AnkiConnectError


class ProtocolError(AnkiConnectError):
    """Base exception for protocol layer errors.

    Args:
        message: Human-readable error description
        request: The request envelope that was sent
        response: The parsed response envelope (or None)

    Attributes:
        message: Error message
        request: Request envelope as sent on the wire
        response: Parsed response envelope, when one was decoded
    """

    def __init__(
        self,
        message: str,
        request: dict[str, Any] | None = None,
        response: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.request = request or {}
        self.response = response

    @property
    def action(self) -> str | None:
        """Action name of the failed request."""
        return self.request.get("action")


class ApiError(ProtocolError):
    """The bridge answered with a non-null ``error`` string.

    Raised regardless of what ``result`` holds.

    Example:
        >>> raise ApiError(
        ...     {"action": "deckNames", "version": 6},
        ...     {"result": None, "error": "collection is not available"},
        ... )
    """

    def __init__(self, request: dict[str, Any], response: dict[str, Any]) -> None:
        self.error: str = str(response.get("error"))
        super().__init__(
            f"{request.get('action')}: {self.error}",
            request=request,
            response=response,
        )


class UnexpectedResultError(ProtocolError):
    """The bridge reported no error but the result has the wrong shape.

    Example:
        >>> # expected an integer version, got the string "6"
        >>> raise UnexpectedResultError(
        ...     {"action": "version", "version": 6},
        ...     {"result": "6", "error": None},
        ... )
    """

    def __init__(self, request: dict[str, Any], response: dict[str, Any]) -> None:
        self.result: Any = response.get("result")
        result_repr = repr(self.result)
        if len(result_repr) > 200:
            result_repr = result_repr[:200] + "..."
        super().__init__(
            f"Unexpected result for {request.get('action')}: {result_repr}",
            request=request,
            response=response,
        )


class ParseError(ProtocolError):
    """The response body is not a valid response envelope.

    Raised when the body is not JSON, is not an object, or lacks the
    ``result`` and ``error`` members.

    Attributes:
        body: Raw response body
    """

    def __init__(self, message: str, request: dict[str, Any], body: str) -> None:
        super().__init__(message, request=request)
        self.body = body
