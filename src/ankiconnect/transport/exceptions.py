"""Errors raised while carrying an action body to the bridge and back.

Everything here happens before an AnkiConnect envelope exists: the
socket, the HTTP exchange and the response bytes. The protocol client
lets these through untouched, so callers can tell "Anki is unreachable"
apart from "Anki answered with an error".
"""

from __future__ import annotations

from ankiconnect.exceptions import AnkiConnectError


class TransportError(AnkiConnectError):
    """The request never produced a usable response body.

    Also raised directly for a response that is not UTF-8 text and for
    request failures that are neither a timeout nor a refused connection.

    Attributes:
        message: Error message
        status_code: HTTP status the bridge answered with, when it answered
        cause: The ``requests`` exception this was raised from, if any
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.cause = cause

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (status: {self.status_code})"
        return self.message


class NetworkError(TransportError):
    """No connection to the bridge.

    Usually Anki is not running, or the configured host and port point
    somewhere else.
    """


class TimeoutError(TransportError):
    """The bridge accepted the connection but did not answer in time.

    ``sync`` and ``importPackage`` on a large collection are the usual
    culprits; raise ``timeout`` in the settings for those.
    """


class HttpError(TransportError):
    """The bridge answered with a 4xx or 5xx status.

    AnkiConnect reports action failures inside a 200 envelope, so this
    points at something in front of it, such as a proxy or another
    service listening on the port.
    """
