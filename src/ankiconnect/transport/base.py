"""Transport boundary.

A transport moves one request body to the bridge and hands back the raw
response body. It does not build envelopes, parse JSON or interpret
results; that is the protocol layer's job.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class Transport(ABC):
    """Abstract base class for transports.

    Implementations must raise a :class:`~ankiconnect.transport.TransportError`
    (or any exception of their own) for network failures and malformed
    HTTP responses. Whatever they raise reaches the caller unchanged.

    Example:
        >>> class StaticTransport(Transport):
        ...     def send(self, method, url, body):
        ...         return '{"result": 6, "error": null}'
    """

    @abstractmethod
    def send(self, method: str, url: str, body: bytes) -> str:
        """Send a request body and return the response body as text.

        Args:
            method: HTTP method (the protocol only uses "POST")
            url: Absolute URL of the bridge
            body: Encoded JSON request body

        Returns:
            Response body decoded as text
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release any held resources. No-op by default."""

    def __enter__(self) -> Transport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
