"""Transport layer for the AnkiConnect client.

This module moves encoded request bodies over HTTP with no knowledge of
the action protocol or the flashcard domain. It is responsible for:
- The pluggable ``Transport`` boundary
- The default ``requests``-based implementation
- Connection pooling
- Network error translation
"""

from ankiconnect.transport.base import Transport
from ankiconnect.transport.exceptions import (
    HttpError,
    NetworkError,
    TimeoutError,
    TransportError,
)
from ankiconnect.transport.http import HttpTransport

__all__ = [
    "Transport",
    "HttpTransport",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "HttpError",
]
