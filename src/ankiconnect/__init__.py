"""Typed client for the AnkiConnect bridge.

Example:
    >>> from ankiconnect import Anki, Note
    >>> with Anki.create() as anki:
    ...     anki.add_note(Note("Default", "Basic", {"Front": "猫", "Back": "cat"}))
"""

from __future__ import annotations

from ankiconnect.exceptions import AnkiConnectError, ValidationError
from ankiconnect.services import (
    ActionFailedError,
    Anki,
    ConstructionError,
    NotFoundError,
    ServiceError,
)
from ankiconnect.models import Config, Model, Note, Review, Template
from ankiconnect.protocol import (
    ApiError,
    Client,
    ParseError,
    ProtocolError,
    UnexpectedResultError,
)
from ankiconnect.settings import ClientSettings
from ankiconnect.transport import (
    HttpError,
    HttpTransport,
    NetworkError,
    TimeoutError,
    Transport,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "Anki",
    "Client",
    "ClientSettings",
    # Value types
    "Config",
    "Model",
    "Note",
    "Review",
    "Template",
    # Transport
    "Transport",
    "HttpTransport",
    # Exceptions
    "AnkiConnectError",
    "ValidationError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "HttpError",
    "ProtocolError",
    "ApiError",
    "UnexpectedResultError",
    "ParseError",
    "ServiceError",
    "NotFoundError",
    "ActionFailedError",
    "ConstructionError",
]
