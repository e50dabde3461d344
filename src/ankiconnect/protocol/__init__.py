"""Protocol layer for the AnkiConnect client.

This module handles the versioned action envelope with no knowledge of
HTTP or of the flashcard domain. It is responsible for:
- Request envelope construction
- Response envelope decoding and validation
- Error classification (reported error vs. unexpected result)
- Result-shape predicates
"""

from ankiconnect.protocol.client import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_VERSION,
    Client,
)
from ankiconnect.protocol.exceptions import (
    ApiError,
    ParseError,
    ProtocolError,
    UnexpectedResultError,
)
from ankiconnect.protocol.models import ActionRequest, ActionResponse

__all__ = [
    # Models
    "ActionRequest",
    "ActionResponse",
    # Exceptions
    "ProtocolError",
    "ApiError",
    "UnexpectedResultError",
    "ParseError",
    # Client
    "Client",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_VERSION",
]
