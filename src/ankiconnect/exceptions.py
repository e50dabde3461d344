"""Root exceptions for the AnkiConnect client.

Every layer (transport, protocol, services) derives its own base
exception from :class:`AnkiConnectError`, so callers that do not care
about the layer can catch a single type.
"""

from __future__ import annotations


class AnkiConnectError(Exception):
    """Base exception for all AnkiConnect client errors."""

    pass


class ValidationError(AnkiConnectError):
    """Invalid local input, detected before any request is sent.

    Example:
        >>> raise ValidationError("Model templates must only contain Template instances")
    """

    pass
