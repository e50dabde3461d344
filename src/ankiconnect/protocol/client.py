"""Action protocol client.

This module provides the generic request/response round trip: it wraps
an action and its params in the versioned envelope, sends it through the
transport, decodes the response envelope, turns a reported error into an
:class:`ApiError` and checks the result against a caller-supplied shape
predicate.
"""

from __future__ import annotations

import json
from typing import Any

import structlog
from pydantic import ValidationError

from ankiconnect.protocol.exceptions import ApiError, ParseError, UnexpectedResultError
from ankiconnect.protocol.models import ActionRequest, ActionResponse
from ankiconnect.protocol.validators import Predicate
from ankiconnect.transport.base import Transport
from ankiconnect.transport.http import HttpTransport

logger = structlog.get_logger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8765
DEFAULT_VERSION = 6


class Client:
    """Protocol client bound to one bridge address and protocol version.

    Host, port and version are fixed at construction. The transport may be
    replaced (e.g. by a test double) through the ``transport`` attribute.

    Args:
        host: Bridge host (default: "127.0.0.1")
        port: Bridge port (default: 8765)
        version: Protocol version sent with every request (default: 6)
        transport: Transport to use (default: a new HttpTransport)
        api_key: API key for bridges configured to require one

    Attributes:
        transport: Transport used for every call

    Example:
        >>> client = Client()
        >>> client.call("deckNames", predicate=is_list)
        ['Default']
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        version: int = DEFAULT_VERSION,
        transport: Transport | None = None,
        api_key: str | None = None,
    ) -> None:
        """Initialize the protocol client.

        Raises:
            ValueError: If host is empty, or port/version are out of range
        """
        if not host:
            raise ValueError("host cannot be empty")
        if not 0 < port < 65536:
            raise ValueError(f"Invalid port: {port}")
        if version < 1:
            raise ValueError(f"Invalid protocol version: {version}")

        self._host = host
        self._port = port
        self._version = version
        self._api_key = api_key
        self.transport: Transport = transport if transport is not None else HttpTransport()

    @property
    def host(self) -> str:
        return self._host

    @property
    def port(self) -> int:
        return self._port

    @property
    def version(self) -> int:
        """Protocol version sent with every request."""
        return self._version

    @property
    def url(self) -> str:
        """Bridge URL requests are posted to."""
        return f"http://{self._host}:{self._port}/"

    def call(
        self,
        action: str,
        params: dict[str, Any] | None = None,
        predicate: Predicate | None = None,
    ) -> Any:
        """Invoke a remote action and return its raw result.

        Args:
            action: Remote action name (e.g., "deckNames")
            params: Action parameters, omitted from the envelope when empty
            predicate: Optional result-shape check

        Returns:
            The ``result`` member, as decoded from JSON

        Raises:
            ApiError: The bridge reported an error
            UnexpectedResultError: The result failed ``predicate``
            ParseError: The response body is not a response envelope
            TransportError: Propagated unchanged from the transport
        """
        request = ActionRequest(
            action=action,
            version=self._version,
            params=params,
            key=self._api_key,
        )
        payload = request.to_payload()
        body = request.encode()

        logger.debug("action_request", action=action, version=self._version, bytes=len(body))

        text = self.transport.send("POST", self.url, body)
        response = self._decode(text, payload)
        response_data = response.model_dump()

        if not response.ok:
            logger.warning("action_error", action=action, error=response.error)
            raise ApiError(payload, response_data)

        if predicate is not None and not predicate(response.result):
            logger.warning("unexpected_result", action=action)
            raise UnexpectedResultError(payload, response_data)

        logger.debug("action_result", action=action)
        return response.result

    def _decode(self, text: str, payload: dict[str, Any]) -> ActionResponse:
        """Decode a response body into a validated envelope."""
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise ParseError(
                f"Invalid JSON response for {payload['action']}: {e.msg} at position {e.pos}",
                payload,
                text,
            ) from None

        if not isinstance(data, dict):
            raise ParseError(
                f"Expected JSON object response for {payload['action']}, "
                f"got {type(data).__name__}",
                payload,
                text,
            )

        try:
            return ActionResponse.model_validate(data)
        except ValidationError as e:
            raise ParseError(
                f"Invalid response envelope for {payload['action']}: {e.error_count()} error(s)",
                payload,
                text,
            ) from e

    def close(self) -> None:
        """Close the underlying transport."""
        self.transport.close()

    def __repr__(self) -> str:
        return f"Client(host={self._host!r}, port={self._port}, version={self._version})"
