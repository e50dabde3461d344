"""HTTP transport layer implementation.

This module provides the default transport: a pooled ``requests`` session
that posts the encoded envelope and returns the body text. It has NO
knowledge of the action protocol or of the flashcard domain.
"""

from __future__ import annotations

from typing import Any

import requests
import structlog
from requests.adapters import HTTPAdapter

from ankiconnect.transport.base import Transport
from ankiconnect.transport.exceptions import (
    HttpError,
    NetworkError,
    TimeoutError,
    TransportError,
)

logger = structlog.get_logger(__name__)


class HttpTransport(Transport):
    """HTTP transport for talking to the local bridge.

    Features:
        - Connection pooling through a shared ``requests.Session``
        - Timeout handling
        - Network error translation

    Requests are never retried: a failed action surfaces immediately,
    because most bridge actions are not idempotent.

    Args:
        timeout: Request timeout in seconds (default: 30)
        headers: Extra HTTP headers sent with every request

    Attributes:
        timeout: Request timeout in seconds
        headers: Headers sent with every request
        session: Configured requests session

    Example:
        >>> transport = HttpTransport(timeout=10)
        >>> transport.send("POST", "http://127.0.0.1:8765/", b'{"action":"version","version":6}')
        '{"result": 6, "error": null}'
    """

    def __init__(
        self,
        timeout: float = 30,
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize HTTP transport.

        Args:
            timeout: Request timeout in seconds
            headers: Extra HTTP headers

        Raises:
            ValueError: If timeout is not positive
        """
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.timeout = timeout
        self.headers = {"Content-Type": "application/json"}
        if headers:
            self.headers.update(headers)
        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create a requests session with a pooled adapter and no retries."""
        session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=0,
            pool_connections=1,
            pool_maxsize=4,
        )

        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def send(self, method: str, url: str, body: bytes) -> str:
        """Send an HTTP request and return the response body.

        Args:
            method: HTTP method (e.g., "POST")
            url: Absolute URL of the bridge
            body: Encoded JSON request body

        Returns:
            Response body decoded as UTF-8 text

        Raises:
            NetworkError: If connection fails
            TimeoutError: If request times out
            HttpError: If server returns error status code
            TransportError: For other transport-level errors, including
                a body that is not valid UTF-8
        """
        logger.debug("http_request", method=method, url=url, bytes=len(body))

        try:
            response = self.session.request(
                method,
                url,
                data=body,
                headers=self.headers,
                timeout=self.timeout,
            )

        except requests.exceptions.Timeout as e:
            raise TimeoutError(
                message=f"Request timed out after {self.timeout}s",
                cause=e,
            )

        except requests.exceptions.ConnectionError as e:
            raise NetworkError(
                message=f"Connection failed: {str(e)}",
                cause=e,
            )

        except requests.exceptions.RequestException as e:
            raise TransportError(
                message=f"Transport error: {str(e)}",
                cause=e,
            )

        logger.debug(
            "http_response",
            url=url,
            status=response.status_code,
            bytes=len(response.content),
        )

        if response.status_code >= 400:
            raise HttpError(
                message=f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            return response.content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise TransportError(
                message="Response body is not valid UTF-8",
                status_code=response.status_code,
                cause=e,
            )

    def close(self) -> None:
        """Close the HTTP session and release pooled connections."""
        self.session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
