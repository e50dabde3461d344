"""Dependency injection container for the AnkiConnect client.

Wires settings into a transport, the transport into a protocol client,
and the client into the façade.

Design principles:
- Singleton instances for infrastructure (settings, transport, client)
- On-demand creation for the façade (it performs a version round trip)
- Easy to mock for testing

Factory functions:
- get_settings(): Load and cache settings
- get_transport(): Create and cache HTTP transport
- get_client(): Create and cache protocol client
- get_anki(): Create the façade (no caching)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from ankiconnect.protocol.client import Client
from ankiconnect.services.anki import Anki
from ankiconnect.settings import ClientSettings
from ankiconnect.transport.base import Transport
from ankiconnect.transport.http import HttpTransport

# Global container state for testing/mocking
_overrides: dict[str, Any] = {}


def set_override(key: str, value: Any) -> None:
    """Override a container dependency for testing.

    Args:
        key: Dependency key ("settings", "transport", "client" or "anki")
        value: Mock or test implementation

    Example:
        >>> set_override("transport", fake_transport)
        >>> anki = get_anki()  # Talks through fake_transport
        >>> reset_container()
    """
    _overrides[key] = value


def clear_overrides() -> None:
    """Clear all dependency overrides."""
    _overrides.clear()


def _override(key: str, expected: type) -> Any:
    override = _overrides[key]
    if not isinstance(override, expected):
        raise TypeError(f"Override for '{key}' must be an instance of {expected.__name__}")
    return override


@lru_cache(maxsize=1)
def get_settings() -> ClientSettings:
    """Load and cache settings.

    Returns:
        Settings resolved by :meth:`ClientSettings.load`
    """
    if "settings" in _overrides:
        return _override("settings", ClientSettings)

    return ClientSettings.load()


@lru_cache(maxsize=1)
def get_transport() -> Transport:
    """Create and cache the transport.

    Cached so that every client shares one connection pool.

    Returns:
        HTTP transport using the configured timeout
    """
    if "transport" in _overrides:
        return _override("transport", Transport)

    settings = get_settings()
    return HttpTransport(timeout=settings.timeout)


@lru_cache(maxsize=1)
def get_client() -> Client:
    """Create and cache the protocol client.

    Returns:
        Client bound to the configured address, version and API key
    """
    if "client" in _overrides:
        return _override("client", Client)

    settings = get_settings()
    return Client(
        host=settings.host,
        port=settings.port,
        version=settings.version,
        transport=get_transport(),
        api_key=settings.api_key,
    )


def get_anki() -> Anki:
    """Create the façade.

    Not cached: every call checks the bridge version again.

    Raises:
        ConstructionError: If the bridge speaks an older protocol version
    """
    if "anki" in _overrides:
        return _override("anki", Anki)

    return Anki(get_client())


def reset_container() -> None:
    """Reset container state for testing.

    Clears all caches and overrides.
    """
    clear_overrides()
    get_settings.cache_clear()
    get_transport.cache_clear()
    get_client.cache_clear()
