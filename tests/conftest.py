"""Root-level pytest configuration for all tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from ankiconnect.container import reset_container
from ankiconnect.protocol.client import Client
from ankiconnect.services.anki import Anki
from fakes import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def client(transport: FakeTransport) -> Client:
    return Client(transport=transport)


@pytest.fixture
def anki(client: Client, transport: FakeTransport) -> Anki:
    """Façade whose construction-time version check already succeeded."""
    transport.queue_result(6)
    return Anki(client)


@pytest.fixture(autouse=True)
def clean_container() -> Iterator[None]:
    """Reset container caches and overrides after every test."""
    yield
    reset_container()
