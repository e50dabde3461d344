"""The Anki façade.

One object exposing every remote action as a typed method. It is
assembled from the per-domain services and checks at construction that
the bridge speaks at least the protocol version the client sends.
"""

from __future__ import annotations

from types import TracebackType
from typing import Self

import structlog

from ankiconnect.protocol.client import DEFAULT_HOST, DEFAULT_PORT, DEFAULT_VERSION, Client
from ankiconnect.services.cards import CardService
from ankiconnect.services.collection import CollectionService
from ankiconnect.services.decks import DeckService
from ankiconnect.services.exceptions import ConstructionError
from ankiconnect.services.gui import GuiService
from ankiconnect.services.media import MediaService
from ankiconnect.services.models import ModelService
from ankiconnect.services.notes import NoteService
from ankiconnect.services.reviews import ReviewService
from ankiconnect.transport.base import Transport

logger = structlog.get_logger(__name__)


class Anki(
    CollectionService,
    ModelService,
    MediaService,
    DeckService,
    CardService,
    ReviewService,
    GuiService,
    NoteService,
):
    """Typed façade over the AnkiConnect action protocol.

    Construction performs one ``version`` round trip; a bridge reporting
    an older protocol than ``client.version`` is rejected.

    Args:
        client: Protocol client to send every action through

    Raises:
        ConstructionError: If the bridge's protocol version is older than
            the client's

    Example:
        >>> with Anki.create() as anki:
        ...     anki.create_deck("Japanese").list_decks()
        ['Default', 'Japanese']
    """

    def __init__(self, client: Client) -> None:
        super().__init__(client)

        api_version = self.get_api_version()
        logger.info(
            "version_check",
            client_version=client.version,
            api_version=api_version,
        )
        if client.version > api_version:
            raise ConstructionError(
                f"Unsupported AnkiConnect version {api_version}, "
                f"client requires at least {client.version}",
                details={"client_version": client.version, "api_version": api_version},
            )

    @classmethod
    def create(
        cls,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        version: int = DEFAULT_VERSION,
        transport: Transport | None = None,
    ) -> Anki:
        """Build a client for the given address and wrap it.

        Args:
            host: Bridge host
            port: Bridge port
            version: Protocol version to speak
            transport: Transport to use (default: a new HttpTransport)
        """
        return cls(Client(host, port, version, transport=transport))

    def close(self) -> None:
        """Close the client's transport."""
        self._client.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"Anki({self._client!r})"
