"""Deck and deck options operations."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

from ankiconnect.models import Config
from ankiconnect.services.base import ServiceBase


class DeckService(ServiceBase):
    """Operations on decks and the option groups (configs) they use.

    Example:
        >>> config = anki.get_deck_config("Default")
        >>> anki.update_config(config.with_values(maxTaken=90))
    """

    def list_decks(self) -> list[str]:
        return self._invoke("deckNames")

    def create_deck(self, name: str) -> Self:
        """Create a deck; creating an existing deck is a no-op."""
        self._invoke("createDeck", {"deck": name})
        return self

    def move_cards(self, card_ids: Sequence[int], deck: str) -> Self:
        """Move cards to another deck, creating it if needed."""
        self._invoke("changeDeck", {"cards": list(card_ids), "deck": deck})
        return self

    def delete_deck(self, deck: str, cards_too: bool = False) -> Self:
        """Delete a deck.

        Args:
            deck: Deck name
            cards_too: Also delete the deck's cards
        """
        self._invoke("deleteDecks", {"decks": [deck], "cardsToo": cards_too})
        return self

    def get_deck_config(self, deck: str) -> Config:
        return Config(self._invoke("getDeckConfig", {"deck": deck}))

    def set_deck_config(self, deck: str, config_id: int) -> Self:
        """Make a deck use the option group ``config_id``.

        Raises:
            ActionFailedError: If the deck or option group does not exist
        """
        self._invoke(
            "setDeckConfigId",
            {"decks": [deck], "configId": config_id},
            message=f"Failed to set config {config_id} on deck '{deck}'",
        )
        return self

    def update_config(self, config: Config) -> Self:
        """Save an edited option group.

        Raises:
            ActionFailedError: If the option group no longer exists
        """
        self._invoke(
            "saveDeckConfig",
            {"config": config.to_params()},
            message=f"Failed to save config {config.id}",
        )
        return self

    def clone_config(self, config_id: int, name: str) -> int:
        """Copy an option group under a new name and return the new ID."""
        return self._invoke("cloneDeckConfigId", {"name": name, "cloneFrom": config_id})

    def delete_config(self, config_id: int) -> Self:
        self._invoke(
            "removeDeckConfigId",
            {"configId": config_id},
            message=f"Failed to delete config {config_id}",
        )
        return self
