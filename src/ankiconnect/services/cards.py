"""Card operations.

Batch queries send a list of card IDs and get back a list of the same
length and order; results are returned keyed by card ID. A reply of any
other length is an :class:`~ankiconnect.protocol.exceptions.UnexpectedResultError`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Self

from ankiconnect.exceptions import ValidationError
from ankiconnect.protocol.validators import Predicate, is_bool, is_int, list_of
from ankiconnect.services.base import ServiceBase, index_by_id, normalize_interval, zip_ids


class CardService(ServiceBase):
    """Operations on individual cards: scheduling state, lookup and search."""

    def get_ease_factors(self, card_ids: Sequence[int]) -> dict[int, int]:
        """Return the ease factor of each card.

        Args:
            card_ids: Card IDs

        Returns:
            Card ID to ease factor (permille, e.g. 2500)

        Example:
            >>> anki.get_ease_factors([1483959291685, 1483959293217])
            {1483959291685: 4100, 1483959293217: 3900}
        """
        return self._batch("getEaseFactors", card_ids, is_int)

    def get_ease_factor(self, card_id: int) -> int:
        return self.get_ease_factors([card_id])[card_id]

    def set_ease_factors(self, card_ids: Sequence[int], factors: Sequence[int]) -> Self:
        """Set the ease factor of each card.

        Args:
            card_ids: Card IDs
            factors: New ease factors, one per card ID

        Raises:
            ValidationError: If the two sequences differ in length
        """
        ids = list(card_ids)
        factors = list(factors)
        if len(ids) != len(factors):
            raise ValidationError(
                f"Got {len(factors)} ease factors for {len(ids)} cards"
            )
        self._invoke(
            "setEaseFactors",
            {"cards": ids, "easeFactors": factors},
            shape=list_of(is_bool, length=len(ids)),
        )
        return self

    def set_ease_factor(self, card_id: int, factor: int) -> Self:
        return self.set_ease_factors([card_id], [factor])

    def suspend_cards(self, card_ids: Sequence[int]) -> Self:
        """Suspend cards. Already suspended cards are left as they are."""
        self._invoke("suspend", {"cards": list(card_ids)})
        return self

    def unsuspend_cards(self, card_ids: Sequence[int]) -> Self:
        self._invoke("unsuspend", {"cards": list(card_ids)})
        return self

    def are_suspended(self, card_ids: Sequence[int]) -> dict[int, bool]:
        """Return whether each card is suspended."""
        return self._batch("areSuspended", card_ids, is_bool)

    def is_suspended(self, card_id: int) -> bool:
        return self.are_suspended([card_id])[card_id]

    def are_due(self, card_ids: Sequence[int]) -> dict[int, bool]:
        """Return whether each card is due."""
        return self._batch("areDue", card_ids, is_bool)

    def is_due(self, card_id: int) -> bool:
        return self.are_due([card_id])[card_id]

    def get_intervals(self, card_ids: Sequence[int]) -> dict[int, list[int]]:
        """Return the full interval history of each card, in seconds.

        The bridge reports learning steps as negative seconds and review
        intervals as days; both come back here as positive seconds.

        Example:
            >>> anki.get_intervals([1502098034045])
            {1502098034045: [120, 180, 86400, 259200]}
        """
        ids = list(card_ids)
        intervals = self._invoke(
            "getIntervals",
            {"cards": ids, "complete": True},
            shape=list_of(list_of(is_int), length=len(ids)),
        )
        return zip_ids(ids, [[normalize_interval(v) for v in row] for row in intervals])

    def get_card_intervals(self, card_id: int) -> list[int]:
        return self.get_intervals([card_id])[card_id]

    def find_cards(self, query: str) -> list[int]:
        """Return the IDs of cards matching a search query (browser syntax)."""
        return self._invoke("findCards", {"query": query})

    def get_cards(self, card_ids: Sequence[int]) -> dict[int, dict[str, Any]]:
        """Return card details keyed by card ID.

        Raises:
            NotFoundError: If any card does not exist; ``missing`` lists
                the absent IDs
        """
        ids = list(card_ids)
        cards = self._invoke("cardsInfo", {"cards": ids})
        return index_by_id(ids, cards, "cardId", "Cards")

    def get_card(self, card_id: int) -> dict[str, Any]:
        return self.get_cards([card_id])[card_id]

    def _batch(self, action: str, card_ids: Sequence[int], item: Predicate) -> dict[int, Any]:
        ids = list(card_ids)
        values = self._invoke(action, {"cards": ids}, shape=list_of(item, length=len(ids)))
        return zip_ids(ids, values)

