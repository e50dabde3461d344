"""Decision table for action results.

For every remote action this table records the result shape the bridge
must answer with and, where the bridge reports a domain failure through
the result value itself (``false`` or ``null``), which exception that
value maps to. Keeping the mapping here means every
"false means failure" rule can be read and tested in one place.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ankiconnect.protocol.validators import (
    Predicate,
    dict_of,
    either,
    has_keys,
    is_bool,
    is_dict,
    is_false,
    is_int,
    is_null,
    is_numeric,
    is_str,
    list_of,
)
from ankiconnect.services.exceptions import ActionFailedError, NotFoundError, ServiceError


def _is_missing_id(value: Any) -> bool:
    # null, or an id of 0
    return not value


@dataclass(frozen=True)
class Outcome:
    """Expected result of one action.

    Attributes:
        shape: Predicate the raw result must satisfy
        failure: Exception raised when ``failed`` matches (None = never)
        failed: Predicate selecting the failure values
    """

    shape: Predicate
    failure: type[ServiceError] | None = None
    failed: Predicate = is_false

    def check(self, result: Any, message: str, details: dict[str, Any]) -> None:
        """Raise the mapped failure if ``result`` is a failure value."""
        if self.failure is not None and self.failed(result):
            raise self.failure(message, details=details)


_TEMPLATE = has_keys(Front=is_str, Back=is_str)

OUTCOMES: dict[str, Outcome] = {
    # collection
    "version": Outcome(is_int),
    "getProfiles": Outcome(list_of(is_str)),
    "loadProfile": Outcome(is_bool, ActionFailedError),
    "sync": Outcome(is_null),
    "reloadCollection": Outcome(is_null),
    "importPackage": Outcome(is_bool, ActionFailedError),
    "exportPackage": Outcome(is_bool, ActionFailedError),
    # models
    "modelNames": Outcome(list_of(is_str)),
    "modelFieldNames": Outcome(list_of(is_str)),
    "modelStyling": Outcome(has_keys(css=is_str)),
    "modelTemplates": Outcome(dict_of(_TEMPLATE)),
    "updateModelStyling": Outcome(is_null),
    "updateModelTemplates": Outcome(is_null),
    "createModel": Outcome(has_keys(id=is_numeric)),
    # media
    "storeMediaFile": Outcome(is_null),
    "retrieveMediaFile": Outcome(either(is_str, is_false), NotFoundError),
    "deleteMediaFile": Outcome(is_null),
    # decks
    "deckNames": Outcome(list_of(is_str)),
    "createDeck": Outcome(is_numeric),
    "changeDeck": Outcome(is_null),
    "deleteDecks": Outcome(is_null),
    "getDeckConfig": Outcome(has_keys(id=is_int)),
    "setDeckConfigId": Outcome(is_bool, ActionFailedError),
    "saveDeckConfig": Outcome(is_bool, ActionFailedError),
    "cloneDeckConfigId": Outcome(is_int),
    "removeDeckConfigId": Outcome(is_bool, ActionFailedError),
    # cards
    "getEaseFactors": Outcome(list_of(is_int)),
    "setEaseFactors": Outcome(list_of(is_bool)),
    "suspend": Outcome(is_bool),
    "unsuspend": Outcome(is_bool),
    "areSuspended": Outcome(list_of(is_bool)),
    "areDue": Outcome(list_of(is_bool)),
    "getIntervals": Outcome(list_of(list_of(is_int))),
    "findCards": Outcome(list_of(is_int)),
    "cardsInfo": Outcome(list_of(is_dict)),
    # reviews
    "getNumCardsReviewedToday": Outcome(is_int),
    "cardReviews": Outcome(list_of(list_of(is_int, length=9))),
    "getLatestReviewID": Outcome(is_int),
    "insertReviews": Outcome(is_null),
    # gui
    "guiBrowse": Outcome(list_of(is_int)),
    "guiAddCards": Outcome(is_int),
    "guiCurrentCard": Outcome(either(is_dict, is_null)),
    "guiShowQuestion": Outcome(is_bool, ActionFailedError),
    "guiShowAnswer": Outcome(is_bool, ActionFailedError),
    "guiAnswerCard": Outcome(is_bool, ActionFailedError),
    "guiExitAnki": Outcome(is_null),
    # notes
    "addNote": Outcome(either(is_int, is_null), ActionFailedError, _is_missing_id),
    "updateNoteFields": Outcome(is_null),
    "addTags": Outcome(is_null),
    "removeTags": Outcome(is_null),
    "getTags": Outcome(list_of(is_str)),
    "findNotes": Outcome(list_of(is_int)),
    "notesInfo": Outcome(list_of(is_dict)),
    "deleteNotes": Outcome(is_null),
}
