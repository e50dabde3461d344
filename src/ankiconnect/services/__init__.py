"""Service layer for the AnkiConnect client.

This module turns remote actions into typed domain operations. Services
handle:
- Parameter shaping into the params each action expects
- Result post-processing into value types and ID-keyed mappings
- Translation of ``false``/``null`` results into domain errors

Every per-domain service is a mixin over :class:`ServiceBase`; the
:class:`Anki` façade combines them all.
"""

from __future__ import annotations

from ankiconnect.services.anki import Anki
from ankiconnect.services.base import ServiceBase
from ankiconnect.services.cards import CardService
from ankiconnect.services.collection import CollectionService
from ankiconnect.services.decks import DeckService
from ankiconnect.services.exceptions import (
    ActionFailedError,
    ConstructionError,
    NotFoundError,
    ServiceError,
    ValidationError,
)
from ankiconnect.services.gui import GuiService
from ankiconnect.services.media import MediaService
from ankiconnect.services.models import ModelService
from ankiconnect.services.notes import NoteService
from ankiconnect.services.outcomes import OUTCOMES, Outcome
from ankiconnect.services.reviews import ReviewService

__all__ = [
    # Façade
    "Anki",
    # Services
    "ServiceBase",
    "CollectionService",
    "ModelService",
    "MediaService",
    "DeckService",
    "CardService",
    "ReviewService",
    "GuiService",
    "NoteService",
    # Outcomes
    "Outcome",
    "OUTCOMES",
    # Exceptions
    "ServiceError",
    "ValidationError",
    "NotFoundError",
    "ActionFailedError",
    "ConstructionError",
]
