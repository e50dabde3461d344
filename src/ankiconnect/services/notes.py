"""Note and tag operations."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, Self

from ankiconnect.models import Note
from ankiconnect.services.base import ServiceBase, index_by_id


class NoteService(ServiceBase):
    """Add, edit, tag, find and delete notes.

    Example:
        >>> note = Note("Default", "Basic", {"Front": "猫", "Back": "cat"})
        >>> note_id = anki.add_note(note)
        >>> anki.add_tag("animals", [note_id])
    """

    def add_note(self, note: Note) -> int:
        """Add a note and return its ID.

        Raises:
            ActionFailedError: If the bridge refuses the note (e.g., it
                is a duplicate); ``details["note"]`` holds the note
        """
        params = note.to_params()
        return self._invoke(
            "addNote",
            {"note": params},
            message=f"Failed to add note: {json.dumps(params, ensure_ascii=False)}",
            details={"action": "addNote", "note": params},
        )

    def update_note(
        self,
        note_id: int,
        fields: Mapping[str, str],
        audio: Sequence[Mapping[str, Any]] | None = None,
    ) -> Self:
        """Replace field values of an existing note.

        Args:
            note_id: Note ID
            fields: Field name to new value; unnamed fields are kept
            audio: Optional audio attachments, as in :class:`Note`
        """
        note: dict[str, Any] = {"id": note_id, "fields": dict(fields)}
        if audio:
            note["audio"] = [dict(entry) for entry in audio]
        self._invoke("updateNoteFields", {"note": note})
        return self

    def add_tag(self, tag: str, note_ids: Sequence[int]) -> Self:
        self._invoke("addTags", {"notes": list(note_ids), "tags": tag})
        return self

    def remove_tag(self, tag: str, note_ids: Sequence[int]) -> Self:
        self._invoke("removeTags", {"notes": list(note_ids), "tags": tag})
        return self

    def list_tags(self) -> list[str]:
        return self._invoke("getTags")

    def find_notes(self, query: str) -> list[int]:
        """Return the IDs of notes matching a search query."""
        return self._invoke("findNotes", {"query": query})

    def get_notes(self, note_ids: Sequence[int]) -> dict[int, dict[str, Any]]:
        """Return note details keyed by note ID.

        Raises:
            NotFoundError: If any note does not exist
        """
        ids = list(note_ids)
        notes = self._invoke("notesInfo", {"notes": ids})
        return index_by_id(ids, notes, "noteId", "Notes")

    def get_note(self, note_id: int) -> dict[str, Any]:
        return self.get_notes([note_id])[note_id]

    def delete_notes(self, note_ids: Sequence[int]) -> Self:
        """Delete notes together with all their cards."""
        self._invoke("deleteNotes", {"notes": list(note_ids)})
        return self
