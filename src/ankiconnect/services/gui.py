"""Operations that drive the application's windows."""

from __future__ import annotations

from typing import Any, Self

from ankiconnect.models import Note
from ankiconnect.services.base import ServiceBase


class GuiService(ServiceBase):
    """Browser, add-cards dialog and reviewer automation.

    These act on whatever the user currently has open, so the show and
    answer operations fail when the reviewer is not active.
    """

    def gui_browse(self, query: str) -> list[int]:
        """Open the browser on a search and return the matched card IDs."""
        return self._invoke("guiBrowse", {"query": query})

    def gui_add_note(self, note: Note) -> int:
        """Open the add-cards dialog prefilled with ``note``.

        Returns:
            ID of the note once the user adds it
        """
        return self._invoke("guiAddCards", {"note": note.to_params()})

    def gui_current_card(self) -> dict[str, Any] | None:
        """Return the card under review, or None outside the reviewer."""
        return self._invoke("guiCurrentCard")

    def gui_show_question(self) -> Self:
        self._invoke("guiShowQuestion", message="Failed to show question")
        return self

    def gui_show_answer(self) -> Self:
        self._invoke("guiShowAnswer", message="Failed to show answer")
        return self

    def gui_answer_card(self, ease: int) -> Self:
        """Answer the current card.

        Args:
            ease: Answer button, 1 (again) to 4 (easy)

        Raises:
            ActionFailedError: If no card is shown or its answer is hidden
        """
        self._invoke(
            "guiAnswerCard",
            {"ease": ease},
            message=f"Failed to answer card with ease {ease}",
        )
        return self

    def gui_exit_anki(self) -> Self:
        self._invoke("guiExitAnki")
        return self
