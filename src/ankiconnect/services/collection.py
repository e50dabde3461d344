"""Profile and collection operations."""

from __future__ import annotations

from typing import Self

from ankiconnect.services.base import ServiceBase


class CollectionService(ServiceBase):
    """Operations on the running application, its profiles and collection.

    Example:
        >>> anki.load_profile("User 1").sync_collection()
    """

    def get_api_version(self) -> int:
        """Return the protocol version the bridge speaks."""
        return self._invoke("version")

    def list_profiles(self) -> list[str]:
        return self._invoke("getProfiles")

    def load_profile(self, name: str) -> Self:
        """Switch to the named profile.

        Raises:
            ActionFailedError: If the profile cannot be loaded
        """
        self._invoke(
            "loadProfile",
            {"name": name},
            message=f"Failed to load profile '{name}'",
        )
        return self

    def sync_collection(self) -> Self:
        """Synchronize the local collection with the sync server."""
        self._invoke("sync")
        return self

    def reload_collection(self) -> Self:
        self._invoke("reloadCollection")
        return self

    def import_package(self, path: str) -> Self:
        """Import an ``.apkg`` file.

        Args:
            path: Package path, relative to the collection media folder or
                absolute, as seen by the application

        Raises:
            ActionFailedError: If the import fails
        """
        self._invoke(
            "importPackage",
            {"path": path},
            message=f"Failed to import package '{path}'",
        )
        return self

    def export_package(self, deck: str, path: str, include_sched: bool = False) -> Self:
        """Export a deck to an ``.apkg`` file.

        Args:
            deck: Deck to export
            path: Destination path, as seen by the application
            include_sched: Whether to include scheduling data

        Raises:
            ActionFailedError: If the export fails
        """
        self._invoke(
            "exportPackage",
            {"deck": deck, "path": path, "includeSched": include_sched},
            message=f"Failed to export deck '{deck}' to '{path}'",
        )
        return self
