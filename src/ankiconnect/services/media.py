"""Media folder operations."""

from __future__ import annotations

from typing import Self

from ankiconnect.services.base import ServiceBase


class MediaService(ServiceBase):
    """Store, fetch and delete files in the collection media folder.

    File contents travel base64-encoded.
    """

    def store_media_base64(self, filename: str, data: str) -> Self:
        """Store a file from base64-encoded contents.

        Args:
            filename: Name in the media folder; an existing file is replaced
            data: Base64-encoded contents
        """
        self._invoke("storeMediaFile", {"filename": filename, "data": data})
        return self

    def store_media_url(self, filename: str, url: str) -> Self:
        """Store a file downloaded by the application from ``url``."""
        self._invoke("storeMediaFile", {"filename": filename, "url": url})
        return self

    def retrieve_media(self, filename: str) -> str:
        """Return the base64-encoded contents of a media file.

        Raises:
            NotFoundError: If no such file exists
        """
        return self._invoke(
            "retrieveMediaFile",
            {"filename": filename},
            message=f"Media file not found: {filename}",
            details={"filename": filename},
        )

    def delete_media(self, filename: str) -> Self:
        self._invoke("deleteMediaFile", {"filename": filename})
        return self
