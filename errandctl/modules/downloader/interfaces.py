"""Blob download interfaces following Black Box Design principles."""
from typing import Protocol


class DownloadError(Exception):
    """Raised when a blob cannot be downloaded or fails verification."""


class DownloadBlob(Protocol):
    """Protocol for blob downloads - allows swappable implementations."""

    def download(self, blob_id: str, sha1: str, prefix: str, destination_dir: str) -> None:
        """
        Download a blob into a directory and verify its checksum.

        Args:
            blob_id: Blobstore ID of the artifact
            sha1: Expected SHA-1 of the artifact
            prefix: File name prefix (usually the errand name)
            destination_dir: Existing directory to write into

        Raises:
            DownloadError: on transport failure or checksum mismatch
        """
        ...
