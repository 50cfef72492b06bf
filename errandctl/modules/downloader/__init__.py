"""
Downloader Module - Black Box Interface

Purpose: Fetch blobs (errand log bundles) from the director blobstore
Interface: DownloadBlob.download(blob_id, sha1, prefix, destination_dir)
Hidden: Streaming, file naming, checksum verification, partial file cleanup

Can be replaced with a direct blobstore client implementing DownloadBlob.
"""

from .downloader import BlobDownloader
from .interfaces import DownloadBlob, DownloadError

__all__ = ["BlobDownloader", "DownloadBlob", "DownloadError"]
