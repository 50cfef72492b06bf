"""
Blob downloader backed by the director resources endpoint.

Files are written as <prefix>-<timestamp>.tgz and removed again if the
transfer fails or the SHA-1 does not match.
"""

import hashlib
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Optional
from urllib.parse import quote

import httpx

from errandctl.config.provider import DirectorConfig
from errandctl.modules.director.client import create_http_client
from errandctl.modules.ui.interfaces import UI

from .interfaces import DownloadError

logger = logging.getLogger("errandctl.downloader")

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S-%f"


class BlobDownloader:
    """Downloads blobs through the director and verifies them."""

    def __init__(
        self,
        config: DirectorConfig,
        ui: UI,
        http_client: Optional[httpx.Client] = None,
    ):
        self.ui = ui
        self._owns_client = http_client is None
        self.client = http_client or create_http_client(config)

    def __enter__(self) -> "BlobDownloader":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def build_path(self, prefix: str, destination_dir: str) -> Path:
        timestamp = datetime.now(UTC).strftime(TIMESTAMP_FORMAT)
        return Path(destination_dir) / f"{prefix}-{timestamp}.tgz"

    def download(self, blob_id: str, sha1: str, prefix: str, destination_dir: str) -> Path:
        """
        Stream a blob to disk and verify it.

        Args:
            blob_id: Blobstore ID of the artifact
            sha1: Expected SHA-1 (hex)
            prefix: File name prefix
            destination_dir: Existing directory to write into

        Returns:
            Path of the downloaded file
        """
        if not Path(destination_dir).is_dir():
            raise DownloadError(f"Destination '{destination_dir}' is not a directory")

        path = self.build_path(prefix, destination_dir)
        self.ui.say(f"Downloading resource '{blob_id}' to '{path}'...")
        logger.info(f"Downloading blob {blob_id} to {path}")

        try:
            actual_sha1 = self._stream_to_file(blob_id, path)
        except DownloadError:
            path.unlink(missing_ok=True)
            raise
        except httpx.HTTPError as e:
            path.unlink(missing_ok=True)
            raise DownloadError(f"Downloading resource '{blob_id}' failed: {e}") from e
        except OSError as e:
            path.unlink(missing_ok=True)
            raise DownloadError(f"Writing resource '{blob_id}' to '{path}' failed: {e}") from e
        except BaseException:
            # Interrupted mid-stream; a truncated bundle must not be left behind
            path.unlink(missing_ok=True)
            raise

        if actual_sha1 != sha1.lower():
            path.unlink(missing_ok=True)
            raise DownloadError(
                f"Expected resource '{blob_id}' to have SHA-1 '{sha1}' but was '{actual_sha1}'"
            )

        logger.info(f"Blob {blob_id} verified and saved to {path}")
        return path

    def _stream_to_file(self, blob_id: str, path: Path) -> str:
        digest = hashlib.sha1()
        url = f"/resources/{quote(blob_id, safe='')}"

        with self.client.stream("GET", url, follow_redirects=True) as response:
            if response.status_code >= 400:
                response.read()
                raise DownloadError(
                    f"Director responded with {response.status_code} to resource "
                    f"'{blob_id}': {response.text.strip()}"
                )

            with open(path, "wb") as f:
                for chunk in response.iter_bytes():
                    digest.update(chunk)
                    f.write(chunk)

        return digest.hexdigest()
