"""
Google Cloud Storage bucket implementation.
"""
from typing import List, Optional, Union
import logging

try:
    from google.cloud import storage
except ImportError:
    raise ImportError(
        "google-cloud-storage is required for GCS adapter. "
        "Install with: pip install google-cloud-storage"
    )

from ..base import Content, PrefixedBucket

logger = logging.getLogger(__name__)


class GCSBucket(PrefixedBucket):
    """
    Google Cloud Storage bucket.

    Listing is a plain prefix query with no delimiter, so it returns object
    names at any depth below the folder. The client library follows page
    tokens on its own.

    Configuration required:
        - client: ``google.cloud.storage.Client`` created by the caller
        - identifier: ``"bucket_name"`` or ``"bucket_name/prefix"``
    """

    def __init__(self, client: storage.Client, identifier: str):
        """Initialize GCS bucket."""
        super().__init__(identifier)
        self._bucket = client.bucket(self.root)

    def list(self, folder: Optional[str] = None) -> List[str]:
        """List object names under a folder."""
        prefix = self._list_prefix(folder)
        options = {'prefix': prefix} if prefix else {}

        files = [blob.name for blob in self._bucket.list_blobs(**options)]
        logger.debug(f"Listed {len(files)} objects from GCS with prefix: {prefix}")
        return files

    def has(self, key: str) -> bool:
        """Check if object exists in GCS."""
        return self._bucket.blob(self._resolve(key)).exists()

    def get(self, key: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        """Download object from GCS."""
        gcs_key = self._resolve(key)
        blob = self._bucket.blob(gcs_key)
        data = blob.download_as_bytes()
        logger.debug(f"Downloaded GCS object: gs://{self.root}/{gcs_key}")
        return data.decode(encoding) if encoding else data

    def put(self, key: str, content: Content) -> None:
        """Upload object to GCS."""
        gcs_key = self._resolve(key)
        blob = self._bucket.blob(gcs_key)
        blob.upload_from_string(
            content if isinstance(content, str) else bytes(content)
        )
        logger.info(f"Uploaded object to GCS: gs://{self.root}/{gcs_key}")

    def delete(self, key: str) -> None:
        """Delete object from GCS."""
        gcs_key = self._resolve(key)
        blob = self._bucket.blob(gcs_key)
        blob.delete()
        logger.info(f"Deleted GCS object: gs://{self.root}/{gcs_key}")
