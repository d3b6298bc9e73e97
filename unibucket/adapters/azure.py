"""
Azure Blob Storage bucket implementation.
"""
from typing import List, Optional, Union
import logging

try:
    from azure.storage.blob import BlobServiceClient, BlobType
    from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
except ImportError:
    raise ImportError(
        "azure-storage-blob is required for Azure adapter. "
        "Install with: pip install azure-storage-blob"
    )

from ..base import Content, DEFAULT_ENCODING, PrefixedBucket

logger = logging.getLogger(__name__)


class AzureBucket(PrefixedBucket):
    """
    Azure Blob Storage bucket.

    Configuration required:
        - client: ``BlobServiceClient`` created and authenticated by the caller
        - identifier: ``"container_name"`` or ``"container_name/prefix"``
    """

    def __init__(self, client: BlobServiceClient, identifier: str):
        """Initialize Azure bucket."""
        super().__init__(identifier)
        self._container_client = client.get_container_client(self.root)

    @property
    def container_name(self) -> str:
        return self.root

    def list(self, folder: Optional[str] = None) -> List[str]:
        """List blobs and virtual folders in one level of the container."""
        prefix = self._list_prefix(folder)

        files = []
        for item in self._container_client.walk_blobs(
            name_starts_with=prefix if prefix else None,
            delimiter='/'
        ):
            # BlobPrefix entries keep the delimiter
            files.append(item.name.rstrip('/'))

        logger.debug(f"Listed {len(files)} entries from Azure with prefix: {prefix}")
        return files

    def has(self, key: str) -> bool:
        """Check if blob exists in Azure Blob Storage."""
        blob_client = self._container_client.get_blob_client(self._resolve(key))
        try:
            blob_client.get_blob_properties()
            return True
        except HttpResponseError as e:
            if isinstance(e, ResourceNotFoundError) or e.status_code == 404:
                return False
            raise

    def get(self, key: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        """Download blob from Azure Blob Storage."""
        blob_name = self._resolve(key)
        blob_client = self._container_client.get_blob_client(blob_name)

        download_stream = blob_client.download_blob(encoding=encoding)
        data = download_stream.readall()
        logger.debug(f"Downloaded Azure blob: {self.container_name}/{blob_name}")
        return data

    def put(self, key: str, content: Content) -> None:
        """Upload blob to Azure Blob Storage."""
        blob_name = self._resolve(key)
        blob_client = self._container_client.get_blob_client(blob_name)

        if isinstance(content, str):
            blob_client.upload_blob(
                content,
                length=len(content.encode(DEFAULT_ENCODING)),
                encoding=DEFAULT_ENCODING,
                overwrite=True
            )
        else:
            blob_client.upload_blob(
                bytes(content),
                blob_type=BlobType.BLOCKBLOB,
                overwrite=True
            )

        logger.info(f"Uploaded blob to Azure: {self.container_name}/{blob_name}")

    def delete(self, key: str) -> None:
        """Delete blob from Azure Blob Storage."""
        blob_name = self._resolve(key)
        blob_client = self._container_client.get_blob_client(blob_name)
        blob_client.delete_blob()
        logger.info(f"Deleted Azure blob: {self.container_name}/{blob_name}")
