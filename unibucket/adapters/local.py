"""
Local filesystem bucket implementation.
"""
from pathlib import Path
from typing import List, Optional, Union
import logging
import os

from ..base import (
    Bucket,
    Content,
    DEFAULT_ENCODING,
    EmptyKeyError,
)

logger = logging.getLogger(__name__)


class LocalBucket(Bucket):
    """
    Local filesystem bucket.

    Keys map to files below ``base_path``. Unlike the cloud buckets, ``list``
    returns the directory entries directly inside a folder rather than
    running a prefix query.

    Paths are plain strings joined as ``base_path + '/' + key`` and handed to
    the OS as is, so trailing slashes and ``.`` segments in a key keep their
    filesystem meaning.

    Configuration required:
        - base_path: Base directory path. A deeper directory acts as a
          sub-bucket, so no prefix is split off.
    """

    def __init__(self, base_path: Union[str, Path]):
        """Initialize local bucket."""
        self._base_path = os.fspath(base_path)
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate local bucket configuration."""
        if not self._base_path:
            raise ValueError("base_path cannot be empty")

    @property
    def base_path(self) -> str:
        return self._base_path

    def path(self, key: str) -> str:
        """Get filesystem path for a key."""
        return f"{self._base_path}/{key}" if key else self._base_path

    def list(self, folder: Optional[str] = None) -> List[str]:
        """List directory entries inside a folder."""
        entries = sorted(os.listdir(self.path(folder or '')))
        logger.debug(f"Listed {len(entries)} entries from local folder: {folder or '.'}")
        return entries

    def has(self, key: str) -> bool:
        """Check if a file exists in local storage."""
        try:
            os.stat(self.path(key))
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True

    def get(self, key: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        """Read a file from local storage."""
        with open(self.path(key), 'rb') as f:
            data = f.read()
        logger.debug(f"Read file: {key}")
        return data.decode(encoding) if encoding else data

    def put(self, key: str, content: Content) -> None:
        """Write a file to local storage."""
        if key == '':
            raise EmptyKeyError()

        full_path = self.path(key)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)

        if isinstance(content, str):
            content = content.encode(DEFAULT_ENCODING)
        with open(full_path, 'wb') as f:
            f.write(content)

        logger.info(f"Wrote file to local storage: {full_path}")

    def delete(self, key: str) -> None:
        """Delete a file from local storage."""
        if key == '':
            raise EmptyKeyError()

        full_path = self.path(key)
        os.unlink(full_path)
        logger.info(f"Deleted file: {full_path}")

    def _location(self) -> str:
        return self._base_path
