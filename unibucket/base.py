"""
Base bucket interface for unibucket package.

This module defines the abstract base class that all bucket adapters must implement.
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, Union


DEFAULT_ENCODING = 'utf-8'

Content = Union[str, bytes]


class StorageError(Exception):
    """Base exception for unibucket errors."""
    pass


class EmptyKeyError(StorageError, ValueError):
    """Raised when a mutating operation is given an empty key."""

    def __init__(self, message: str = 'key is empty'):
        super().__init__(message)


def parse_identifier(identifier: str) -> Tuple[str, str]:
    """
    Split a bucket identifier into its root and key prefix.

    The identifier is ``"root"`` or ``"root/sub/path"``. The prefix always ends
    with exactly one ``/``, or is empty when no sub-path is given.

    Example:
        >>> parse_identifier('my-bucket/sub')
        ('my-bucket', 'sub/')
    """
    root, _, sub_path = identifier.partition('/')
    sub_path = sub_path.rstrip('/')
    prefix = f"{sub_path}/" if sub_path else ''
    return root, prefix


class Bucket(ABC):
    """
    Abstract base class for buckets.

    All concrete buckets (local, S3, GCS, Azure) implement this interface so
    callers can read and write keys without knowing the backend. Backend
    errors are never wrapped: a missing object on ``get`` or ``delete``
    raises whatever the underlying SDK raises.
    """

    @abstractmethod
    def list(self, folder: Optional[str] = None) -> List[str]:
        """
        List the entries directly below a folder.

        Args:
            folder: Folder to list, relative to the bucket. Lists the bucket
                root when omitted.

        Returns:
            Key strings as reported by the backend.
        """
        pass

    @abstractmethod
    def has(self, key: str) -> bool:
        """
        Check if an object exists.

        Args:
            key: Key of the object.

        Returns:
            True if the object exists, False if the backend reports it missing.
            Any other backend failure is raised.
        """
        pass

    @abstractmethod
    def get(self, key: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        """
        Fetch the full content of an object.

        Args:
            key: Key of the object.
            encoding: Text encoding to decode with. Raw bytes are returned
                when omitted.

        Returns:
            Object content as bytes, or as str if an encoding was given.
        """
        pass

    @abstractmethod
    def put(self, key: str, content: Content) -> None:
        """
        Write an object, replacing any existing content.

        Args:
            key: Key of the object.
            content: Text (stored utf-8 encoded) or bytes (stored as is).
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """
        Delete an object.

        Args:
            key: Key of the object.
        """
        pass

    def get_bytes(self, key: str) -> bytes:
        """Fetch the raw content of an object."""
        return self.get(key)

    def get_text(self, key: str, encoding: str = DEFAULT_ENCODING) -> str:
        """Fetch the content of an object decoded as text."""
        return self.get(key, encoding)

    def _location(self) -> str:
        return ''

    def __repr__(self) -> str:
        """String representation without exposing the client."""
        return f"<{self.__class__.__name__} location={self._location()!r}>"


class PrefixedBucket(Bucket):
    """
    Base class for buckets addressed by a ``"root/prefix"`` identifier.

    Every key is resolved against the prefix by plain concatenation, so a
    bucket built from ``"data/sub"`` reads ``sub/file.txt`` when asked for
    ``file.txt``.
    """

    def __init__(self, identifier: str):
        """
        Initialize prefixed bucket.

        Args:
            identifier: Backend root (bucket or container name), optionally
                followed by ``/`` and a sub-path used as key prefix.

        Raises:
            ValueError: If the root part of the identifier is empty.
        """
        self._root, self._prefix = parse_identifier(identifier)
        self._validate_config()

    def _validate_config(self) -> None:
        if not self._root:
            raise ValueError(
                f"{self.__class__.__name__} requires a non-empty root in identifier"
            )

    @property
    def root(self) -> str:
        return self._root

    @property
    def prefix(self) -> str:
        return self._prefix

    def _resolve(self, key: str) -> str:
        return self._prefix + key

    def _list_prefix(self, folder: Optional[str] = None) -> str:
        return f"{self._prefix}{folder}/" if folder else self._prefix

    def _location(self) -> str:
        return f"{self._root}/{self._prefix}" if self._prefix else self._root
