"""
Factory for creating bucket instances.
"""
from typing import Any, Dict, List, Optional
import logging

from .base import Bucket, StorageError
from .adapters.local import LocalBucket
from .adapters.s3 import S3Bucket
from .adapters.gcs import GCSBucket
from .adapters.azure import AzureBucket

logger = logging.getLogger(__name__)


# Registry of available backends
ADAPTER_REGISTRY = {
    'local': LocalBucket,
    's3': S3Bucket,
    'gcs': GCSBucket,
    'azure': AzureBucket,
}

# Backends constructed from an identifier alone
CLIENTLESS_BACKENDS = {'local'}


class BucketFactoryError(StorageError):
    """Raised when bucket creation fails."""
    pass


def get_bucket(backend: str, identifier: str, client: Optional[Any] = None) -> Bucket:
    """
    Factory function to create bucket instances.

    Args:
        backend: Backend type ('local', 's3', 'gcs', 'azure')
        identifier: Base path for 'local', else ``"root"`` or ``"root/prefix"``
        client: SDK client for cloud backends (boto3 S3 client,
            ``google.cloud.storage.Client`` or ``BlobServiceClient``)

    Returns:
        Initialized bucket instance

    Raises:
        BucketFactoryError: If backend is unknown, the client is missing or
            initialization fails

    Example:
        >>> import boto3
        >>> bucket = get_bucket('s3', 'my-bucket/datasets', boto3.client('s3'))
        >>> bucket.has('data.csv')
        True
    """
    backend = backend.lower().strip()

    if backend not in ADAPTER_REGISTRY:
        available = ', '.join(ADAPTER_REGISTRY.keys())
        raise BucketFactoryError(
            f"Unknown storage backend: '{backend}'. "
            f"Available backends: {available}"
        )

    bucket_class = ADAPTER_REGISTRY[backend]

    if backend in CLIENTLESS_BACKENDS:
        args = (identifier,)
    elif client is None:
        raise BucketFactoryError(f"The {backend} backend requires a client")
    else:
        args = (client, identifier)

    try:
        logger.info(f"Creating {backend} bucket: {identifier}")
        return bucket_class(*args)

    except Exception as e:
        logger.error(f"Failed to create {backend} bucket: {e}")
        raise BucketFactoryError(
            f"Failed to initialize {backend} bucket: {e}"
        ) from e


def register_backend(backend: str, bucket_class: type, needs_client: bool = True) -> None:
    """
    Register a custom bucket backend.

    Args:
        backend: Backend identifier (e.g., 'minio')
        bucket_class: Class that inherits from Bucket
        needs_client: Whether the class takes a client before the identifier

    Registration updates the module-level ADAPTER_REGISTRY and
    CLIENTLESS_BACKENDS, so it is visible to every caller in the process and
    is not thread-safe. Register backends at import time. Re-registering a name
    replaces the earlier class. Bucket instances hold no shared state.

    Raises:
        ValueError: If bucket_class doesn't inherit from Bucket

    Example:
        >>> class MinIOBucket(S3Bucket):
        ...     pass
        >>> register_backend('minio', MinIOBucket)
    """
    if not isinstance(bucket_class, type) or not issubclass(bucket_class, Bucket):
        raise ValueError(
            f"Bucket class must inherit from Bucket, "
            f"got {getattr(bucket_class, '__name__', bucket_class)}"
        )

    backend = backend.lower().strip()
    ADAPTER_REGISTRY[backend] = bucket_class
    if needs_client:
        CLIENTLESS_BACKENDS.discard(backend)
    else:
        CLIENTLESS_BACKENDS.add(backend)
    logger.info(f"Registered custom backend: {backend}")


def list_available_backends() -> List[str]:
    """
    Get list of available storage backends.

    Example:
        >>> list_available_backends()
        ['local', 's3', 'gcs', 'azure']
    """
    return list(ADAPTER_REGISTRY.keys())


def get_backend_info(backend: str) -> Dict[str, Any]:
    """
    Get information about a specific backend.

    Raises:
        BucketFactoryError: If backend is unknown
    """
    backend = backend.lower().strip()

    if backend not in ADAPTER_REGISTRY:
        raise BucketFactoryError(f"Unknown storage backend: '{backend}'")

    bucket_class = ADAPTER_REGISTRY[backend]

    return {
        'backend': backend,
        'class_name': bucket_class.__name__,
        'module': bucket_class.__module__,
        'requires_client': backend not in CLIENTLESS_BACKENDS,
        'docstring': bucket_class.__doc__,
    }
