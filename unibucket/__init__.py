"""
unibucket - One key-value bucket interface over several object stores.

This package provides the same five operations (list, has, get, put, delete)
for different storage backends:
- Local filesystem
- Amazon S3 / S3-compatible storage
- Google Cloud Storage
- Azure Blob Storage

Usage:
    >>> import boto3
    >>> from unibucket import get_bucket
    >>>
    >>> bucket = get_bucket('s3', 'my-bucket/datasets', boto3.client('s3'))
    >>> bucket.put('notes.txt', 'hello')
    >>> bucket.has('notes.txt')
    True
    >>> bucket.get('notes.txt', 'utf-8')
    'hello'
    >>> bucket.list()
    ['datasets/notes.txt']
"""

__version__ = '0.1.0'
__license__ = 'MIT'

# Import main components
from .base import (
    Bucket,
    PrefixedBucket,
    parse_identifier,
    DEFAULT_ENCODING,
    StorageError,
    EmptyKeyError,
)

from .factory import (
    get_bucket,
    register_backend,
    list_available_backends,
    get_backend_info,
    BucketFactoryError,
)

# Import adapters for direct access
from .adapters.local import LocalBucket
from .adapters.s3 import S3Bucket
from .adapters.gcs import GCSBucket
from .adapters.azure import AzureBucket

__all__ = [
    # Version
    '__version__',

    # Base classes and helpers
    'Bucket',
    'PrefixedBucket',
    'parse_identifier',
    'DEFAULT_ENCODING',

    # Exceptions
    'StorageError',
    'EmptyKeyError',
    'BucketFactoryError',

    # Factory functions
    'get_bucket',
    'register_backend',
    'list_available_backends',
    'get_backend_info',

    # Adapters
    'LocalBucket',
    'S3Bucket',
    'GCSBucket',
    'AzureBucket',
]
