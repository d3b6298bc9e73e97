"""Bucket adapter implementations."""

from .local import LocalBucket
from .s3 import S3Bucket
from .gcs import GCSBucket
from .azure import AzureBucket

__all__ = [
    'LocalBucket',
    'S3Bucket',
    'GCSBucket',
    'AzureBucket',
]
