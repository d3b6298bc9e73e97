"""
Amazon S3 bucket implementation.
"""
from typing import List, Optional, Union
import logging

try:
    from botocore.client import BaseClient
    from botocore.exceptions import ClientError
except ImportError:
    raise ImportError(
        "boto3 is required for S3 adapter. Install with: pip install boto3"
    )

from ..base import Content, PrefixedBucket

logger = logging.getLogger(__name__)

# Error codes botocore reports for a missing object
NOT_FOUND_CODES = ('404', 'NoSuchKey', 'NotFound')


class S3Bucket(PrefixedBucket):
    """
    Amazon S3 (or S3-compatible) bucket.

    Configuration required:
        - client: boto3 S3 client, created and authenticated by the caller
        - identifier: ``"bucket_name"`` or ``"bucket_name/prefix"``
    """

    def __init__(self, client: BaseClient, identifier: str):
        """Initialize S3 bucket."""
        super().__init__(identifier)
        self._client = client

    @property
    def bucket_name(self) -> str:
        return self.root

    def list(self, folder: Optional[str] = None) -> List[str]:
        """List objects and common prefixes in one level of the bucket."""
        prefix = self._list_prefix(folder)

        response = self._client.list_objects_v2(
            Bucket=self.bucket_name,
            Prefix=prefix,
            Delimiter='/',
        )

        # Only the first page is read, continuation tokens are not followed
        if response.get('IsTruncated'):
            logger.warning(
                f"S3 listing of s3://{self.bucket_name}/{prefix} was truncated, "
                f"only the first page is returned"
            )

        files = [item['Key'] for item in response.get('Contents', [])]
        files.extend(
            item['Prefix'].rstrip('/') for item in response.get('CommonPrefixes', [])
        )

        logger.debug(f"Listed {len(files)} entries from S3 with prefix: {prefix}")
        return files

    def has(self, key: str) -> bool:
        """Check if object exists in S3."""
        try:
            self._client.head_object(Bucket=self.bucket_name, Key=self._resolve(key))
            return True
        except ClientError as e:
            error_code = e.response.get('Error', {}).get('Code', 'Unknown')
            if error_code in NOT_FOUND_CODES:
                return False
            raise

    def get(self, key: str, encoding: Optional[str] = None) -> Union[bytes, str]:
        """Download object from S3."""
        response = self._client.get_object(Bucket=self.bucket_name, Key=self._resolve(key))
        data = response['Body'].read()
        logger.debug(f"Downloaded S3 object: s3://{self.bucket_name}/{self._resolve(key)}")
        return data.decode(encoding) if encoding else data

    def put(self, key: str, content: Content) -> None:
        """Upload object to S3."""
        s3_key = self._resolve(key)
        self._client.put_object(
            Bucket=self.bucket_name,
            Key=s3_key,
            Body=content if isinstance(content, str) else bytes(content),
        )
        logger.info(f"Uploaded object to S3: s3://{self.bucket_name}/{s3_key}")

    def delete(self, key: str) -> None:
        """Delete object from S3."""
        s3_key = self._resolve(key)
        self._client.delete_object(Bucket=self.bucket_name, Key=s3_key)
        logger.info(f"Deleted S3 object: s3://{self.bucket_name}/{s3_key}")
