"""
Basic usage examples for unibucket.

This example demonstrates the five bucket operations on the local
filesystem, and how the same code runs against a cloud bucket.
"""
import tempfile

from unibucket import Bucket, get_bucket


def exercise(bucket: Bucket):
    """Run the same operations against any bucket."""
    bucket.put('hello.txt', 'Hello, unibucket!')
    bucket.put('images/pixel.bin', b'\x89PNG')
    print(f"✓ Wrote objects to {bucket!r}")

    if bucket.has('hello.txt'):
        print("✓ hello.txt exists")

    print(f"✓ Text content: {bucket.get('hello.txt', 'utf-8')}")
    print(f"✓ Raw content: {bucket.get('images/pixel.bin')!r}")

    print(f"✓ Root listing: {bucket.list()}")
    print(f"✓ images/ listing: {bucket.list('images')}")

    bucket.delete('hello.txt')
    bucket.delete('images/pixel.bin')
    print("✓ Objects deleted")


def example_local_storage():
    """Example: Local filesystem bucket."""
    print("\n=== LOCAL FILESYSTEM EXAMPLE ===")

    with tempfile.TemporaryDirectory() as base_path:
        exercise(get_bucket('local', base_path))


def example_s3_storage():
    """Example: S3 bucket scoped to a prefix."""
    print("\n=== AMAZON S3 EXAMPLE ===")

    import boto3

    client = boto3.client('s3', region_name='us-west-2')
    exercise(get_bucket('s3', 'my-bucket/examples', client))


def example_gcs_storage():
    """Example: Google Cloud Storage bucket."""
    print("\n=== GOOGLE CLOUD STORAGE EXAMPLE ===")

    from google.cloud import storage

    exercise(get_bucket('gcs', 'my-bucket/examples', storage.Client()))


def example_azure_storage():
    """Example: Azure Blob Storage container."""
    print("\n=== AZURE BLOB STORAGE EXAMPLE ===")

    from azure.storage.blob import BlobServiceClient

    client = BlobServiceClient.from_connection_string('your-connection-string')
    exercise(get_bucket('azure', 'my-container/examples', client))


if __name__ == '__main__':
    example_local_storage()

    # Uncomment with real credentials configured
    # example_s3_storage()
    # example_gcs_storage()
    # example_azure_storage()
