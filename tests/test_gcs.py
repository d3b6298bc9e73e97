"""
Unit tests for Google Cloud Storage bucket.
"""
import pytest
from types import SimpleNamespace
from unittest.mock import MagicMock
from google.api_core.exceptions import Forbidden, NotFound
from unibucket import GCSBucket


@pytest.fixture
def gcs_bucket():
    """Create a mock google.cloud.storage.Bucket."""
    bucket = MagicMock()
    bucket.list_blobs.return_value = iter([
        SimpleNamespace(name='file1.txt'),
        SimpleNamespace(name='file2.txt'),
    ])
    return bucket


@pytest.fixture
def gcs_client(gcs_bucket):
    """Create a mock google.cloud.storage.Client."""
    client = MagicMock()
    client.bucket.return_value = gcs_bucket
    return client


@pytest.fixture
def bucket(gcs_client):
    return GCSBucket(gcs_client, 'bucketName')


@pytest.fixture
def bucket_sub(gcs_client):
    return GCSBucket(gcs_client, 'bucketName/sub')


class TestGCSBucketInitialization:
    """Test GCS bucket initialization."""

    def test_bucket_handle(self, bucket_sub, gcs_client):
        """Test the client is asked for the root bucket only."""
        gcs_client.bucket.assert_called_once_with('bucketName')
        assert bucket_sub.prefix == 'sub/'

    def test_empty_identifier(self, gcs_client):
        """Test initialization fails without a bucket name."""
        with pytest.raises(ValueError):
            GCSBucket(gcs_client, '/sub')


class TestGCSBucketList:
    """Test GCS bucket listing."""

    def test_list_folder(self, bucket, gcs_bucket):
        """Test listing files in a folder."""
        files = bucket.list('folder')

        assert files == ['file1.txt', 'file2.txt']
        gcs_bucket.list_blobs.assert_called_once_with(prefix='folder/')

    def test_list_root(self, bucket, gcs_bucket):
        """Test listing the whole bucket when no folder is given."""
        files = bucket.list()

        assert files == ['file1.txt', 'file2.txt']
        gcs_bucket.list_blobs.assert_called_once_with()

    def test_list_sub_folder(self, bucket_sub, gcs_bucket):
        """Test listing a folder inside a prefixed bucket."""
        bucket_sub.list('folder')
        gcs_bucket.list_blobs.assert_called_once_with(prefix='sub/folder/')

    def test_list_sub_root(self, bucket_sub, gcs_bucket):
        """Test listing the root of a prefixed bucket."""
        bucket_sub.list()
        gcs_bucket.list_blobs.assert_called_once_with(prefix='sub/')


class TestGCSBucketHas:
    """Test GCS bucket existence checks."""

    def test_has_existing_key(self, bucket, gcs_bucket):
        """Test has returns True if the blob exists."""
        gcs_bucket.blob.return_value.exists.return_value = True

        assert bucket.has('file1.txt') is True
        gcs_bucket.blob.assert_called_once_with('file1.txt')

    def test_has_missing_key(self, bucket, gcs_bucket):
        """Test has returns False if the blob does not exist."""
        gcs_bucket.blob.return_value.exists.return_value = False

        assert bucket.has('nonexistent.txt') is False

    def test_has_propagates_other_errors(self, bucket, gcs_bucket):
        """Test errors other than not-found are raised unchanged."""
        gcs_bucket.blob.return_value.exists.side_effect = Forbidden('denied')

        with pytest.raises(Forbidden):
            bucket.has('file1.txt')

    def test_has_with_prefix(self, bucket_sub, gcs_bucket):
        """Test has resolves the key against the prefix."""
        bucket_sub.has('file1.txt')
        gcs_bucket.blob.assert_called_once_with('sub/file1.txt')


class TestGCSBucketGet:
    """Test GCS bucket reads."""

    @pytest.fixture(autouse=True)
    def content(self, gcs_bucket):
        gcs_bucket.blob.return_value.download_as_bytes.return_value = b'content 1'

    def test_get_bytes(self, bucket, gcs_bucket):
        """Test reading a blob as bytes."""
        content = bucket.get('file1.txt')

        assert isinstance(content, bytes)
        assert content == b'content 1'
        gcs_bucket.blob.assert_called_once_with('file1.txt')

    def test_get_with_encoding(self, bucket):
        """Test reading a blob as text."""
        content = bucket.get('file1.txt', 'utf-8')

        assert isinstance(content, str)
        assert content == 'content 1'

    def test_get_text_helper(self, bucket):
        """Test get_text decodes with utf-8 by default."""
        assert bucket.get_text('file1.txt') == 'content 1'

    def test_get_with_prefix(self, bucket_sub, gcs_bucket):
        """Test get resolves the key against the prefix."""
        bucket_sub.get('file1.txt')
        gcs_bucket.blob.assert_called_once_with('sub/file1.txt')

    def test_get_missing_key(self, bucket, gcs_bucket):
        """Test a missing blob raises the backend error."""
        gcs_bucket.blob.return_value.download_as_bytes.side_effect = NotFound('missing')

        with pytest.raises(NotFound):
            bucket.get('nonexistent.txt')


class TestGCSBucketPut:
    """Test GCS bucket writes."""

    def test_put_text(self, bucket, gcs_bucket):
        """Test saving text content."""
        bucket.put('file1.txt', 'content 1')

        gcs_bucket.blob.assert_called_once_with('file1.txt')
        gcs_bucket.blob.return_value.upload_from_string.assert_called_once_with('content 1')

    def test_put_bytes(self, bucket, gcs_bucket):
        """Test saving binary content."""
        bucket.put('blob.bin', bytearray(b'\x00\xff'))

        gcs_bucket.blob.return_value.upload_from_string.assert_called_once_with(b'\x00\xff')

    def test_put_with_prefix(self, bucket_sub, gcs_bucket):
        """Test put resolves the key against the prefix."""
        bucket_sub.put('file1.txt', 'content 1')
        gcs_bucket.blob.assert_called_once_with('sub/file1.txt')


class TestGCSBucketDelete:
    """Test GCS bucket deletion."""

    def test_delete(self, bucket, gcs_bucket):
        """Test deleting a blob."""
        bucket.delete('file1.txt')

        gcs_bucket.blob.assert_called_once_with('file1.txt')
        gcs_bucket.blob.return_value.delete.assert_called_once_with()

    def test_delete_with_prefix(self, bucket_sub, gcs_bucket):
        """Test delete resolves the key against the prefix."""
        bucket_sub.delete('file1.txt')
        gcs_bucket.blob.assert_called_once_with('sub/file1.txt')

    def test_delete_missing_key(self, bucket, gcs_bucket):
        """Test deleting a missing blob raises the backend error."""
        gcs_bucket.blob.return_value.delete.side_effect = NotFound('missing')

        with pytest.raises(NotFound):
            bucket.delete('nonexistent.txt')


class InMemoryBlob:
    """Blob stand-in backed by a shared dict."""

    def __init__(self, objects, name):
        self.objects = objects
        self.name = name

    def exists(self):
        return self.name in self.objects

    def upload_from_string(self, data):
        self.objects[self.name] = data.encode('utf-8') if isinstance(data, str) else data

    def download_as_bytes(self):
        if self.name not in self.objects:
            raise NotFound(self.name)
        return self.objects[self.name]


class TestGCSBucketRoundTrip:
    """Test the bucket against blobs that keep content in memory."""

    @pytest.fixture
    def objects(self, gcs_bucket):
        objects = {}
        gcs_bucket.blob.side_effect = lambda name: InMemoryBlob(objects, name)
        return objects

    def test_has_after_put(self, bucket_sub, objects):
        """Test has is False before and True right after a put."""
        assert bucket_sub.has('file1.txt') is False
        bucket_sub.put('file1.txt', 'content 1')
        assert bucket_sub.has('file1.txt') is True
        assert bucket_sub.get('file1.txt', 'utf-8') == 'content 1'
        assert list(objects) == ['sub/file1.txt']

    def test_binary_round_trip(self, bucket, objects):
        """Test binary content reads back byte-exact."""
        data = bytes(range(256))

        bucket.put('blob.bin', memoryview(data))
        assert bucket.get('blob.bin') == data
