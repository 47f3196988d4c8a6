"""S3 object store against a stubbed boto3 client."""

import boto3
import pytest
from botocore.stub import Stubber

from findora.core.errors import StorageError
from findora.storage.object_store import InMemoryObjectStore, S3ObjectStore, content_digest

DATA = b"%PDF-1.7\nseller document"


@pytest.fixture
def s3_client():
    return boto3.client(
        "s3",
        region_name="us-east-1",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
    )


class TestS3ObjectStore:
    async def test_put_sends_content_type_and_digest(self, s3_client):
        store = S3ObjectStore(s3_client, "seller-documents")
        stubber = Stubber(s3_client)
        stubber.add_response(
            "put_object",
            {},
            {
                "Bucket": "seller-documents",
                "Key": "sellers/1/documents/ID_FRONT/a.pdf",
                "Body": DATA,
                "ContentType": "application/pdf",
                "Metadata": {"sha256": content_digest(DATA)},
            },
        )

        with stubber:
            stored = await store.put("sellers/1/documents/ID_FRONT/a.pdf", DATA, "application/pdf")

        stubber.assert_no_pending_responses()
        assert stored.size_bytes == len(DATA)
        assert stored.sha256 == content_digest(DATA)

    async def test_put_failure_raises_storage_error(self, s3_client):
        store = S3ObjectStore(s3_client, "seller-documents")
        stubber = Stubber(s3_client)
        stubber.add_client_error("put_object", service_error_code="AccessDenied", http_status_code=403)

        with stubber, pytest.raises(StorageError):
            await store.put("key", DATA, "application/pdf")

    async def test_delete(self, s3_client):
        store = S3ObjectStore(s3_client, "seller-documents")
        stubber = Stubber(s3_client)
        stubber.add_response("delete_object", {}, {"Bucket": "seller-documents", "Key": "key"})

        with stubber:
            await store.delete("key")

        stubber.assert_no_pending_responses()


async def test_in_memory_store_overwrites_and_deletes():
    store = InMemoryObjectStore()

    await store.put("key", b"one", "image/png")
    await store.put("key", b"two", "image/png")
    assert store.objects == {"key": (b"two", "image/png")}

    await store.delete("key")
    await store.delete("key")
    assert store.objects == {}
