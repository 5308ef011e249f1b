from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError, EndpointConnectionError

from core.infrastructure.aws.s3_file_storage import S3FileStorage
from core.models.errors import FileStorageError


class TestS3FileStorage:
    def test_store_file(self, s3_bucket, s3_get_object) -> None:
        storage = S3FileStorage()

        key = storage.store_file(key="temp/abc.gif", file_data=b"GIF89a-data", mime_type="image/gif")

        assert key == "temp/abc.gif"
        assert s3_get_object(key)["body"] == b"GIF89a-data"

    def test_client_error_is_translated(self) -> None:
        adapter = MagicMock()
        adapter.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}},
            "PutObject",
        )

        with pytest.raises(FileStorageError) as exc_info:
            S3FileStorage(adapter).store_file(key="temp/a.png", file_data=b"x", mime_type="image/png")

        assert exc_info.value.details == {"key": "temp/a.png"}

    def test_connection_error_is_translated(self) -> None:
        adapter = MagicMock()
        adapter.put_object.side_effect = EndpointConnectionError(endpoint_url="http://localhost:4566")

        with pytest.raises(FileStorageError):
            S3FileStorage(adapter).store_file(key="temp/a.png", file_data=b"x", mime_type="image/png")
