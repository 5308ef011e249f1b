"""S3-backed implementation of FileStorageRepository."""

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from core.infrastructure.adapters.s3_adapter import S3Adapter, S3AdapterProtocol
from core.models.errors import FileStorageError
from core.repositories.file_storage_repository import FileStorageRepository

logger = Logger(UTC=True)


class S3FileStorage(FileStorageRepository):
    """Uploaded file storage backed by Amazon S3."""

    def __init__(self, adapter: S3AdapterProtocol | None = None) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3: S3AdapterProtocol = adapter or S3Adapter()

    def store_file(self, *, key: str, file_data: bytes, mime_type: str) -> str:
        """Upload file bytes to S3 and return the object key."""
        logger.debug(
            "Uploading file",
            extra={"key": key, "size": len(file_data), "mime_type": mime_type},
        )

        try:
            self._s3.put_object(
                key=key,
                body=file_data,
                content_type=mime_type,
                metadata={"size": str(len(file_data))},
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 upload failed", extra={"key": key})
            raise FileStorageError(
                message="Unable to store file at this time",
                details={"key": key},
            ) from exc

        logger.info("File uploaded successfully", extra={"key": key})
        return key
