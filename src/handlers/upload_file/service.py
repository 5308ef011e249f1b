"""Business logic for file uploads.

Uploaded files land under a temporary prefix with a random name. The
client's own file name is never used for the key.
"""

import base64
import binascii
import secrets

from aws_lambda_powertools import Logger

from core.infrastructure.aws.s3_file_storage import S3FileStorage
from core.models.errors import ValidationError
from core.utils.constants import (
    ALLOWED_MIME_TYPES,
    ERROR_CODE_FILE_SIZE,
    ERROR_CODE_UNSUPPORTED_MIME_TYPE,
    MAX_FILE_SIZE,
    MIME_TYPE_EXTENSION_MAP,
    MIN_FILE_SIZE,
    UPLOAD_KEY_PREFIX,
)
from core.utils.mime import detect_mime_type

logger = Logger(UTC=True)


class UploadService:
    """Application service responsible for file uploads.

    This service orchestrates:
    - File decoding and validation
    - Naming the stored object
    - Uploading file content to storage
    """

    def __init__(self) -> None:
        self.storage = S3FileStorage()

    @staticmethod
    def decode_file(encoded: str) -> bytes:
        """Decode base64-encoded file data.

        Raises:
            ValidationError: If decoding fails
        """
        try:
            return base64.b64decode(encoded, validate=True)
        except (binascii.Error, ValueError) as exc:
            logger.warning("Failed to decode base64 file data")
            raise ValidationError(
                message="Invalid file data",
                details={"encoding": "base64"},
            ) from exc

    @staticmethod
    def validate_file(file_data: bytes) -> str:
        """Check size and content, returning the detected MIME type.

        Raises:
            ValidationError: If the file is too small, too large, blank,
                or not a supported image type
        """
        size = len(file_data)
        if size < MIN_FILE_SIZE:
            raise ValidationError(
                message="File is too small",
                error_code=ERROR_CODE_FILE_SIZE,
                details={"size": size, "min_size": MIN_FILE_SIZE},
            )
        if size > MAX_FILE_SIZE:
            raise ValidationError(
                message="File is too large",
                error_code=ERROR_CODE_FILE_SIZE,
                details={"size": size, "max_size": MAX_FILE_SIZE},
            )

        if not file_data.strip(b"\x00"):
            raise ValidationError(
                message="File is empty",
                error_code=ERROR_CODE_FILE_SIZE,
            )

        mime_type = detect_mime_type(file_data)
        if mime_type not in ALLOWED_MIME_TYPES:
            raise ValidationError(
                message="File type is not supported",
                error_code=ERROR_CODE_UNSUPPORTED_MIME_TYPE,
                details={"mime_type": mime_type},
            )

        return mime_type

    @staticmethod
    def generate_key(mime_type: str) -> str:
        """Random object key under the temporary prefix."""
        return f"{UPLOAD_KEY_PREFIX}/{secrets.token_hex(16)}.{MIME_TYPE_EXTENSION_MAP[mime_type]}"

    def upload_file(self, *, file_data: bytes) -> str:
        """Validate and store a file.

        Returns:
            The object key the file was stored under

        Raises:
            ValidationError: If the file is rejected
            FileStorageError: If storage upload fails
        """
        mime_type = self.validate_file(file_data)
        key = self.generate_key(mime_type)

        logger.debug(
            "Storing upload",
            extra={"key": key, "size": len(file_data), "mime_type": mime_type},
        )

        return self.storage.store_file(key=key, file_data=file_data, mime_type=mime_type)
