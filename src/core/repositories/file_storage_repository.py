"""Abstract contract for uploaded file storage."""

from abc import ABC, abstractmethod


class FileStorageRepository(ABC):
    """Contract for storing uploaded files.

    Implementations could be S3, GCS, local disk, etc.
    Handlers depend on this interface, not the implementation.
    """

    @abstractmethod
    def store_file(self, *, key: str, file_data: bytes, mime_type: str) -> str:
        """Store a file under ``key`` and return the key.

        Args:
            key: Storage key chosen by the caller
            file_data: Binary file content
            mime_type: Detected MIME type (e.g., 'image/png')

        Raises:
            FileStorageError: If the upload fails
        """
