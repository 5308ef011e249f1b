"""Custom exception classes for the storefront service."""

from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    ERROR_CODE_DATABASE,
    ERROR_CODE_FILE_STORAGE,
    ERROR_CODE_FORBIDDEN,
    ERROR_CODE_RESOURCE_NOT_FOUND,
    ERROR_CODE_UNAUTHORIZED,
    ERROR_CODE_VALIDATION_FAILED,
)


class StorefrontError(Exception):
    """
    Base exception for all storefront service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message and error code.
    Optional contextual information can be supplied via `details`.

    `status` is the HTTP status the error is reported with. Client
    faults (4xx) expose `message` to the caller; server faults do not.
    """

    status: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status.value < 500


class ValidationError(StorefrontError):
    """Raised when request validation fails."""

    status = HTTPStatus.BAD_REQUEST

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_VALIDATION_FAILED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class NotFoundError(StorefrontError):
    """Raised when a requested resource is not found."""

    status = HTTPStatus.NOT_FOUND

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_RESOURCE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class AuthenticationError(StorefrontError):
    """Raised when the request carries no caller identity."""

    status = HTTPStatus.UNAUTHORIZED

    def __init__(
        self,
        *,
        message: str = "Authentication required",
        error_code: str = ERROR_CODE_UNAUTHORIZED,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class ForbiddenError(StorefrontError):
    """Raised when the caller lacks the role an operation requires."""

    status = HTTPStatus.FORBIDDEN

    def __init__(
        self,
        *,
        message: str = "Access denied",
        error_code: str = ERROR_CODE_FORBIDDEN,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class DatabaseError(StorefrontError):
    """Raised when a MongoDB operation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_DATABASE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileStorageError(StorefrontError):
    """Raised when an uploaded file cannot be stored."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_STORAGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )
