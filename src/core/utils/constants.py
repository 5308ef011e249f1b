"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_FILTER = "INVALID_FILTER"
ERROR_CODE_INVALID_SEARCH = "INVALID_SEARCH"
ERROR_CODE_INVALID_ID = "INVALID_ID"
ERROR_CODE_INVALID_ORDER_TOTAL = "INVALID_ORDER_TOTAL"
ERROR_CODE_PRODUCT_UNAVAILABLE = "PRODUCT_UNAVAILABLE"
ERROR_CODE_UNSUPPORTED_MIME_TYPE = "UNSUPPORTED_MIME_TYPE"
ERROR_CODE_FILE_SIZE = "INVALID_FILE_SIZE"

# Auth Errors
ERROR_CODE_UNAUTHORIZED = "UNAUTHORIZED"
ERROR_CODE_FORBIDDEN = "FORBIDDEN"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_CUSTOMER_NOT_FOUND = "CUSTOMER_NOT_FOUND"
ERROR_CODE_ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

# Database Errors
ERROR_CODE_DATABASE = "DATABASE_ERROR"
ERROR_CODE_LIST_FAILED = "LIST_FAILED"
ERROR_CODE_COUNT_FAILED = "COUNT_FAILED"
ERROR_CODE_FETCH_FAILED = "FETCH_FAILED"
ERROR_CODE_WRITE_FAILED = "WRITE_FAILED"

# Storage Errors
ERROR_CODE_FILE_STORAGE = "FILE_STORAGE_ERROR"

# MongoDB server error raised when a document fails collection validation
MONGO_DOCUMENT_VALIDATION_FAILURE = 121


# ============================================================================
# Collections
# ============================================================================

CUSTOMERS_COLLECTION = "users"
ORDERS_COLLECTION = "orders"
PRODUCTS_COLLECTION = "products"
COUNTERS_COLLECTION = "counters"

ORDER_NUMBER_SEQUENCE = "orderNumber"


# ============================================================================
# Pagination Constraints
# ============================================================================

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 10

# Largest integer BSON can encode (signed 64-bit).
MAX_INT64 = 2**63 - 1
MAX_SKIP = MAX_INT64
MAX_PAGE = MAX_SKIP // MAX_PAGE_SIZE + 1


# ============================================================================
# Sort Constraints
# ============================================================================

DEFAULT_SORT_FIELD = "createdAt"
DEFAULT_SORT_ORDER = "desc"

CUSTOMER_SORT_FIELDS: Final[tuple[str, ...]] = (
    "createdAt",
    "totalAmount",
    "orderCount",
    "lastOrderDate",
    "name",
)

ORDER_SORT_FIELDS: Final[tuple[str, ...]] = (
    "createdAt",
    "totalAmount",
    "orderNumber",
    "status",
)


# ============================================================================
# Orders
# ============================================================================

ORDER_STATUSES: Final[tuple[str, ...]] = ("new", "delivering", "completed", "cancelled")
DEFAULT_ORDER_STATUS = "new"
PAYMENT_METHODS: Final[tuple[str, ...]] = ("card", "online")


# ============================================================================
# Roles
# ============================================================================

ROLE_ADMIN = "admin"


# ============================================================================
# File Upload Constraints
# ============================================================================

MIN_FILE_SIZE = 2 * 1024  # 2KB in bytes
MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB in bytes

MIME_TYPE_EXTENSION_MAP: Final[dict[str, str]] = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/gif": "gif",
}

ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset(MIME_TYPE_EXTENSION_MAP.keys())

UPLOAD_KEY_PREFIX = "temp"


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PATCH,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_MONGODB_URI = "MONGODB_URI"
ENV_MONGODB_DATABASE = "MONGODB_DATABASE"
ENV_UPLOAD_S3_BUCKET_NAME = "UPLOAD_S3_BUCKET_NAME"
ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"

DEFAULT_MONGODB_URI = "mongodb://localhost:27017"
DEFAULT_MONGODB_DATABASE = "storefront"
