"""Translation of pymongo failures into storefront errors."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from aws_lambda_powertools import Logger
from pymongo.errors import PyMongoError, WriteError

from core.models.errors import DatabaseError, ValidationError
from core.utils.constants import MONGO_DOCUMENT_VALIDATION_FAILURE

logger = Logger(UTC=True)


@contextmanager
def database_errors(
    message: str,
    *,
    error_code: str,
    details: dict[str, Any] | None = None,
) -> Iterator[None]:
    """Translate pymongo exceptions raised inside the block.

    - Schema validation write errors become ValidationError (client fault)
    - Any other PyMongoError becomes DatabaseError carrying ``message``

    Storefront errors raised inside the block pass through untouched.
    """
    try:
        yield
    except WriteError as exc:
        if exc.code == MONGO_DOCUMENT_VALIDATION_FAILURE:
            logger.warning("Document failed validation", extra={"details": details})
            raise ValidationError(
                message="Document failed validation",
                details={**(details or {}), "reason": str(exc)},
            ) from exc

        logger.exception("MongoDB write failed", extra={"details": details})
        raise DatabaseError(
            message=message,
            error_code=error_code,
            details=details,
        ) from exc
    except PyMongoError as exc:
        logger.exception("MongoDB operation failed", extra={"details": details})
        raise DatabaseError(
            message=message,
            error_code=error_code,
            details=details,
        ) from exc
