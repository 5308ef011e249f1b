import pytest
from pymongo.errors import ServerSelectionTimeoutError, WriteError

from core.infrastructure.mongo.errors import database_errors
from core.models.errors import DatabaseError, NotFoundError, ValidationError


def test_schema_validation_failure_is_client_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        with database_errors("Unable to save order", error_code="WRITE_FAILED"):
            raise WriteError("Document failed validation", code=121)

    assert exc_info.value.message == "Document failed validation"


def test_other_write_errors_are_database_errors() -> None:
    with pytest.raises(DatabaseError) as exc_info:
        with database_errors("Unable to save order", error_code="WRITE_FAILED", details={"a": 1}):
            raise WriteError("duplicate key", code=11000)

    assert exc_info.value.message == "Unable to save order"
    assert exc_info.value.error_code == "WRITE_FAILED"
    assert exc_info.value.details == {"a": 1}


def test_connection_errors_are_database_errors() -> None:
    with pytest.raises(DatabaseError):
        with database_errors("Unable to retrieve orders", error_code="LIST_FAILED"):
            raise ServerSelectionTimeoutError("no servers")


def test_storefront_errors_pass_through() -> None:
    with pytest.raises(NotFoundError):
        with database_errors("Unable to retrieve orders", error_code="LIST_FAILED"):
            raise NotFoundError(message="Order not found")
