import json
from http import HTTPStatus
from types import SimpleNamespace
from typing import Any, cast

import pytest
from pydantic import BaseModel

from core.models.errors import (
    DatabaseError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from core.utils.decorators import GENERIC_SERVER_ERROR_MESSAGE, api_gateway_handler
from core.utils.response import JsonDict, ResponseBuilder
from core.utils.validators import validate_request


def parse_body(resp: dict[str, Any]) -> dict[str, Any]:
    """Parse JSON body from API Gateway response."""
    body = resp.get("body")
    if not body:
        return {}
    return cast(dict[str, Any], json.loads(body))


def raising(exc: Exception):
    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        raise exc

    return handler


CONTEXT = SimpleNamespace(aws_request_id="req-err")


def test_api_handler_success() -> None:
    """Successful handler execution returns response unchanged."""

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        return ResponseBuilder.ok({"msg": "ok"}, request_id=context.aws_request_id)

    resp = handler({}, SimpleNamespace(aws_request_id="req-ok"))

    parsed = parse_body(resp)
    assert resp["statusCode"] == HTTPStatus.OK
    assert parsed["msg"] == "ok"
    assert parsed["request_id"] == "req-ok"


def test_api_handler_options_preflight() -> None:
    """OPTIONS request returns 204 without calling the handler."""
    called = False

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        nonlocal called
        called = True
        return ResponseBuilder.ok({})

    resp = handler({"httpMethod": "OPTIONS"}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.NO_CONTENT
    assert called is False


@pytest.mark.parametrize(
    "exc,status,code",
    [
        (ValidationError(message="Invalid order total", error_code="INVALID_ORDER_TOTAL"), 400, "INVALID_ORDER_TOTAL"),
        (NotFoundError(message="Order not found", error_code="ORDER_NOT_FOUND"), 404, "ORDER_NOT_FOUND"),
        (ForbiddenError(), 403, "FORBIDDEN"),
    ],
)
def test_client_domain_errors_keep_their_message(exc, status, code) -> None:
    resp = raising(exc)({}, CONTEXT)
    parsed = parse_body(resp)

    assert resp["statusCode"] == status
    assert parsed["error"] == code
    assert parsed["message"] == exc.message
    assert parsed["request_id"] == "req-err"


def test_server_domain_errors_are_generic() -> None:
    resp = raising(DatabaseError(message="connection refused to 10.0.0.5"))({}, CONTEXT)
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert parsed["message"] == GENERIC_SERVER_ERROR_MESSAGE
    assert "10.0.0.5" not in resp["body"]


def test_request_validation_failure_is_bad_request() -> None:
    class Body(BaseModel):
        status: str

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        validate_request(Body, {})
        return ResponseBuilder.ok({})

    resp = handler({}, CONTEXT)
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.BAD_REQUEST
    assert parsed["message"] == "Invalid request parameters"
    assert parsed["details"]["errors"] == [{"field": "status", "message": "This field is required"}]


def test_response_model_failure_is_server_error() -> None:
    class Payload(BaseModel):
        id: str

    @api_gateway_handler
    def handler(event: Any, context: Any) -> JsonDict:
        return ResponseBuilder.ok(Payload.model_validate({}).model_dump())

    resp = handler({}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert parse_body(resp)["message"] == GENERIC_SERVER_ERROR_MESSAGE


@pytest.mark.parametrize(
    "exc",
    [KeyError("missing"), ValueError("Invalid thing"), TypeError("bad operand"), AttributeError("nope")],
)
def test_builtin_errors_are_server_errors(exc) -> None:
    resp = raising(exc)({}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert parse_body(resp)["message"] == GENERIC_SERVER_ERROR_MESSAGE


def test_permission_error_is_forbidden() -> None:
    resp = raising(PermissionError("nope"))({}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.FORBIDDEN


def test_timeout_is_gateway_timeout() -> None:
    resp = raising(TimeoutError())({}, CONTEXT)

    assert resp["statusCode"] == HTTPStatus.GATEWAY_TIMEOUT


def test_unexpected_error_is_generic_500() -> None:
    resp = raising(RuntimeError("secret stack detail"))({}, CONTEXT)
    parsed = parse_body(resp)

    assert resp["statusCode"] == HTTPStatus.INTERNAL_SERVER_ERROR
    assert parsed["message"] == GENERIC_SERVER_ERROR_MESSAGE
    assert "secret" not in resp["body"]
