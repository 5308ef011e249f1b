import json
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest
from bson import ObjectId


@pytest.fixture
def lambda_context(monkeypatch):
    context = SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )

    monkeypatch.setattr(
        "aws_lambda_powertools.utilities.typing.LambdaContext",
        lambda: context,
        raising=False,
    )

    return context


@pytest.fixture
def admin_id() -> ObjectId:
    return ObjectId()


@pytest.fixture
def api_event(admin_id) -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway proxy event with an authorizer context.

    Usage:
        api_event(query={"page": "2"})                      # admin caller
        api_event(user_id=customer["_id"], roles="customer")
        api_event(user_id=None)                             # anonymous
    """
    missing = object()

    def _event(
        *,
        user_id: Any = missing,
        roles: str = "admin",
        method: str = "GET",
        query: dict[str, Any] | None = None,
        multi_query: dict[str, list[str]] | None = None,
        path: dict[str, str] | None = None,
        body: Any = None,
    ) -> dict[str, Any]:
        caller = admin_id if user_id is missing else user_id
        event: dict[str, Any] = {
            "httpMethod": method,
            "queryStringParameters": query,
            "multiValueQueryStringParameters": multi_query,
            "pathParameters": path,
            "headers": {"Content-Type": "application/json"},
            "requestContext": {"authorizer": {}},
        }

        if caller is not None:
            event["requestContext"]["authorizer"] = {"userId": str(caller), "roles": roles}

        if body is not None:
            event["body"] = body if isinstance(body, str) else json.dumps(body)

        return event

    return _event


def parse_body(response: dict[str, Any]) -> dict[str, Any]:
    body = response.get("body")
    if not body:
        return {}
    return json.loads(body)


@pytest.fixture
def body_of() -> Callable[[dict[str, Any]], dict[str, Any]]:
    return parse_body
