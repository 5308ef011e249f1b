"""Helpers for reading API Gateway proxy events."""

import json
from typing import Any

from core.models.errors import ValidationError

LIST_SUFFIX = "[]"


def get_query_params(event: dict[str, Any]) -> dict[str, Any]:
    """Return query parameters, keeping repeated keys as lists.

    ``status=new&status=completed`` and ``status[]=new`` both yield a list
    under ``status``; a key given once stays a plain string.
    """
    single = event.get("queryStringParameters") or {}
    multi = event.get("multiValueQueryStringParameters") or {}

    collected: dict[str, list[Any]] = {}
    as_list: set[str] = set()

    for key in {*single, *multi}:
        values = multi.get(key)
        if values is None:
            values = [single[key]]
        if not values:
            continue

        name = key
        if key.endswith(LIST_SUFFIX):
            name = key[: -len(LIST_SUFFIX)]
            as_list.add(name)

        collected.setdefault(name, []).extend(values)

    return {
        name: values if name in as_list or len(values) > 1 else values[0]
        for name, values in collected.items()
    }


def get_path_param(event: dict[str, Any], name: str) -> str | None:
    return (event.get("pathParameters") or {}).get(name)


def get_json_body(event: dict[str, Any]) -> dict[str, Any]:
    """Decode the JSON request body.

    Raises:
        ValidationError: If the body is missing, not JSON, or not an object
    """
    raw = event.get("body")
    if not raw:
        raise ValidationError(message="Missing request body")

    try:
        body = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError(message="Invalid JSON body") from exc

    if not isinstance(body, dict):
        raise ValidationError(message="Invalid JSON body")

    return body
