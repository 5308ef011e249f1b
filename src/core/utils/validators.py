"""Request validation utilities."""

import math
from typing import Any, TypeVar

from bson import ObjectId
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ValidationError
from core.utils.constants import ERROR_CODE_INVALID_ID

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[Any]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    - internal exception details
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        # Friendly rewrites for common cases
        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif msg_lower.startswith("input should be a valid"):
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate

    Returns:
        The validated model

    Raises:
        ValidationError: On invalid input, with sanitized per-field details
    """
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(
            message="Invalid request parameters",
            details={"errors": sanitize_validation_errors(exc.errors())},
        ) from exc


def parse_object_id(value: Any, *, field: str = "id") -> ObjectId:
    """Parse a path or body value into an ObjectId.

    Raises:
        ValidationError: If the value is not a valid ObjectId
    """
    if isinstance(value, ObjectId):
        return value

    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)

    raise ValidationError(
        message=f"Invalid {field}",
        error_code=ERROR_CODE_INVALID_ID,
        details={field: str(value)},
    )


def parse_finite_number(value: Any) -> float:
    """Parse a query value into a finite float.

    Raises:
        ValueError: If the value is not a finite number
    """
    if isinstance(value, bool):
        raise ValueError("Invalid number")

    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid number '{value}'") from exc

    if not math.isfinite(number):
        raise ValueError(f"Invalid number '{value}'")

    return number


def parse_order_number(value: Any) -> int:
    """Parse a path value into a positive order number.

    Raises:
        ValidationError: If the value is not a positive integer
    """
    text = value.strip() if isinstance(value, str) else ""

    if not (text.isascii() and text.isdecimal()) or int(text) < 1:
        raise ValidationError(
            message="Invalid order number",
            error_code=ERROR_CODE_INVALID_ID,
            details={"order_number": str(value)},
        )

    return int(text)
