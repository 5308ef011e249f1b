"""
Common decorators and helpers for API Gateway Lambda handlers.
"""

from __future__ import annotations

import traceback
from collections.abc import Callable
from functools import wraps
from http import HTTPStatus
from typing import Any, Protocol

from aws_lambda_powertools import Logger

from core.models.errors import StorefrontError
from core.utils.response import ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)

JsonDict = dict[str, Any]

GENERIC_SERVER_ERROR_MESSAGE = "An error occurred on the server"


class ApiGatewayHandlerProtocol(Protocol):
    """Protocol for API Gateway Lambda handler functions."""

    def __call__(
        self,
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict: ...


def _log_error(
    message: str,
    *,
    handler_name: str,
    request_id: str | None,
    exc: Exception,
    level: str = "warning",
) -> None:
    """
    Log error with consistent structure and full context.

    Args:
        message: Log message
        handler_name: Name of the handler function
        request_id: AWS request ID
        exc: Exception that was raised
        level: Log level ('warning' or 'exception')
    """
    log_extra = {
        "handler": handler_name,
        "request_id": request_id,
        "error": str(exc),
        "error_type": type(exc).__name__,
    }

    if isinstance(exc, StorefrontError):
        log_extra["error_code"] = exc.error_code
        log_extra["details"] = exc.details

    if level == "exception":
        # logger.exception automatically includes traceback
        logger.exception(message, extra=log_extra)
    else:
        # For warnings, manually add traceback
        log_extra["traceback"] = traceback.format_exc()
        logger.warning(message, extra=log_extra)


def storefront_error_response(
    exc: StorefrontError,
    *,
    request_id: str | None = None,
    cors_origin: str | None = None,
) -> JsonDict:
    """Render a domain error.

    Client faults carry their own message and details; server faults
    are reported with a generic message only.
    """
    if exc.is_client_error:
        return ResponseBuilder.error(
            status=exc.status,
            error=exc.error_code,
            message=exc.message,
            details=exc.details,
            request_id=request_id,
            cors_origin=cors_origin,
        )

    return ResponseBuilder.internal_error(
        GENERIC_SERVER_ERROR_MESSAGE,
        request_id=request_id,
        cors_origin=cors_origin,
    )


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    This is the single place where failures become HTTP responses.
    Handlers and services raise; nothing below this layer builds error
    responses or retries.

    Provides:
    - Automatic CORS preflight (OPTIONS) handling
    - Domain error to status mapping (StorefrontError.status)
    - Request ID tracking and structured logging

    Example:
        @api_gateway_handler
        def lambda_handler(event, context):
            return ResponseBuilder.ok({"status": "ok"})
    """

    @wraps(func)
    def wrapper(
        event: Any,
        context: Any,
        *,
        cors_origin: str | None = None,
    ) -> JsonDict:
        # Handle CORS preflight requests
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content(cors_origin=cors_origin)

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)

        except StorefrontError as exc:
            _log_error(
                "Storefront error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="warning" if exc.is_client_error else "exception",
            )
            return storefront_error_response(
                exc,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Client errors (4xx) - Unauthorized/Forbidden
        except PermissionError as exc:
            _log_error(
                "Permission denied in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
            )
            return ResponseBuilder.forbidden(
                "You don't have permission to perform this action.",
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Server errors (5xx) - Timeout
        except TimeoutError as exc:
            _log_error(
                "Request timeout",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.error(
                message="The request took too long to process. Please try again.",
                status=HTTPStatus.GATEWAY_TIMEOUT,
                request_id=request_id,
                cors_origin=cors_origin,
            )

        # Catch-all for unexpected errors
        except Exception as exc:
            _log_error(
                "Unexpected error in handler",
                handler_name=func.__name__,
                request_id=request_id,
                exc=exc,
                level="exception",
            )
            return ResponseBuilder.internal_error(
                GENERIC_SERVER_ERROR_MESSAGE,
                request_id=request_id,
                cors_origin=cors_origin,
            )

    return wrapper
