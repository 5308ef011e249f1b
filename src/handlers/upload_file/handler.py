"""
Lambda handler responsible for file uploads.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.utils.auth import get_current_user
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_json_body
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import UploadFileRequest, UploadFileResponse
from .service import UploadService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle file upload requests.

    The handler decodes the base64-encoded file, validates it, stores it
    under a random key and returns that key.

    Expected API Gateway event structure:
    {
        "body": "{\"file\": \"<base64>\"}",
        "isBase64Encoded": false
    }

    Args:
        event: API Gateway Lambda proxy event containing the upload payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response containing the stored file name
    """
    user = get_current_user(event)

    logger.info(
        "Received file upload request",
        extra={
            "user_id": str(user.user_id),
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
            "remaining_time_ms": context.get_remaining_time_in_millis()
            if hasattr(context, "get_remaining_time_in_millis")
            else None,
        },
    )

    request = validate_request(UploadFileRequest, get_json_body(event))

    service = UploadService()
    key = service.upload_file(file_data=service.decode_file(request.file))

    return ResponseBuilder.ok(UploadFileResponse(file_name=key).model_dump(by_alias=True))
