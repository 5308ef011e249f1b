"""
Lambda handler responsible for changing an order's status.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Order
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_json_body, get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_order_number, validate_request

from .models import UpdateOrderRequest
from .service import UpdateOrderService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle order status updates."""
    logger.info(
        "Received order update request",
        extra={
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    order_number = parse_order_number(get_path_param(event, "orderNumber"))
    request = validate_request(UpdateOrderRequest, get_json_body(event))

    order = UpdateOrderService().update_status(order_number, status=request.status)

    return ResponseBuilder.ok(Order.model_validate(order).to_response())
