"""
Lambda handler responsible for reading an order by number.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Order
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_order_number

from .service import GetOrderService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle admin requests for one order.

    Args:
        event: API Gateway event payload.
        context: AWS Lambda runtime context.

    Returns:
        API Gateway-compatible response dictionary.
    """
    logger.info(
        "Received order request",
        extra={
            "path": event.get("path"),
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    order_number = parse_order_number(get_path_param(event, "orderNumber"))

    order = GetOrderService().get_order(order_number)

    return ResponseBuilder.ok(Order.model_validate(order).to_response())
