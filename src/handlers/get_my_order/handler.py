"""
Lambda handler responsible for reading one of the caller's orders.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Order
from core.utils.auth import get_current_user
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_order_number

from .service import GetMyOrderService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle requests for an order owned by the caller."""
    user = get_current_user(event)

    logger.info(
        "Received own order request",
        extra={
            "user_id": str(user.user_id),
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    order_number = parse_order_number(get_path_param(event, "orderNumber"))
    order = GetMyOrderService().get_order(order_number, customer_id=user.user_id)

    return ResponseBuilder.ok(Order.model_validate(order).to_response())
