"""
Lambda handler responsible for placing orders.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Order
from core.utils.auth import get_current_user
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_json_body
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import CreateOrderRequest
from .service import CreateOrderService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle order placement requests.

    Expected body:
    {
        "address": "...",
        "payment": "card" | "online",
        "phone": "...",
        "email": "...",
        "total": 350,
        "items": ["<product id>", ...],
        "comment": "..."            # optional
    }

    Args:
        event: API Gateway Lambda proxy event containing the order
        context: AWS Lambda execution context

    Returns:
        201 response with the created order expanded
    """
    user = get_current_user(event)

    logger.info(
        "Received order creation request",
        extra={
            "user_id": str(user.user_id),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    request = validate_request(CreateOrderRequest, get_json_body(event))
    order = CreateOrderService().create_order(customer_id=user.user_id, request=request)

    return ResponseBuilder.created(Order.model_validate(order).to_response())
