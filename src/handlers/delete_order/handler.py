"""
Lambda handler responsible for deleting an order.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Order
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_object_id

from .service import DeleteOrderService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle order deletion requests.

    The order is addressed by its document id, not its number.
    """
    logger.info(
        "Received order delete request",
        extra={
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    order_id = parse_object_id(get_path_param(event, "id"))

    order = DeleteOrderService().delete_order(order_id)

    return ResponseBuilder.ok(Order.model_validate(order).to_response())
