"""
Lambda handler responsible for listing the caller's own orders.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.filters.page_pagination import PagePagination
from core.models.documents import ListOrdersResponse, Order
from core.utils.auth import get_current_user
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_query_params
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListMyOrdersRequest
from .service import ListMyOrdersService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle requests for the caller's order history."""
    user = get_current_user(event)

    logger.info(
        "Received own order list request",
        extra={
            "user_id": str(user.user_id),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    request = validate_request(ListMyOrdersRequest, get_query_params(event))

    orders, total_count, _ = ListMyOrdersService().list_orders(
        customer_id=user.user_id,
        search=request.search,
        page=request.page,
        page_size=request.limit,
    )

    response = ListOrdersResponse(
        orders=[Order.model_validate(order) for order in orders],
        pagination=PagePagination.get_page_info(request.page, request.limit, total_count),
    )

    return ResponseBuilder.ok(response.to_response())
