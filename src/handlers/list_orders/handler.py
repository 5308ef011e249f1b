"""
Lambda handler responsible for the admin order listing.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.filters.page_pagination import PagePagination
from core.models.documents import ListOrdersResponse, Order
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_query_params
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListOrdersRequest
from .service import ListOrdersService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list all orders.

    Supports:
    - Status, amount and order date filters
    - Search on product titles or order number
    - Whitelisted sorting and page-number pagination
    """
    logger.info(
        "Received order list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    request = validate_request(ListOrdersRequest, get_query_params(event))

    orders, total_count, _ = ListOrdersService().list_orders(
        criteria=request.to_criteria(),
        sort=request.sort,
        page=request.page,
        page_size=request.limit,
    )

    response = ListOrdersResponse(
        orders=[Order.model_validate(order) for order in orders],
        pagination=PagePagination.get_page_info(request.page, request.limit, total_count),
    )

    return ResponseBuilder.ok(response.to_response())
