"""
Lambda handler responsible for the admin customer listing.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.filters.page_pagination import PagePagination
from core.models.documents import Customer, ListCustomersResponse
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_query_params
from core.utils.response import ResponseBuilder
from core.utils.validators import validate_request

from .models import ListCustomersRequest
from .service import ListCustomersService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle requests to list customers.

    Supports:
    - Date, amount and order count range filters
    - Search on customer name and last order delivery address
    - Whitelisted sorting and page-number pagination

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received customer list request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    request = validate_request(ListCustomersRequest, get_query_params(event))

    customers, total_count, _ = ListCustomersService().list_customers(
        criteria=request.to_criteria(),
        sort=request.sort,
        page=request.page,
        page_size=request.limit,
    )

    response = ListCustomersResponse(
        customers=[Customer.model_validate(customer) for customer in customers],
        pagination=PagePagination.get_page_info(request.page, request.limit, total_count),
    )

    return ResponseBuilder.ok(response.to_response())
