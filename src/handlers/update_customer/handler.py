"""
Lambda handler responsible for updating a customer's name and phone.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Customer
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_json_body, get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_object_id, validate_request

from .models import UpdateCustomerRequest
from .service import UpdateCustomerService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """Handle customer update requests."""
    logger.info(
        "Received customer update request",
        extra={
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    customer_id = parse_object_id(get_path_param(event, "id"))
    request = validate_request(UpdateCustomerRequest, get_json_body(event))

    customer = UpdateCustomerService().update_customer(customer_id, changes=request.changes())

    return ResponseBuilder.ok(Customer.model_validate(customer).to_response())
