"""
Lambda handler responsible for deleting a customer.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext

from core.models.documents import Customer
from core.utils.auth import require_admin
from core.utils.decorators import api_gateway_handler
from core.utils.request import get_path_param
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_object_id

from .service import DeleteCustomerService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle customer deletion requests.

    Returns the deleted customer with its references left as ids.
    """
    logger.info(
        "Received customer delete request",
        extra={
            "path_params": event.get("pathParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    require_admin(event)
    customer_id = parse_object_id(get_path_param(event, "id"))

    customer = DeleteCustomerService().delete_customer(customer_id)

    return ResponseBuilder.ok(Customer.model_validate(customer).to_response())
