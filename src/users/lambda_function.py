import json
from datetime import datetime, timezone
from typing import Dict, Any, List

from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.metrics import MetricUnit
from aws_lambda_powertools.utilities.typing import LambdaContext

from awpaki.decoders import create_enum, limited_integer, trimmed_string
from awpaki.errors import HttpStatus, handle_api_gateway_error
from awpaki.extractors import ParameterConfig, extract_event_params
from awpaki.handlers.utils.observability import logger, metrics, tracer
from awpaki.loggers import log_api_gateway_event

USERS: List[Dict[str, str]] = [
    {
        "id": "1",
        "name": "John Doe",
        "email": "john@example.com",
        "status": "active",
        "createdAt": "2024-01-15T10:30:00Z",
    },
    {
        "id": "2",
        "name": "Jane Smith",
        "email": "jane@example.com",
        "status": "inactive",
        "createdAt": "2024-01-16T14:45:00Z",
    },
    {
        "id": "3",
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "status": "active",
        "createdAt": "2024-01-17T09:15:00Z",
    },
]

LIST_USERS_SCHEMA = {
    "headers": {
        "authorization": ParameterConfig(
            label="Authorization",
            required=True,
            case_insensitive=True,
            decoder=trimmed_string,
            status_code_error=HttpStatus.UNAUTHORIZED,
            not_found_error="Authorization header is required",
        ),
    },
    "queryStringParameters": {
        "limit": ParameterConfig(label="Page Limit", decoder=limited_integer(1, 100), default=10),
        "status": ParameterConfig(label="Status", decoder=create_enum(["active", "inactive"])),
    },
}


@tracer.capture_method
def list_users(limit: int, status: str | None = None) -> List[Dict[str, str]]:
    """Return up to ``limit`` users, optionally filtered by status."""
    users = [user for user in USERS if status is None or user["status"] == status]
    tracer.put_annotation("user_count", str(len(users)))
    return users[:limit]


@tracer.capture_method
def process_users_request(event: Dict[str, Any]) -> Dict[str, Any]:
    """Validate the request and build the response payload."""
    params = extract_event_params(LIST_USERS_SCHEMA, event)
    users = list_users(params["limit"], params.get("status"))

    logger.info("Users listed", extra={"user_count": len(users), "status": params.get("status")})

    return {
        "users": users,
        "count": len(users),
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "request_id": (event.get("requestContext") or {}).get("requestId", "unknown"),
    }


@metrics.log_metrics(capture_cold_start_metric=True)
@tracer.capture_lambda_handler
@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
def lambda_handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Users Lambda function handler.

    Args:
        event: API Gateway proxy event
        context: Lambda context object

    Returns:
        API Gateway response with the users, or the HttpError response on
        validation failure
    """
    log_api_gateway_event(event, context)
    metrics.add_metric(name="RequestCount", unit=MetricUnit.Count, value=1)

    try:
        response_data = process_users_request(event)
    except Exception as error:
        metrics.add_metric(name="ErrorCount", unit=MetricUnit.Count, value=1)
        return handle_api_gateway_error(error)

    metrics.add_metric(name="UserCount", unit=MetricUnit.Count, value=response_data["count"])

    return {
        "statusCode": HttpStatus.OK.value,
        "headers": {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": "*",
            "X-Request-ID": context.aws_request_id,
        },
        "body": json.dumps(response_data),
    }
