"""
Error handlers for the different Lambda trigger types.

Synchronous HTTP triggers turn an HttpError into a response; asynchronous triggers
get a structured error payload; anything that is not an HttpError is re-raised so
the platform retry / dead-letter behaviour still applies.
"""

from typing import Any, Dict, List, NoReturn, Optional

from awpaki.errors.http_error import HttpError
from awpaki.handlers.utils.observability import logger


def _log_http_error(prefix: str, error: HttpError) -> None:
    logger.error(
        f"{prefix} HttpError",
        extra={
            "error_name": error.name,
            "error_message": error.message,
            "status_code": error.status_code,
            "data": error.data,
        },
    )


def handle_api_gateway_error(error: BaseException) -> Dict[str, Any]:
    """
    Handle errors in API Gateway (REST API) Lambda functions.

    Args:
        error: The error that occurred

    Returns:
        API Gateway proxy response for an HttpError

    Raises:
        The original error when it is not an HttpError

    Example:
        def lambda_handler(event, context):
            try:
                params = extract_event_params(schema, event)
                ...
            except Exception as error:
                return handle_api_gateway_error(error)
    """
    if isinstance(error, HttpError):
        _log_http_error("API Gateway", error)
        return error.to_api_gateway_response()

    logger.error("API Gateway unknown error", exc_info=error)
    raise error


def handle_api_gateway_error_v2(
    error: BaseException,
    cookies: Optional[List[str]] = None,
) -> Dict[str, Any]:
    """Handle errors in API Gateway HTTP API (payload format 2.0) Lambda functions."""
    if isinstance(error, HttpError):
        _log_http_error("API Gateway V2", error)
        return error.to_api_gateway_response_v2(cookies=cookies)

    logger.error("API Gateway V2 unknown error", exc_info=error)
    raise error


def handle_generic_error(error: BaseException) -> Dict[str, Any]:
    """
    Handle errors in non-HTTP Lambda triggers.

    Use this for SQS, SNS, EventBridge, S3, DynamoDB Streams and other
    asynchronous triggers. Errors that are not HttpError are re-raised so the
    invocation fails and the platform retries it.
    """
    if isinstance(error, HttpError):
        _log_http_error("Lambda", error)
        return error.to_generic_response()

    logger.error("Lambda unknown error", exc_info=error)
    raise error


handle_sqs_error = handle_generic_error
handle_sns_error = handle_generic_error
handle_event_bridge_error = handle_generic_error
handle_s3_error = handle_generic_error
handle_dynamodb_stream_error = handle_generic_error


def handle_app_sync_error(error: BaseException) -> NoReturn:
    """
    Handle errors in AppSync resolver Lambda functions.

    AppSync expects errors to be raised so it can report them in the GraphQL
    errors array, so this always re-raises after logging.
    """
    if isinstance(error, HttpError):
        _log_http_error("AppSync", error)

    raise error
