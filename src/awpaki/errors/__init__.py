"""
HTTP errors for Lambda handlers.

Error classes mapped to HTTP status codes, the create_http_error factory and
trigger specific error handlers.
"""

from awpaki.errors.handlers import (
    handle_api_gateway_error,
    handle_api_gateway_error_v2,
    handle_app_sync_error,
    handle_dynamodb_stream_error,
    handle_event_bridge_error,
    handle_generic_error,
    handle_s3_error,
    handle_sns_error,
    handle_sqs_error,
)
from awpaki.errors.http_error import HttpError
from awpaki.errors.http_errors import (
    HTTP_ERROR_MAP,
    BadGateway,
    BadRequest,
    Conflict,
    Forbidden,
    InternalServerError,
    NotFound,
    NotImplementedHttpError,
    PreconditionFailed,
    ServiceUnavailable,
    TooManyRequests,
    Unauthorized,
    UnprocessableEntity,
    create_http_error,
)
from awpaki.errors.http_status import (
    HttpErrorStatus,
    HttpStatus,
    get_http_status_name,
    is_valid_http_error_status,
    is_valid_http_status,
)

__all__ = [
    # Base class and factory
    "HttpError",
    "HTTP_ERROR_MAP",
    "create_http_error",

    # Error classes
    "BadRequest",
    "Unauthorized",
    "Forbidden",
    "NotFound",
    "Conflict",
    "PreconditionFailed",
    "UnprocessableEntity",
    "TooManyRequests",
    "InternalServerError",
    "NotImplementedHttpError",
    "BadGateway",
    "ServiceUnavailable",

    # Status codes
    "HttpStatus",
    "HttpErrorStatus",
    "is_valid_http_status",
    "is_valid_http_error_status",
    "get_http_status_name",

    # Handlers
    "handle_api_gateway_error",
    "handle_api_gateway_error_v2",
    "handle_generic_error",
    "handle_sqs_error",
    "handle_sns_error",
    "handle_event_bridge_error",
    "handle_s3_error",
    "handle_dynamodb_stream_error",
    "handle_app_sync_error",
]
