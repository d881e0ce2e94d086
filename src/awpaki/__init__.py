"""
AWS Lambda handler toolkit.

- extractors: schema driven parameter extraction and validation
- decoders: reusable value decoders for the extractor
- parsers: JSON request body parsing
- errors: HttpError hierarchy and per-trigger error handlers
- loggers: structured event logging per trigger type
- clients: boto3 clients with automatic retry

Everything is built on AWS Lambda Powertools for logging and tracing and on
Pydantic for configuration models.
"""

__version__ = "1.0.0"
__description__ = "Utilities for AWS Lambda handlers"

from awpaki.decoders import (
    alphanumeric_id,
    create_enum,
    enum_of,
    iso_date_string,
    json_string,
    limited_integer,
    optional_integer,
    optional_trimmed_string,
    positive_integer,
    string_array,
    string_to_boolean,
    trimmed_lower_string,
    trimmed_string,
    url_encoded_json,
    valid_email,
)
from awpaki.errors import (
    BadGateway,
    BadRequest,
    Conflict,
    Forbidden,
    HttpError,
    HttpErrorStatus,
    HttpStatus,
    InternalServerError,
    NotFound,
    NotImplementedHttpError,
    PreconditionFailed,
    ServiceUnavailable,
    TooManyRequests,
    Unauthorized,
    UnprocessableEntity,
    create_http_error,
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
from awpaki.extractors import EventSchema, ParameterConfig, ParameterType, extract_event_params
from awpaki.handlers.utils.observability import logger, metrics, tracer
from awpaki.loggers import (
    log_api_gateway_event,
    log_app_sync_event,
    log_dynamodb_stream_event,
    log_event_bridge_event,
    log_s3_event,
    log_sns_event,
    log_sqs_event,
)
from awpaki.parsers import parse_json_body

__all__ = [
    # Extraction
    "EventSchema",
    "ParameterConfig",
    "ParameterType",
    "extract_event_params",
    "parse_json_body",

    # Decoders
    "trimmed_string",
    "trimmed_lower_string",
    "alphanumeric_id",
    "positive_integer",
    "limited_integer",
    "url_encoded_json",
    "json_string",
    "valid_email",
    "create_enum",
    "enum_of",
    "string_array",
    "string_to_boolean",
    "iso_date_string",
    "optional_trimmed_string",
    "optional_integer",

    # Errors
    "HttpError",
    "HttpStatus",
    "HttpErrorStatus",
    "create_http_error",
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
    "handle_api_gateway_error",
    "handle_api_gateway_error_v2",
    "handle_generic_error",
    "handle_sqs_error",
    "handle_sns_error",
    "handle_event_bridge_error",
    "handle_s3_error",
    "handle_dynamodb_stream_error",
    "handle_app_sync_error",

    # Event loggers
    "log_api_gateway_event",
    "log_sqs_event",
    "log_sns_event",
    "log_event_bridge_event",
    "log_s3_event",
    "log_dynamodb_stream_event",
    "log_app_sync_event",

    # Observability
    "logger",
    "tracer",
    "metrics",
]
