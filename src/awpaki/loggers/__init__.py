"""Structured event logging per Lambda trigger type."""

from awpaki.loggers.lambda_events import (
    log_api_gateway_event,
    log_app_sync_event,
    log_dynamodb_stream_event,
    log_event_bridge_event,
    log_s3_event,
    log_sns_event,
    log_sqs_event,
)

__all__ = [
    "log_api_gateway_event",
    "log_sqs_event",
    "log_sns_event",
    "log_event_bridge_event",
    "log_s3_event",
    "log_dynamodb_stream_event",
    "log_app_sync_event",
]
