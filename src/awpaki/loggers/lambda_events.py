"""
Structured logging of incoming Lambda events.

One function per trigger type. Each writes an INFO summary of the invocation,
an INFO line per record, and DEBUG lines carrying the full payloads, through the
shared Powertools logger.

Example:
    @logger.inject_lambda_context
    def lambda_handler(event, context):
        log_sqs_event(event, context, additional_data={"tenant": "acme"})
        ...
"""

from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import unquote_plus

from aws_lambda_powertools.utilities.typing import LambdaContext

from awpaki.handlers.utils.observability import logger

PREVIEW_LENGTH = 100


def _preview(text: Optional[str]) -> str:
    return f"{(text or '')[:PREVIEW_LENGTH]}..."


def _invocation_data(context: LambdaContext, additional_data: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    data = {
        "requestId": context.aws_request_id,
        "functionName": context.function_name,
        "functionVersion": context.function_version,
    }
    # Nested so caller keys cannot collide with LogRecord attributes
    if additional_data is not None:
        data["additionalData"] = additional_data
    return data


def _records(event: Mapping[str, Any]) -> List[Dict[str, Any]]:
    return event.get("Records") or []


def _table_name(stream_arn: Optional[str]) -> Optional[str]:
    # arn:aws:dynamodb:region:account:table/<name>/stream/<label>
    if not stream_arn or "/" not in stream_arn:
        return None
    return stream_arn.split("/")[1]


def log_api_gateway_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an API Gateway (REST API) proxy event."""
    request_context = event.get("requestContext") or {}
    identity = request_context.get("identity") or {}
    identifier = f"{context.function_name}:{request_context.get('requestId')}"

    log_data = {
        **_invocation_data(context, additional_data),
        "httpMethod": event.get("httpMethod"),
        "path": event.get("path"),
        "resource": event.get("resource"),
        "stage": request_context.get("stage"),
        "sourceIp": identity.get("sourceIp"),
        "userAgent": identity.get("userAgent"),
        "apiId": request_context.get("apiId"),
        "requestTimeEpoch": request_context.get("requestTimeEpoch"),
        "queryStringParameters": event.get("queryStringParameters"),
        "pathParameters": event.get("pathParameters"),
    }

    logger.info(f"Entry API Gateway {identifier}", extra=log_data)
    logger.debug(f"API Gateway Headers {identifier}", extra={"headers": event.get("headers")})


def log_sqs_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an SQS event and each of its messages."""
    records = _records(event)
    identifier = f"{context.function_name}:{context.aws_request_id}"

    logger.info(
        f"Entry SQS Event {identifier}",
        extra={
            **_invocation_data(context, additional_data),
            "recordCount": len(records),
            "queueArn": records[0].get("eventSourceARN") if records else None,
        },
    )

    for index, record in enumerate(records, start=1):
        record_identifier = f"{identifier}:{record.get('messageId')}"
        logger.info(
            f"SQS Record {record_identifier}",
            extra={
                "recordIndex": index,
                "totalRecords": len(records),
                "messageId": record.get("messageId"),
                "body": _preview(record.get("body")),
                "attributes": record.get("attributes"),
                "messageAttributes": record.get("messageAttributes"),
                "md5OfBody": record.get("md5OfBody"),
                "eventSourceARN": record.get("eventSourceARN"),
                "awsRegion": record.get("awsRegion"),
            },
        )
        logger.debug(
            f"SQS Record Full Body {record_identifier}",
            extra={
                "messageId": record.get("messageId"),
                "body": record.get("body"),
                "receiptHandle": record.get("receiptHandle"),
            },
        )


def log_sns_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an SNS event and each of its notifications."""
    records = _records(event)
    identifier = f"{context.function_name}:{context.aws_request_id}"

    logger.info(
        f"Entry SNS Event {identifier}",
        extra={
            **_invocation_data(context, additional_data),
            "recordCount": len(records),
            "topicArn": (records[0].get("Sns") or {}).get("TopicArn") if records else None,
        },
    )

    for index, record in enumerate(records, start=1):
        sns = record.get("Sns") or {}
        record_identifier = f"{identifier}:{sns.get('MessageId')}"
        logger.info(
            f"SNS Record {record_identifier}",
            extra={
                "recordIndex": index,
                "totalRecords": len(records),
                "messageId": sns.get("MessageId"),
                "subject": sns.get("Subject"),
                "messagePreview": _preview(sns.get("Message")),
                "timestamp": sns.get("Timestamp"),
                "topicArn": sns.get("TopicArn"),
                "type": sns.get("Type"),
                "messageAttributes": sns.get("MessageAttributes"),
            },
        )
        logger.debug(
            f"SNS Record Full Message {record_identifier}",
            extra={"messageId": sns.get("MessageId"), "fullMessage": sns.get("Message")},
        )


def log_event_bridge_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an EventBridge event, scheduled (cron) or custom."""
    identifier = f"{context.function_name}:{event.get('id')}"
    detail = event.get("detail") or {}

    log_data = {
        **_invocation_data(context, additional_data),
        "eventId": event.get("id"),
        "eventVersion": event.get("version"),
        "eventTime": event.get("time"),
        "eventSource": event.get("source"),
        "detailType": event.get("detail-type"),
        "region": event.get("region"),
        "account": event.get("account"),
        "resources": event.get("resources"),
        "detailKeys": ", ".join(detail) if isinstance(detail, Mapping) else "",
    }

    logger.info(f"Entry EventBridge {identifier}", extra=log_data)
    logger.debug(f"EventBridge Detail {identifier}", extra={"detail": event.get("detail")})


def log_s3_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log an S3 notification event and each object it refers to."""
    records = _records(event)
    identifier = f"{context.function_name}:{context.aws_request_id}"
    first_bucket = ((records[0].get("s3") or {}).get("bucket") or {}) if records else {}

    logger.info(
        f"Entry S3 Event {identifier}",
        extra={
            **_invocation_data(context, additional_data),
            "recordCount": len(records),
            "bucketName": first_bucket.get("name"),
        },
    )

    for index, record in enumerate(records, start=1):
        s3 = record.get("s3") or {}
        bucket = s3.get("bucket") or {}
        s3_object = s3.get("object") or {}
        s3_request_id = (record.get("responseElements") or {}).get("x-amz-request-id") or "unknown"
        record_identifier = f"{identifier}:{s3_request_id}"

        logger.info(
            f"S3 Record {record_identifier}",
            extra={
                "recordIndex": index,
                "totalRecords": len(records),
                "eventName": record.get("eventName"),
                "eventTime": record.get("eventTime"),
                "awsRegion": record.get("awsRegion"),
                "bucketName": bucket.get("name"),
                "bucketArn": bucket.get("arn"),
                # S3 keys arrive URL encoded with spaces as "+"
                "objectKey": unquote_plus(s3_object.get("key") or ""),
                "objectSize": s3_object.get("size"),
                "objectETag": s3_object.get("eTag"),
                "objectVersionId": s3_object.get("versionId"),
                "requestId": s3_request_id,
                "sourceIp": (record.get("requestParameters") or {}).get("sourceIPAddress"),
            },
        )


def log_dynamodb_stream_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log a DynamoDB Streams event and each change record."""
    records = _records(event)
    identifier = f"{context.function_name}:{context.aws_request_id}"
    stream_arn = records[0].get("eventSourceARN") if records else None

    logger.info(
        f"Entry DynamoDB Stream Event {identifier}",
        extra={
            **_invocation_data(context, additional_data),
            "recordCount": len(records),
            "tableName": _table_name(stream_arn),
            "streamArn": stream_arn,
        },
    )

    for index, record in enumerate(records, start=1):
        change = record.get("dynamodb") or {}
        record_identifier = f"{identifier}:{record.get('eventID')}"
        new_image = change.get("NewImage")
        old_image = change.get("OldImage")

        logger.info(
            f"DynamoDB Stream Record {record_identifier}",
            extra={
                "recordIndex": index,
                "totalRecords": len(records),
                "eventID": record.get("eventID"),
                "eventName": record.get("eventName"),
                "eventVersion": record.get("eventVersion"),
                "awsRegion": record.get("awsRegion"),
                "tableName": _table_name(record.get("eventSourceARN")),
                "approximateCreationDateTime": change.get("ApproximateCreationDateTime"),
                "streamViewType": change.get("StreamViewType"),
                "sequenceNumber": change.get("SequenceNumber"),
                "sizeBytes": change.get("SizeBytes"),
                "keys": ", ".join(change.get("Keys") or {}),
                "newImageKeys": ", ".join(new_image) if new_image else None,
                "oldImageKeys": ", ".join(old_image) if old_image else None,
            },
        )
        logger.debug(
            f"DynamoDB Stream Full Data {record_identifier}",
            extra={
                "eventID": record.get("eventID"),
                "keys": change.get("Keys"),
                "newImage": new_image,
                "oldImage": old_image,
            },
        )


def _app_sync_identity(identity: Optional[Mapping[str, Any]]) -> tuple:
    if not identity:
        return "anonymous", "none"

    value = identity.get("sub") or identity.get("username") or identity.get("resolverContext") or "anonymous"
    if identity.get("sub"):
        identity_type = "Cognito"
    elif identity.get("accountId"):
        identity_type = "IAM"
    elif identity.get("resolverContext"):
        identity_type = "Lambda"
    else:
        identity_type = "API_KEY"
    return value, identity_type


def log_app_sync_event(
    event: Mapping[str, Any],
    context: LambdaContext,
    additional_data: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Log an AppSync resolver event.

    Works for Query, Mutation and field resolvers; the operation is read from
    info.parentTypeName. The identity type is derived from the identity fields:
    Cognito (sub), IAM (accountId), Lambda (resolverContext) or API_KEY.
    """
    identifier = f"{context.function_name}:{context.aws_request_id}"
    info = event.get("info") or {}
    source = event.get("source")
    identity_value, identity_type = _app_sync_identity(event.get("identity"))

    log_data = {
        **_invocation_data(context, additional_data),
        "operation": info.get("parentTypeName"),
        "fieldName": info.get("fieldName"),
        "selectionSetList": info.get("selectionSetList"),
        "identity": identity_value,
        "identityType": identity_type,
        "argumentKeys": list(event.get("arguments") or {}),
        "hasSource": bool(source),
        "sourceKeys": list(source) if isinstance(source, Mapping) and source else None,
    }

    logger.info(f"Entry AppSync {identifier}", extra=log_data)
    logger.debug(
        f"AppSync Full Data {identifier}",
        extra={
            "arguments": event.get("arguments"),
            "source": source,
            "requestHeaders": (event.get("request") or {}).get("headers"),
            "stash": event.get("stash"),
            "prev": (event.get("prev") or {}).get("result"),
        },
    )
