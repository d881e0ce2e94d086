"""
Pytest configuration and shared fixtures for awpaki.

This module provides common test fixtures and configuration used across
unit and integration tests: environment setup, sample Lambda events for each
trigger type, a mock Lambda context and moto backed AWS clients.
"""

import json
import os
import pytest
from typing import Any, Dict
from unittest.mock import Mock

from botocore.exceptions import ClientError
from moto import mock_aws

# Read before awpaki is imported, so every lookup sees the current environment
os.environ["LAMBDA_ENV_MODELER_DISABLE_CACHE"] = "true"

from awpaki.clients import dynamodb_client, lambda_client, s3_client, sns_client, sqs_client  # noqa: E402


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update({
        "AWS_DEFAULT_REGION": "us-east-1",
        "AWS_REGION": "us-east-1",
        "AWS_ACCESS_KEY_ID": "test",
        "AWS_SECRET_ACCESS_KEY": "test",
        "POWERTOOLS_SERVICE_NAME": "test-awpaki",
        "POWERTOOLS_METRICS_NAMESPACE": "TestAwpaki",
        "LOG_LEVEL": "DEBUG",
        "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    })
    # Endpoint overrides would send moto traffic to a real endpoint
    for key in [key for key in os.environ if key.startswith("AWS_ENDPOINT_URL")]:
        del os.environ[key]


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset client singletons between tests."""
    clients = [dynamodb_client, sqs_client, sns_client, s3_client, lambda_client]
    for client in clients:
        client.reset()
    yield
    for client in clients:
        client.reset()


@pytest.fixture
def lambda_context():
    """Create a mock Lambda context for testing."""
    context = Mock()
    context.function_name = "test-lambda-function"
    context.function_version = "1"
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:test-lambda-function"
    context.memory_limit_in_mb = "512"
    context.get_remaining_time_in_millis.return_value = 30000
    context.aws_request_id = "test-request-id-123"
    context.log_group_name = "/aws/lambda/test-lambda-function"
    context.log_stream_name = "2024/01/01/[$LATEST]test123"
    return context


# Sample event fixtures
@pytest.fixture
def api_gateway_event() -> Dict[str, Any]:
    """Create a sample API Gateway event for testing."""
    return {
        "httpMethod": "POST",
        "path": "/api/users/123",
        "resource": "/api/users/{id}",
        "headers": {
            "Content-Type": "application/json",
            "Authorization": "Bearer test-token",
            "User-Agent": "test-agent/1.0",
        },
        "body": '{"email": "Test@Example.com", "age": 30}',
        "requestContext": {
            "requestId": "api-request-id-456",
            "accountId": "123456789012",
            "apiId": "abc123",
            "stage": "test",
            "httpMethod": "POST",
            "path": "/api/users/123",
            "protocol": "HTTP/1.1",
            "requestTime": "2024-01-01T12:00:00.000Z",
            "requestTimeEpoch": 1704110400000,
            "identity": {
                "sourceIp": "127.0.0.1",
                "userAgent": "test-agent/1.0",
            },
        },
        "pathParameters": {"id": "123"},
        "queryStringParameters": {"status": "ACTIVE", "limit": "20"},
        "multiValueQueryStringParameters": None,
        "stageVariables": None,
        "isBase64Encoded": False,
    }


@pytest.fixture
def sqs_event() -> Dict[str, Any]:
    """Create a sample SQS event with two messages."""
    return {
        "Records": [
            {
                "messageId": f"message-{index}",
                "receiptHandle": f"receipt-{index}",
                "body": json.dumps({"orderId": f"order-{index}", "padding": "x" * 200}),
                "attributes": {"ApproximateReceiveCount": "1"},
                "messageAttributes": {},
                "md5OfBody": "d41d8cd98f00b204e9800998ecf8427e",
                "eventSource": "aws:sqs",
                "eventSourceARN": "arn:aws:sqs:us-east-1:123456789012:orders-queue",
                "awsRegion": "us-east-1",
            }
            for index in (1, 2)
        ]
    }


@pytest.fixture
def sns_event() -> Dict[str, Any]:
    """Create a sample SNS event."""
    return {
        "Records": [
            {
                "EventSource": "aws:sns",
                "Sns": {
                    "Type": "Notification",
                    "MessageId": "sns-message-1",
                    "TopicArn": "arn:aws:sns:us-east-1:123456789012:orders-topic",
                    "Subject": "Order created",
                    "Message": '{"orderId": "order-1"}',
                    "Timestamp": "2024-01-01T12:00:00.000Z",
                    "MessageAttributes": {},
                },
            }
        ]
    }


@pytest.fixture
def event_bridge_event() -> Dict[str, Any]:
    """Create a sample EventBridge event."""
    return {
        "version": "0",
        "id": "event-id-789",
        "detail-type": "Order Created",
        "source": "com.example.orders",
        "account": "123456789012",
        "time": "2024-01-01T12:00:00Z",
        "region": "us-east-1",
        "resources": [],
        "detail": {"orderId": "order-1", "amount": 42},
    }


@pytest.fixture
def s3_event() -> Dict[str, Any]:
    """Create a sample S3 put notification."""
    return {
        "Records": [
            {
                "eventVersion": "2.1",
                "eventSource": "aws:s3",
                "awsRegion": "us-east-1",
                "eventTime": "2024-01-01T12:00:00.000Z",
                "eventName": "ObjectCreated:Put",
                "requestParameters": {"sourceIPAddress": "127.0.0.1"},
                "responseElements": {"x-amz-request-id": "s3-request-id"},
                "s3": {
                    "bucket": {"name": "uploads", "arn": "arn:aws:s3:::uploads"},
                    "object": {"key": "reports/monthly+report%282024%29.csv", "size": 1024, "eTag": "etag"},
                },
            }
        ]
    }


@pytest.fixture
def dynamodb_stream_event() -> Dict[str, Any]:
    """Create a sample DynamoDB Streams event."""
    return {
        "Records": [
            {
                "eventID": "stream-event-1",
                "eventName": "MODIFY",
                "eventVersion": "1.1",
                "eventSource": "aws:dynamodb",
                "awsRegion": "us-east-1",
                "eventSourceARN": "arn:aws:dynamodb:us-east-1:123456789012:table/Users/stream/2024-01-01T00:00:00.000",
                "dynamodb": {
                    "ApproximateCreationDateTime": 1704110400,
                    "Keys": {"id": {"S": "123"}},
                    "NewImage": {"id": {"S": "123"}, "status": {"S": "active"}},
                    "OldImage": {"id": {"S": "123"}, "status": {"S": "inactive"}},
                    "SequenceNumber": "111",
                    "SizeBytes": 26,
                    "StreamViewType": "NEW_AND_OLD_IMAGES",
                },
            }
        ]
    }


@pytest.fixture
def app_sync_event() -> Dict[str, Any]:
    """Create a sample AppSync resolver event authenticated with Cognito."""
    return {
        "arguments": {"id": "123", "input": {"name": "John"}},
        "identity": {"sub": "cognito-user-sub", "username": "john"},
        "source": None,
        "request": {"headers": {"x-api-key": "secret"}},
        "info": {
            "parentTypeName": "Mutation",
            "fieldName": "updateUser",
            "selectionSetList": ["id", "name"],
        },
        "prev": None,
        "stash": {},
    }


# AWS fixtures
@pytest.fixture
def aws():
    """Run the test against moto's in-memory AWS backends."""
    with mock_aws():
        yield


# Error simulation fixtures
@pytest.fixture
def client_error():
    """Factory for botocore ClientError instances."""

    def create_error(error_code: str, message: str = "Test error", operation_name: str = "TestOperation"):
        return ClientError(
            error_response={
                "Error": {
                    "Code": error_code,
                    "Message": message,
                }
            },
            operation_name=operation_name,
        )

    return create_error


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Add markers based on test location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
