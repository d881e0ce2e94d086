import json
import pytest
from unittest.mock import Mock, patch

from awpaki.errors import Unauthorized, UnprocessableEntity
from lambda_function import (
    lambda_handler,
    list_users,
    process_users_request,
)


def make_context(request_id: str) -> Mock:
    context = Mock()
    context.aws_request_id = request_id
    context.function_name = "users-function"
    context.function_version = "$LATEST"
    context.memory_limit_in_mb = 128
    context.invoked_function_arn = "arn:aws:lambda:us-east-1:123456789012:function:users-function"
    context.get_remaining_time_in_millis.return_value = 30000
    return context


def make_event(query=None, headers=None):
    return {
        "path": "/users",
        "httpMethod": "GET",
        "headers": {"Authorization": "Bearer token", "User-Agent": "test-agent"} if headers is None else headers,
        "queryStringParameters": query,
        "requestContext": {"requestId": "test-request-id"},
    }


class TestListUsers:
    """Test cases for list_users function."""

    def test_list_users_without_filter(self):
        """Test that every user is returned when no status is given."""
        users = list_users(limit=10)

        assert len(users) == 3
        assert users[0]["id"] == "1"
        assert users[0]["email"] == "john@example.com"

    def test_list_users_filters_by_status(self):
        """Test that users are filtered by status."""
        users = list_users(limit=10, status="active")

        assert [user["id"] for user in users] == ["1", "3"]

    def test_list_users_respects_limit(self):
        """Test that the limit caps the number of users."""
        assert len(list_users(limit=1)) == 1


class TestProcessUsersRequest:
    """Test cases for process_users_request function."""

    def test_default_limit_applied(self):
        """Test that a missing query string falls back to the default limit."""
        result = process_users_request(make_event())

        assert result["count"] == 3
        assert result["request_id"] == "test-request-id"
        assert "timestamp" in result

    def test_query_parameters_decoded(self):
        """Test that limit and status are decoded from the query string."""
        result = process_users_request(make_event(query={"limit": "1", "status": "ACTIVE"}))

        assert result["count"] == 1
        assert result["users"][0]["status"] == "active"

    def test_header_matched_case_insensitively(self):
        """Test that the authorization header is found regardless of case."""
        result = process_users_request(make_event(headers={"AUTHORIZATION": "Bearer token"}))

        assert result["count"] == 3

    def test_missing_authorization_raises_unauthorized(self):
        """Test that a missing authorization header raises a 401."""
        with pytest.raises(Unauthorized) as exc_info:
            process_users_request(make_event(headers={}))

        assert exc_info.value.message == "Authorization header is required"

    def test_invalid_limit_raises_unprocessable_entity(self):
        """Test that an out of range limit is rejected."""
        with pytest.raises(UnprocessableEntity) as exc_info:
            process_users_request(make_event(query={"limit": "500"}))

        assert exc_info.value.message == "Page Limit has invalid format"
        assert exc_info.value.data == {
            "errors": {"queryStringParameters.limit": [422, "Page Limit has invalid format"]}
        }


class TestLambdaHandler:
    """Test cases for lambda_handler function."""

    def test_lambda_handler_success(self):
        """Test successful lambda handler execution."""
        response = lambda_handler(make_event(), make_context("lambda-request-id"))

        assert response["statusCode"] == 200
        assert response["headers"]["Content-Type"] == "application/json"
        assert response["headers"]["X-Request-ID"] == "lambda-request-id"
        assert response["headers"]["Access-Control-Allow-Origin"] == "*"

        body = json.loads(response["body"])
        assert body["count"] == 3
        assert body["request_id"] == "test-request-id"

    def test_lambda_handler_validation_error(self):
        """Test that validation failures become an API Gateway error response."""
        event = make_event(query={"limit": "0", "status": "deleted"}, headers={})

        response = lambda_handler(event, make_context("error-request-id"))

        assert response["statusCode"] == 422
        body = json.loads(response["body"])
        assert body["message"] == "Multiple validation errors (1×401, 2×422)"
        assert set(body["data"]["errors"]) == {
            "headers.authorization",
            "queryStringParameters.limit",
            "queryStringParameters.status",
        }

    def test_lambda_handler_unexpected_error_propagates(self):
        """Test that errors other than HttpError are re-raised."""
        with patch(
            "lambda_function.process_users_request",
            side_effect=RuntimeError("Database error"),
        ):
            with pytest.raises(RuntimeError, match="Database error"):
                lambda_handler(make_event(), make_context("crash-request-id"))
