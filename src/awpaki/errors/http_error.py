"""
Base HTTP error with AWS Lambda integration.

HttpError carries a status code, optional structured data and optional headers,
and knows how to render itself for API Gateway (REST and HTTP APIs) and for
non-HTTP triggers.
"""

import json
import os
from typing import Any, Dict, List, Optional, Union

HeaderValue = Union[str, bool, int, float]


class HttpError(Exception):
    """Base exception class for HTTP errors."""

    def __init__(
        self,
        message: str,
        status_code: int,
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = int(status_code)
        self.data = data
        self.headers = headers

        # Lambda environment metadata, empty values are skipped when rendering
        self.lambda_metadata = {
            "logStreamName": os.environ.get("AWS_LAMBDA_LOG_STREAM_NAME"),
            "executionEnv": os.environ.get("AWS_EXECUTION_ENV"),
            "functionName": os.environ.get("AWS_LAMBDA_FUNCTION_NAME"),
        }

    @property
    def name(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return f"{self.name}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.name}(message={self.message!r}, status_code={self.status_code})"

    def _response_body(self) -> str:
        body: Dict[str, Any] = {"message": self.message}

        if self.data:
            body["data"] = self.data

        metadata = {key: value for key, value in self.lambda_metadata.items() if value}
        if metadata:
            body["$x-custom-metadata"] = metadata

        return json.dumps(body, default=str)

    def _response_headers(self, additional_headers: Optional[Dict[str, HeaderValue]]) -> Dict[str, HeaderValue]:
        headers: Dict[str, HeaderValue] = {"Content-Type": "application/json"}
        if self.headers:
            headers.update(self.headers)
        if additional_headers:
            headers.update(additional_headers)
        return headers

    def to_api_gateway_response(
        self,
        additional_headers: Optional[Dict[str, HeaderValue]] = None,
    ) -> Dict[str, Any]:
        """
        Render the error as an API Gateway (REST API / payload v1) proxy response.

        Args:
            additional_headers: Headers merged over the error's own headers

        Returns:
            Dictionary with statusCode, headers and a JSON encoded body
        """
        return {
            "statusCode": self.status_code,
            "headers": self._response_headers(additional_headers),
            "body": self._response_body(),
        }

    def to_api_gateway_response_v2(
        self,
        additional_headers: Optional[Dict[str, HeaderValue]] = None,
        cookies: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        """
        Render the error as an API Gateway HTTP API (payload v2) response.

        Args:
            additional_headers: Headers merged over the error's own headers
            cookies: Set-Cookie values, omitted from the response when empty

        Returns:
            Dictionary with statusCode, headers, body and optionally cookies
        """
        response = self.to_api_gateway_response(additional_headers)
        if cookies:
            response["cookies"] = list(cookies)
        return response

    def to_generic_response(self) -> Dict[str, Any]:
        """Structured error for non-HTTP triggers (SQS, SNS, EventBridge, S3, DynamoDB Streams)."""
        return {
            "error": self.name,
            "message": self.message,
            "statusCode": self.status_code,
            "data": self.data,
        }
