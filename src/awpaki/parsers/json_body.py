"""
JSON request body parsing.
"""

import json
from typing import Any

from awpaki.errors.http_errors import BadRequest

_UNSET: Any = object()


def parse_json_body(body: str | bytes | None, default_value: Any = _UNSET, required: bool = False) -> Any:
    """
    Parse a JSON encoded request body.

    Args:
        body: Raw body as received in the Lambda event
        default_value: Returned for an empty body when given
        required: Raise instead of returning a default for an empty body

    Returns:
        The decoded JSON value, default_value, or an empty dict for an empty body

    Raises:
        BadRequest: When the body is required but empty, or is not valid JSON

    Example:
        user = parse_json_body('{"name": "John Doe", "age": 30}')
        items = parse_json_body(None, default_value=[])
    """
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise BadRequest(f"Invalid JSON format: {e.reason}") from e

    if body is None or body.strip() == "":
        if required:
            raise BadRequest("Request body is required")
        if default_value is not _UNSET:
            return default_value
        return {}

    try:
        return json.loads(body)
    except json.JSONDecodeError as e:
        raise BadRequest(f"Invalid JSON format: {e.msg}") from e
