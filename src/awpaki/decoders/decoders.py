"""
Common decoder functions for parameter validation and transformation.

Decoders are plain callables used as ``ParameterConfig.decoder``. They return the
transformed value or raise ValueError; extract_event_params turns the failure
into a validation error for the parameter.

Example:
    schema = {
        "queryStringParameters": {
            "status": ParameterConfig(label="Status", decoder=create_enum(["active", "inactive"])),
            "limit": ParameterConfig(label="Page Limit", decoder=limited_integer(1, 100)),
        },
    }
"""

import json
import math
import re
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, List, Optional, Union
from urllib.parse import unquote

ALPHANUMERIC_ID_PATTERN = re.compile(r'^[a-zA-Z0-9\-_]+$')
EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
_LEADING_INTEGER_PATTERN = re.compile(r'^\s*([+-]?\d+)')

Number = Union[int, float]

TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off')


def _parse_integer(value: Any) -> Optional[Number]:
    """Parse like JavaScript's parseInt for strings, pass numbers through, None otherwise."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        match = _LEADING_INTEGER_PATTERN.match(value)
        return int(match.group(1)) if match else None
    if isinstance(value, (int, float)):
        return None if math.isnan(value) else value
    return None


def trimmed_string(value: Any) -> str:
    """Strip whitespace and reject empty strings. "  hello  " -> "hello"."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError('Value cannot be empty')
    return value.strip()


def trimmed_lower_string(value: Any) -> str:
    """Strip, lowercase and reject empty strings. "  HELLO  " -> "hello"."""
    return trimmed_string(value).lower()


def alphanumeric_id(value: Any) -> str:
    """Accept letters, digits, hyphens and underscores; lowercase. "ABC-123_test" -> "abc-123_test"."""
    if not isinstance(value, str) or not ALPHANUMERIC_ID_PATTERN.fullmatch(value):
        raise ValueError('ID must contain only letters, numbers, hyphens, and underscores')
    return value.lower()


def positive_integer(value: Any) -> Number:
    """Parse a number >= 1 from a string or number. "123" -> 123."""
    number = _parse_integer(value)
    if number is None or number < 1:
        raise ValueError('Must be a positive number')
    return number


def limited_integer(min_value: int = 1, max_value: int = 1000) -> Callable[[Any], Number]:
    """
    Create a decoder accepting integers within [min_value, max_value].

    Args:
        min_value: Minimum value (inclusive)
        max_value: Maximum value (inclusive)

    Returns:
        Decoder function validating the range
    """

    def validate_limited_integer(value: Any) -> Number:
        number = _parse_integer(value)
        if number is None or number < min_value or number > max_value:
            raise ValueError(f'Must be a number between {min_value} and {max_value}')
        return number

    return validate_limited_integer


def url_encoded_json(value: Any) -> Any:
    """Decode a URL-encoded JSON string; empty or non-string input yields None."""
    if not value or not isinstance(value, str):
        return None
    try:
        return json.loads(unquote(value, errors='strict'))
    except ValueError as e:
        raise ValueError('Must be a valid URL-encoded JSON') from e


def json_string(value: Any) -> Any:
    """Parse a JSON string; empty or non-string input yields None."""
    if not value or not isinstance(value, str):
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError('Must be a valid JSON string') from e


def valid_email(value: Any) -> str:
    """Validate an email address and lowercase it."""
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        raise ValueError('Email must have a valid format')
    return value.lower()


def create_enum(valid_values: Iterable[str]) -> Callable[[Any], str]:
    """
    Create a case-insensitive enum decoder.

    Args:
        valid_values: Allowed values, in lowercase

    Returns:
        Decoder returning the lowercased value. "ACTIVE" -> "active"
    """
    allowed = list(valid_values)

    def validate_enum(value: Any) -> str:
        if not isinstance(value, str) or value.lower() not in allowed:
            raise ValueError(f'Must be one of: {", ".join(allowed)}')
        return value.lower()

    return validate_enum


enum_of = create_enum


def string_array(value: Any) -> List[str]:
    """Keep the non-blank strings of a list; anything but a list yields []."""
    if not isinstance(value, (list, tuple)):
        return []
    return [item for item in value if isinstance(item, str) and item.strip()]


def string_to_boolean(value: Any) -> bool:
    """Convert true/1/yes/on and false/0/no/off (any case) to a bool."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    raise ValueError('Must be a valid boolean value (true/false, 1/0, yes/no, on/off)')


def iso_date_string(value: Any) -> str:
    """
    Normalize an ISO 8601 date or datetime to UTC with millisecond precision.

    Naive values are taken as UTC. "2023-01-01T10:00:00Z" -> "2023-01-01T10:00:00.000Z"
    """
    if not isinstance(value, str):
        raise ValueError('Date must be a string')
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as e:
        raise ValueError('Date must be in valid ISO format') from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    parsed = parsed.astimezone(timezone.utc)

    return f'{parsed:%Y-%m-%dT%H:%M:%S}.{parsed.microsecond // 1000:03d}Z'


def optional_trimmed_string(default_value: str = '') -> Callable[[Any], str]:
    """Create a decoder that strips strings and returns default_value for anything else."""

    def decode_optional_string(value: Any) -> str:
        return value.strip() if isinstance(value, str) else default_value

    return decode_optional_string


def optional_integer(default_value: int = 0) -> Callable[[Any], Number]:
    """Create a decoder that parses integers and returns default_value when it cannot."""

    def decode_optional_integer(value: Any) -> Number:
        if not value:
            return default_value
        number = _parse_integer(value)
        return default_value if number is None else number

    return decode_optional_integer
