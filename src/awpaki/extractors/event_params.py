"""
Schema driven parameter extraction for AWS Lambda events.

A schema mirrors the shape of the event: every nesting level is a mapping and
every leaf is a ParameterConfig (or a plain dict with a ``label`` key). The
extractor walks the whole schema, collects every validation failure keyed by
its dotted path and raises a single HttpError once the walk is done.

Example:
    schema = {
        "pathParameters": {
            "id": ParameterConfig(label="User ID", required=True),
        },
        "headers": {
            "authorization": ParameterConfig(
                label="Authorization",
                required=True,
                case_insensitive=True,
                status_code_error=HttpStatus.UNAUTHORIZED,
                not_found_error="Authorization header required",
            ),
        },
        "body": {
            "email": {"label": "Email", "required": True, "decoder": valid_email},
            "age": {"label": "Age", "expectedType": "number", "default": 18},
        },
    }

    params = extract_event_params(schema, event)
    # {"id": "123", "authorization": "Bearer ...", "email": "...", "age": 18}
"""

import json
from collections import Counter
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from awpaki.errors.http_errors import create_http_error
from awpaki.errors.http_status import HttpStatus
from awpaki.handlers.utils.observability import logger

INVALID_JSON_BODY_MESSAGE = 'Invalid JSON in request body'


class ParameterType(str, Enum):
    """Valid parameter types for validation."""

    STRING = 'string'
    NUMBER = 'number'
    BOOLEAN = 'boolean'
    OBJECT = 'object'
    ARRAY = 'array'


class ParameterConfig(BaseModel):
    """
    Configuration for a single parameter extraction.

    Fields may be given in snake_case or camelCase (``status_code_error`` or
    ``statusCodeError``).
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra='forbid',
    )

    # Human-readable label used in default error messages
    label: str
    required: bool = False
    # Status code for every error raised for this parameter, 422 when unset
    status_code_error: Optional[int] = None
    not_found_error: Optional[str] = None
    expected_type: Optional[ParameterType] = None
    wrong_type_message: Optional[str] = None
    # Only applied when explicitly given, falsy values and None included
    default: Any = None
    case_insensitive: bool = False
    decoder: Optional[Callable[[Any], Any]] = None

    @property
    def has_default(self) -> bool:
        """Whether a default value was explicitly declared."""
        return 'default' in self.model_fields_set

    @property
    def error_status(self) -> int:
        return int(self.status_code_error or HttpStatus.UNPROCESSABLE_ENTITY)


EventSchema = Mapping[str, Union[ParameterConfig, Mapping[str, Any]]]

ErrorEntry = Tuple[int, str]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


_TYPE_CHECKS: Dict[ParameterType, Callable[[Any], bool]] = {
    ParameterType.STRING: lambda value: isinstance(value, str),
    ParameterType.NUMBER: _is_number,
    ParameterType.BOOLEAN: lambda value: isinstance(value, bool),
    # Mappings only, arrays deliberately do not count as objects
    ParameterType.OBJECT: lambda value: isinstance(value, Mapping),
    ParameterType.ARRAY: lambda value: isinstance(value, (list, tuple)),
}


def as_parameter_config(node: Any) -> Optional[ParameterConfig]:
    """
    Return the leaf descriptor for a schema node, or None for a nesting level.

    A ParameterConfig instance is a leaf. A plain mapping is a leaf when it has a
    ``label`` key and is validated into a ParameterConfig.
    """
    if isinstance(node, ParameterConfig):
        return node
    if isinstance(node, Mapping) and 'label' in node:
        return ParameterConfig.model_validate(node)
    return None


def resolve_path(source: Mapping[str, Any], path: List[str], case_insensitive: bool = False) -> Optional[Any]:
    """
    Resolve a list of path segments against a nested mapping.

    Lists and tuples are indexed by segments that are non-negative integers,
    so ["Records", "0", "body"] reaches the first record of an SQS event.

    Args:
        source: Object to walk
        path: Path segments, e.g. ["headers", "authorization"]
        case_insensitive: Match each segment against the lowercase form of the keys

    Returns:
        The value found, or None when a segment is missing, an index is out of
        range, or an intermediate value is neither a mapping nor a sequence
    """
    current: Any = source
    for segment in path:
        if isinstance(current, (list, tuple)):
            if not segment.isdecimal() or int(segment) >= len(current):
                return None
            current = current[int(segment)]
            continue

        if not isinstance(current, Mapping):
            return None

        if not case_insensitive:
            current = current.get(segment)
            continue

        wanted = segment.lower()
        matched_key = next(
            (key for key in current if isinstance(key, str) and key.lower() == wanted),
            None,
        )
        if matched_key is None:
            return None
        current = current[matched_key]

    return current


class _Extraction:
    """Accumulator state for one extract_event_params call."""

    def __init__(self, event: Mapping[str, Any]):
        self.result: Dict[str, Any] = {}
        self.errors: Dict[str, ErrorEntry] = {}
        self._assigned_from: Dict[str, str] = {}
        self.event = self._prepare_event(event)

    def _prepare_event(self, event: Mapping[str, Any]) -> Dict[str, Any]:
        # Shallow copy, the caller's event keeps its raw body
        event_data = dict(event)

        body = event_data.get('body')
        if isinstance(body, str):
            try:
                event_data['body'] = json.loads(body)
            except json.JSONDecodeError:
                self.errors['body'] = (HttpStatus.BAD_REQUEST.value, INVALID_JSON_BODY_MESSAGE)

        return event_data

    def _assign(self, key: str, full_path: str, value: Any) -> None:
        previous_path = self._assigned_from.get(key)
        if previous_path is not None and previous_path != full_path:
            logger.warning(
                "Extracted parameter overwritten by a parameter with the same key",
                extra={"key": key, "previous_path": previous_path, "path": full_path},
            )
        self._assigned_from[key] = full_path
        self.result[key] = value

    def process_schema(self, schema: Mapping[str, Any], path_prefix: str = '') -> None:
        for key, node in schema.items():
            full_path = f'{path_prefix}.{key}' if path_prefix else key

            config = as_parameter_config(node)
            if config is not None:
                self.process_parameter(key, full_path, config)
            elif isinstance(node, Mapping):
                self.process_schema(node, full_path)

    def process_parameter(self, key: str, full_path: str, config: ParameterConfig) -> None:
        value = resolve_path(self.event, full_path.split('.'), config.case_insensitive)

        if value is None:
            if config.required:
                message = config.not_found_error or f'{config.label} is required'
                self.errors[full_path] = (config.error_status, message)
            elif config.has_default:
                self._assign(key, full_path, config.default)
            return

        if config.expected_type is not None and not _TYPE_CHECKS[config.expected_type](value):
            message = config.wrong_type_message or f'{config.label} must be of type {config.expected_type.value}'
            self.errors[full_path] = (config.error_status, message)
            return

        if config.decoder is not None:
            try:
                value = config.decoder(value)
            except Exception as e:
                logger.debug("Decoder rejected parameter", extra={"path": full_path, "error": str(e)})
                message = config.wrong_type_message or f'{config.label} has invalid format'
                self.errors[full_path] = (config.error_status, message)
                return

        self._assign(key, full_path, value)

    def raise_for_errors(self) -> None:
        if not self.errors:
            return

        error_data = {'errors': {path: [status, message] for path, (status, message) in self.errors.items()}}
        statuses = [status for status, _ in self.errors.values()]

        if len(self.errors) == 1:
            status, message = next(iter(self.errors.values()))
            raise create_http_error(status, message, error_data)

        counts = Counter(statuses)
        if len(counts) == 1:
            status = statuses[0]
            message = f'Multiple validation errors ({len(self.errors)} errors, status {status})'
            raise create_http_error(status, message, error_data)

        summary = ', '.join(f'{counts[status]}×{status}' for status in sorted(counts))
        raise create_http_error(max(statuses), f'Multiple validation errors ({summary})', error_data)


def extract_event_params(schema: EventSchema, event: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Extract and validate parameters from an AWS Lambda event.

    Args:
        schema: Schema describing the parameters to extract and their validation rules
        event: Lambda event (API Gateway, AppSync, SQS record, ...) or any mapping

    Returns:
        Mapping from each parameter's leaf key to its resolved, decoded value

    Raises:
        HttpError: The subclass matching the failing status code. With a single
            failure it carries that failure's status and message; with several
            it carries the highest status and a summary message. ``data["errors"]``
            always maps each failing path to ``[status_code, message]``.
    """
    extraction = _Extraction(event)
    extraction.process_schema(schema)
    extraction.raise_for_errors()
    return extraction.result
