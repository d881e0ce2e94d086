"""
HTTP status codes used by the toolkit.

HttpStatus covers the standard status codes, HttpErrorStatus the subset that maps
to a concrete HttpError class (see awpaki.errors.http_errors).
"""

from enum import IntEnum
from typing import Optional


class HttpStatus(IntEnum):
    """Standard HTTP status codes."""

    # 1xx Informational
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102
    EARLY_HINTS = 103

    # 2xx Success
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207

    # 3xx Redirection
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308

    # 4xx Client Errors
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422
    LOCKED = 423
    FAILED_DEPENDENCY = 424
    TOO_EARLY = 425
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428
    TOO_MANY_REQUESTS = 429
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431
    UNAVAILABLE_FOR_LEGAL_REASONS = 451

    # 5xx Server Errors
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506
    INSUFFICIENT_STORAGE = 507
    LOOP_DETECTED = 508
    NOT_EXTENDED = 510
    NETWORK_AUTHENTICATION_REQUIRED = 511


class HttpErrorStatus(IntEnum):
    """Error status codes that have a dedicated HttpError class."""

    BAD_REQUEST = HttpStatus.BAD_REQUEST.value
    UNAUTHORIZED = HttpStatus.UNAUTHORIZED.value
    FORBIDDEN = HttpStatus.FORBIDDEN.value
    NOT_FOUND = HttpStatus.NOT_FOUND.value
    CONFLICT = HttpStatus.CONFLICT.value
    PRECONDITION_FAILED = HttpStatus.PRECONDITION_FAILED.value
    UNPROCESSABLE_ENTITY = HttpStatus.UNPROCESSABLE_ENTITY.value
    TOO_MANY_REQUESTS = HttpStatus.TOO_MANY_REQUESTS.value
    INTERNAL_SERVER_ERROR = HttpStatus.INTERNAL_SERVER_ERROR.value
    NOT_IMPLEMENTED = HttpStatus.NOT_IMPLEMENTED.value
    BAD_GATEWAY = HttpStatus.BAD_GATEWAY.value
    SERVICE_UNAVAILABLE = HttpStatus.SERVICE_UNAVAILABLE.value


_STATUS_NAMES = {
    HttpErrorStatus.BAD_REQUEST: 'BadRequest',
    HttpErrorStatus.UNAUTHORIZED: 'Unauthorized',
    HttpErrorStatus.FORBIDDEN: 'Forbidden',
    HttpErrorStatus.NOT_FOUND: 'NotFound',
    HttpErrorStatus.CONFLICT: 'Conflict',
    HttpErrorStatus.PRECONDITION_FAILED: 'PreconditionFailed',
    HttpErrorStatus.UNPROCESSABLE_ENTITY: 'UnprocessableEntity',
    HttpErrorStatus.TOO_MANY_REQUESTS: 'TooManyRequests',
    HttpErrorStatus.INTERNAL_SERVER_ERROR: 'InternalServerError',
    HttpErrorStatus.NOT_IMPLEMENTED: 'NotImplemented',
    HttpErrorStatus.BAD_GATEWAY: 'BadGateway',
    HttpErrorStatus.SERVICE_UNAVAILABLE: 'ServiceUnavailable',
}


def is_valid_http_status(code: int) -> bool:
    """Check whether a code is a known HTTP status code."""
    try:
        HttpStatus(code)
    except ValueError:
        return False
    return True


def is_valid_http_error_status(code: int) -> bool:
    """Check whether a code maps to a dedicated HttpError class."""
    try:
        HttpErrorStatus(code)
    except ValueError:
        return False
    return True


def get_http_status_name(status: int) -> Optional[str]:
    """
    Get the PascalCase name of a mapped error status code.

    Args:
        status: HTTP status code

    Returns:
        Status name (e.g. "NotFound"), or None if the code is not mapped
    """
    if not is_valid_http_error_status(status):
        return None
    return _STATUS_NAMES[HttpErrorStatus(status)]
