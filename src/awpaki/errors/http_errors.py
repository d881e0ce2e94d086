"""
Concrete HTTP error classes and the status code factory.
"""

from typing import Any, Dict, Optional, Type

from awpaki.errors.http_error import HeaderValue, HttpError
from awpaki.errors.http_status import HttpErrorStatus


class BadRequest(HttpError):
    """400, the request is malformed or contains invalid data."""

    def __init__(
        self,
        message: str = "Bad Request",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.BAD_REQUEST, data, headers)


class Unauthorized(HttpError):
    """401, authentication is missing or invalid."""

    def __init__(
        self,
        message: str = "Unauthorized",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.UNAUTHORIZED, data, headers)


class Forbidden(HttpError):
    """403, the caller is authenticated but not allowed."""

    def __init__(
        self,
        message: str = "Forbidden",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.FORBIDDEN, data, headers)


class NotFound(HttpError):
    """404, the resource does not exist."""

    def __init__(
        self,
        message: str = "Not Found",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.NOT_FOUND, data, headers)


class Conflict(HttpError):
    """409, the request conflicts with the current state."""

    def __init__(
        self,
        message: str = "Conflict",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.CONFLICT, data, headers)


class PreconditionFailed(HttpError):
    """412, a request precondition evaluated to false."""

    def __init__(
        self,
        message: str = "Precondition Failed",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.PRECONDITION_FAILED, data, headers)


class UnprocessableEntity(HttpError):
    """422, validation failed."""

    def __init__(
        self,
        message: str = "Unprocessable Entity",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.UNPROCESSABLE_ENTITY, data, headers)


class TooManyRequests(HttpError):
    """429, rate limited."""

    def __init__(
        self,
        message: str = "Too Many Requests",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.TOO_MANY_REQUESTS, data, headers)


class InternalServerError(HttpError):
    """500, unexpected server error."""

    def __init__(
        self,
        message: str = "Internal Server Error",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.INTERNAL_SERVER_ERROR, data, headers)


class NotImplementedHttpError(HttpError):
    """501, not implemented. Also the fallback for unmapped status codes."""

    def __init__(
        self,
        message: str = "Not Implemented",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.NOT_IMPLEMENTED, data, headers)


class BadGateway(HttpError):
    """502, an upstream integration failed."""

    def __init__(
        self,
        message: str = "Bad Gateway",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.BAD_GATEWAY, data, headers)


class ServiceUnavailable(HttpError):
    """503, temporarily unavailable."""

    def __init__(
        self,
        message: str = "Service Unavailable",
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, HeaderValue]] = None,
    ):
        super().__init__(message, HttpErrorStatus.SERVICE_UNAVAILABLE, data, headers)


HTTP_ERROR_MAP: Dict[int, Type[HttpError]] = {
    HttpErrorStatus.BAD_REQUEST: BadRequest,
    HttpErrorStatus.UNAUTHORIZED: Unauthorized,
    HttpErrorStatus.FORBIDDEN: Forbidden,
    HttpErrorStatus.NOT_FOUND: NotFound,
    HttpErrorStatus.CONFLICT: Conflict,
    HttpErrorStatus.PRECONDITION_FAILED: PreconditionFailed,
    HttpErrorStatus.UNPROCESSABLE_ENTITY: UnprocessableEntity,
    HttpErrorStatus.TOO_MANY_REQUESTS: TooManyRequests,
    HttpErrorStatus.INTERNAL_SERVER_ERROR: InternalServerError,
    HttpErrorStatus.NOT_IMPLEMENTED: NotImplementedHttpError,
    HttpErrorStatus.BAD_GATEWAY: BadGateway,
    HttpErrorStatus.SERVICE_UNAVAILABLE: ServiceUnavailable,
}


def create_http_error(
    status_code: int,
    message: str,
    data: Optional[Dict[str, Any]] = None,
    headers: Optional[Dict[str, HeaderValue]] = None,
) -> HttpError:
    """
    Create the HttpError subclass matching a status code.

    Args:
        status_code: HTTP status code
        message: Error message
        data: Optional structured data attached to the error
        headers: Optional response headers

    Returns:
        Error instance; unmapped codes fall back to NotImplementedHttpError (501)
    """
    error_class = HTTP_ERROR_MAP.get(status_code, NotImplementedHttpError)
    return error_class(message, data, headers)
