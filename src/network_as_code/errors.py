"""Error taxonomy for the Network as Code client.

Every failure surfaces synchronously as one of the exceptions below.
Nothing is retried.
"""

from typing import Any


class NaCError(Exception):
    """Base class for all Network as Code client errors."""

    def __init__(
        self,
        message: str,
        status: int | None = None,
        details: Any = None,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.details = details


class ValidationError(NaCError):
    """A client-side precondition failed; no request was sent."""


class NetworkError(NaCError):
    """The request never produced an HTTP response (connection, timeout)."""


class APIError(NaCError):
    """The API answered with a non-2xx status."""


class AuthError(APIError):
    """The API rejected the credentials (401 or 403)."""


class NotFoundError(APIError):
    """The requested resource does not exist (404)."""


class ServerError(APIError):
    """The API failed (5xx) or returned a malformed response."""


def error_from_status(
    status: int,
    message: str,
    details: Any = None,
) -> APIError:
    """Map an HTTP status code to the matching exception instance.

    Args:
        status: HTTP status code of the failed response.
        message: Human readable error message.
        details: Parsed response body, if any.

    Returns:
        The most specific APIError subclass for the status.
    """
    if status in (401, 403):
        return AuthError(message, status=status, details=details)
    if status == 404:  # noqa: PLR2004
        return NotFoundError(message, status=status, details=details)
    if status >= 500:  # noqa: PLR2004
        return ServerError(message, status=status, details=details)
    return APIError(message, status=status, details=details)
