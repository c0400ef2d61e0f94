"""Error classes for the Riot API client and the status code table."""

from typing import Dict, Optional, Tuple, Type


class RiotAPIError(Exception):
    """Base exception for Riot API errors with status code tracking."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        retry_after: Optional[int] = None,
    ) -> None:
        """
        Initialize RiotAPIError.

        Args:
            message: Error message
            status_code: HTTP status code (400, 401, 403, 404, 429, 503, etc.)
            retry_after: Seconds the server asked us to wait (for 429 errors)
        """
        super().__init__(message)
        self.status_code: Optional[int] = status_code
        self.retry_after: Optional[int] = retry_after
        self.message: str = message

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code == 429 and self.retry_after:
            return f"Rate Limit Error {self.status_code}: {self.message} (Retry after: {self.retry_after}s)"
        if self.status_code:
            return f"Riot API Error {self.status_code}: {self.message}"
        return f"Riot API Error: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, status_code={self.status_code!r})"

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return (self.status_code, self.message) == (other.status_code, other.message)

    def __hash__(self) -> int:
        return hash((type(self), self.status_code, self.message))


class BadRequestError(RiotAPIError):
    """Bad request (400) - invalid parameters."""

    pass


class UnauthorizedError(RiotAPIError):
    """Unauthorized (401) - missing or invalid API key."""

    pass


class ForbiddenError(RiotAPIError):
    """Forbidden error (403) - insufficient permissions or expired key."""

    pass


class NotFoundError(RiotAPIError):
    """Not found error (404) - resource doesn't exist."""

    pass


class MethodNotAllowedError(RiotAPIError):
    """Method not allowed (405)."""

    pass


class UnsupportedMediaTypeError(RiotAPIError):
    """Unsupported media type (415)."""

    pass


class RateLimitError(RiotAPIError):
    """Rate limit error (429).

    Only raised when the Retry-After header is unusable or when the client's
    optional retry cap is exhausted; plain 429s are retried transparently.
    """

    pass


class InternalServerError(RiotAPIError):
    """Internal server error (500)."""

    pass


class BadGatewayError(RiotAPIError):
    """Bad gateway (502)."""

    pass


class ServiceUnavailableError(RiotAPIError):
    """Service unavailable (503) - still down after the built-in retry."""

    pass


class GatewayTimeoutError(RiotAPIError):
    """Gateway timeout (504)."""

    pass


class UnknownStatusError(RiotAPIError):
    """Non-2xx status that has no entry in STATUS_TO_ERROR."""

    pass


class EndOfStream(Exception):
    """Sentinel delivered as the last value of an exhausted stream."""

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))


UNKNOWN_ERROR_REASON = "unknown error reason"

STATUS_TO_ERROR: Dict[int, Tuple[Type[RiotAPIError], str]] = {
    400: (BadRequestError, "bad request"),
    401: (UnauthorizedError, "unauthorized"),
    403: (ForbiddenError, "forbidden"),
    404: (NotFoundError, "not found"),
    405: (MethodNotAllowedError, "method not allowed"),
    415: (UnsupportedMediaTypeError, "unsupported media type"),
    429: (RateLimitError, "rate limit exceeded"),
    500: (InternalServerError, "internal server error"),
    502: (BadGatewayError, "bad gateway"),
    503: (ServiceUnavailableError, "service unavailable"),
    504: (GatewayTimeoutError, "gateway timeout"),
}


def error_for_status(status_code: int) -> RiotAPIError:
    """Build the error matching a non-2xx status code."""
    error_class, message = STATUS_TO_ERROR.get(
        status_code, (UnknownStatusError, UNKNOWN_ERROR_REASON)
    )
    return error_class(message, status_code=status_code)
