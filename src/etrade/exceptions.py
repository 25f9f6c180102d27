"""Exceptions for the E*TRADE API client."""

from typing import Optional


class ETradeError(Exception):
    """Base exception for E*TRADE client errors."""

    pass


class ETradeValidationError(ETradeError):
    """
    A request parameter is missing or out of bounds.

    Always raised before any network call is attempted.
    """

    pass


class ETradeTransportError(ETradeError):
    """The transport failed to complete the request (connection, timeout)."""

    pass


class ETradeAPIError(ETradeError):
    """
    The API answered with a non-2xx status.

    Attributes:
        status_code: HTTP status code
        response_body: Raw response body, if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_body: Optional[bytes] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class ETradeAuthenticationError(ETradeAPIError):
    """
    Authentication failure with the E*TRADE API (401).

    The access token is missing, expired at midnight US/Eastern, or was
    revoked. Run ``etrade auth login`` to obtain a new one.
    """

    pass


class ETradeRateLimitError(ETradeAPIError):
    """API rate limit exceeded (429)."""

    pass


class ETradeNotFoundError(ETradeError):
    """No record in a fetched collection matched the requested id."""

    pass


class ETradeResponseError(ETradeError):
    """Response body could not be decoded into the expected structure."""

    pass
