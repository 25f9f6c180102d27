"""
Transport-abstracted HTTP client for the E*TRADE API.

The client issues a single request through an injected transport and maps
the outcome to raw response bytes or a typed error. It does not retry,
cache, or parse response bodies.

The transport is any object with the ``requests.Session.request`` signature.
In production it is a ``requests_oauthlib.OAuth1Session`` that signs every
request; tests substitute a mock.
"""

import logging
from typing import Any, Dict, Optional

import requests

from .exceptions import (
    ETradeAPIError,
    ETradeAuthenticationError,
    ETradeRateLimitError,
    ETradeTransportError,
)

logger = logging.getLogger(__name__)


class HttpClient:
    """
    Thin pass-through over an HTTP transport.

    Example:
        from requests_oauthlib import OAuth1Session

        session = OAuth1Session(key, secret, token, token_secret)
        http = HttpClient(session)
        body = http.do("GET", "https://apisb.etrade.com/v1/accounts/list.json")
    """

    def __init__(self, session: requests.Session, timeout: Optional[float] = None):
        """
        Initialize HTTP client.

        Args:
            session: Transport used for every request (signed session or test double)
            timeout: Request timeout in seconds handed to the transport (None for no timeout)
        """
        self.session = session
        self.timeout = timeout

    def do(
        self,
        method: str,
        url: str,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> bytes:
        """
        Send one request and return the raw response body.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            url: Full request URL including any query string
            json_data: JSON request body

        Returns:
            Response body bytes, unmodified

        Raises:
            ETradeAuthenticationError: If the API answers 401
            ETradeRateLimitError: If the API answers 429
            ETradeAPIError: For any other non-2xx status
            ETradeTransportError: If the transport fails to complete the request
        """
        headers = {"Accept": "application/json"}

        # Only add Content-Type for requests with a body
        if json_data is not None:
            headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {url}")

        try:
            response = self.session.request(
                method,
                url,
                headers=headers,
                json=json_data,
                timeout=self.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {method} {url}: {e}")
            raise ETradeTransportError(f"Request to E*TRADE API failed: {e}") from e

        status_code = response.status_code
        body = response.content

        if status_code == 401:
            logger.error(f"Authentication failed (401): {response.text}")
            raise ETradeAuthenticationError(
                "Authentication failed. The access token may be expired or revoked. "
                "Run: etrade auth login",
                status_code=status_code,
                response_body=body,
            )

        if status_code == 429:
            logger.warning("Rate limit exceeded (429)")
            raise ETradeRateLimitError(
                "E*TRADE API rate limit exceeded. Please wait before retrying.",
                status_code=status_code,
                response_body=body,
            )

        if not 200 <= status_code < 300:
            logger.error(f"API error ({status_code}): {response.text}")
            raise ETradeAPIError(
                f"E*TRADE API error ({status_code}): {response.text}",
                status_code=status_code,
                response_body=body,
            )

        logger.debug(f"Response: {status_code} ({len(body)} bytes)")
        return body

    def close(self) -> None:
        """Close the underlying transport."""
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
