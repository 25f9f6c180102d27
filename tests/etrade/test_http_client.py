"""Tests for the transport-abstracted HTTP client."""

from unittest import mock

import pytest
import requests

from src.etrade.exceptions import (
    ETradeAPIError,
    ETradeAuthenticationError,
    ETradeRateLimitError,
    ETradeTransportError,
)
from src.etrade.http_client import HttpClient

URL = "https://api.etrade.com/v1/accounts/list.json"


def make_response(status_code: int, content: bytes = b"{}") -> mock.Mock:
    response = mock.Mock()
    response.status_code = status_code
    response.content = content
    response.text = content.decode()
    return response


class TestHttpClient:
    """Tests for HttpClient class."""

    @pytest.fixture
    def session(self):
        return mock.Mock(spec=requests.Session)

    @pytest.fixture
    def http(self, session):
        return HttpClient(session, timeout=10)

    def test_returns_body_unchanged(self, http, session):
        """A 2xx response body is returned byte for byte."""
        session.request.return_value = make_response(200, b'{"AccountListResponse": {}}')

        body = http.do("GET", URL)

        assert body == b'{"AccountListResponse": {}}'

    def test_get_sends_accept_header_only(self, http, session):
        session.request.return_value = make_response(200)

        http.do("GET", URL)

        session.request.assert_called_once_with(
            "GET",
            URL,
            headers={"Accept": "application/json"},
            json=None,
            timeout=10,
        )

    def test_body_sets_content_type(self, http, session):
        session.request.return_value = make_response(200)
        payload = {"CancelOrderRequest": {"orderId": 7}}

        http.do("PUT", URL, payload)

        _, kwargs = session.request.call_args
        assert kwargs["json"] == payload
        assert kwargs["headers"]["Content-Type"] == "application/json"

    def test_empty_2xx_body(self, http, session):
        session.request.return_value = make_response(204, b"")

        assert http.do("DELETE", URL) == b""

    def test_401_raises_authentication_error(self, http, session):
        session.request.return_value = make_response(401, b"oauth_problem=token_expired")

        with pytest.raises(ETradeAuthenticationError) as exc_info:
            http.do("GET", URL)

        assert exc_info.value.status_code == 401
        assert exc_info.value.response_body == b"oauth_problem=token_expired"

    def test_429_raises_rate_limit_error(self, http, session):
        session.request.return_value = make_response(429)

        with pytest.raises(ETradeRateLimitError):
            http.do("GET", URL)

    def test_other_status_raises_api_error(self, http, session):
        session.request.return_value = make_response(500, b"server error")

        with pytest.raises(ETradeAPIError, match="500") as exc_info:
            http.do("GET", URL)

        assert exc_info.value.status_code == 500
        assert not isinstance(exc_info.value, ETradeAuthenticationError)

    def test_transport_failure_is_wrapped(self, http, session):
        """Transport errors are wrapped with the original as the cause."""
        error = requests.exceptions.ConnectionError("connection refused")
        session.request.side_effect = error

        with pytest.raises(ETradeTransportError) as exc_info:
            http.do("GET", URL)

        assert exc_info.value.__cause__ is error

    def test_single_attempt(self, http, session):
        """Failed requests are not retried."""
        session.request.return_value = make_response(503)

        with pytest.raises(ETradeAPIError):
            http.do("GET", URL)

        assert session.request.call_count == 1

    def test_context_manager_closes_session(self, session):
        with HttpClient(session) as http:
            assert http.session is session

        session.close.assert_called_once()
