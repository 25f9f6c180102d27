"""
OAuth coordinator for E*TRADE.

This module is the main interface for OAuth 1.0a in the application. It runs
the out-of-band authorization flow, persists the resulting access token, and
builds signed ``requests_oauthlib.OAuth1Session`` transports for the API
client.

Authorization flow:
    1. Fetch a request token (callback "oob")
    2. User opens the authorize URL and copies the verifier code
    3. Exchange request token + verifier for an access token
    4. Save the access token; it is valid until midnight US/Eastern
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import requests
from oauthlib.oauth1.rfc5849.errors import OAuth1Error
from requests_oauthlib import OAuth1Session
from requests_oauthlib.oauth1_session import TokenRequestDenied

from src.config import ETradeConfig
from src.etrade.endpoints import EndpointUrls, get_endpoint_urls

from .exceptions import AuthorizationError, TokenNotAvailableError
from .token_storage import TokenData, TokenStorage

logger = logging.getLogger(__name__)

SessionFactory = Callable[..., OAuth1Session]


class OAuthCoordinator:
    """
    High-level coordinator for OAuth operations.

    Example:
        coordinator = OAuthCoordinator(config)
        if not coordinator.is_authorized():
            coordinator.authorize(lambda url: input(f"Visit {url}\\nVerifier: "))
        session = coordinator.create_session()
    """

    def __init__(
        self,
        config: ETradeConfig,
        storage: Optional[TokenStorage] = None,
        session_factory: SessionFactory = OAuth1Session,
    ):
        """
        Initialize OAuth coordinator.

        Args:
            config: Application configuration (consumer credentials, token file)
            storage: Token storage (created from config.token_file if not provided)
            session_factory: Constructor for OAuth1 sessions
        """
        self.config = config
        self.storage = storage or TokenStorage(config.token_file)
        self.urls: EndpointUrls = get_endpoint_urls(config.production)
        self._session_factory = session_factory

    def authorize(self, get_verifier: Callable[[str], str]) -> TokenData:
        """
        Run the out-of-band authorization flow.

        Args:
            get_verifier: Called with the authorize URL; returns the verifier
                          code the user copied from the E*TRADE page

        Returns:
            Newly issued (and saved) access token

        Raises:
            ConfigurationError: If consumer credentials are missing
            AuthorizationError: If any step of the flow fails
        """
        self.config.require_credentials()

        try:
            oauth = self._session_factory(
                self.config.consumer_key,
                client_secret=self.config.consumer_secret,
                callback_uri="oob",
            )
            request_token = oauth.fetch_request_token(self.urls.request_token_url())
        except (TokenRequestDenied, OAuth1Error, ValueError, requests.RequestException) as e:
            logger.error(f"Request token step failed: {e}")
            raise AuthorizationError(f"Failed to obtain request token: {e}") from e

        authorize_url = (
            f"{self.urls.authorize_application_url()}"
            f"?key={self.config.consumer_key}&token={request_token['oauth_token']}"
        )

        verifier = (get_verifier(authorize_url) or "").strip()
        if not verifier:
            raise AuthorizationError("No verifier code entered")

        try:
            oauth = self._session_factory(
                self.config.consumer_key,
                client_secret=self.config.consumer_secret,
                resource_owner_key=request_token["oauth_token"],
                resource_owner_secret=request_token["oauth_token_secret"],
                verifier=verifier,
            )
            access_token = oauth.fetch_access_token(self.urls.access_token_url())
        except (TokenRequestDenied, OAuth1Error, ValueError, requests.RequestException) as e:
            logger.error(f"Access token step failed: {e}")
            raise AuthorizationError(f"Failed to obtain access token: {e}") from e

        token = TokenData(
            oauth_token=access_token["oauth_token"],
            oauth_token_secret=access_token["oauth_token_secret"],
            issued_at=datetime.now(timezone.utc).isoformat(),
            environment=self.config.environment_name,
        )
        self.storage.save(token)
        logger.info("Authorization complete, access token saved")
        return token

    def get_token(self) -> TokenData:
        """
        Get the stored access token if it is still valid.

        Raises:
            TokenNotAvailableError: If no token is stored, it belongs to the other
                environment, or it has expired
        """
        token = self.storage.load()
        if token is None:
            raise TokenNotAvailableError("Not authorized. Run: etrade auth login")

        if token.environment != self.config.environment_name:
            raise TokenNotAvailableError(
                f"Stored token is for {token.environment}, not {self.config.environment_name}. "
                "Run: etrade auth login"
            )

        if token.is_expired():
            raise TokenNotAvailableError(
                f"Access token expired at {token.expires_at.isoformat()}. Run: etrade auth login"
            )

        return token

    def create_session(self) -> OAuth1Session:
        """
        Build a session that signs every request with the stored access token.

        Raises:
            ConfigurationError: If consumer credentials are missing
            TokenNotAvailableError: If not authorized
        """
        self.config.require_credentials()
        token = self.get_token()

        return self._session_factory(
            self.config.consumer_key,
            client_secret=self.config.consumer_secret,
            resource_owner_key=token.oauth_token,
            resource_owner_secret=token.oauth_token_secret,
        )

    def renew(self) -> None:
        """
        Reactivate an access token after two hours of inactivity.

        Renewal does not move the midnight expiry.

        Raises:
            TokenNotAvailableError: If not authorized
            AuthorizationError: If the server rejects the renewal
        """
        self._call_token_endpoint(self.urls.renew_access_token_url(), "renew")
        logger.info("Access token renewed")

    def revoke(self) -> None:
        """
        Revoke the access token on the server and delete it locally.

        Raises:
            TokenNotAvailableError: If not authorized
            AuthorizationError: If the server rejects the revocation
        """
        self._call_token_endpoint(self.urls.revoke_access_token_url(), "revoke")
        self.storage.delete()
        logger.info("Access token revoked")

    def _call_token_endpoint(self, url: str, action: str) -> None:
        session = self.create_session()
        try:
            response = session.get(url, timeout=self.config.timeout)
        except requests.RequestException as e:
            raise AuthorizationError(f"Failed to {action} access token: {e}") from e

        if not response.ok:
            logger.error(f"Token {action} failed ({response.status_code}): {response.text}")
            raise AuthorizationError(
                f"Failed to {action} access token ({response.status_code}): {response.text}"
            )

    def is_authorized(self) -> bool:
        """Check if a non-expired access token is stored."""
        try:
            self.get_token()
        except TokenNotAvailableError:
            return False
        return True

    def get_status(self) -> dict:
        """
        Get current authorization status for diagnostics.

        Returns:
            Dictionary with ``authorized``, ``environment`` and, when a token
            is stored, ``token_environment``, ``issued_at``, ``expires_at`` and
            ``expired``
        """
        status: dict = {
            "authorized": False,
            "environment": self.config.environment_name,
            "token_file": str(self.storage.token_file),
        }

        token = self.storage.load()
        if token is None:
            status["message"] = "No token stored"
            return status

        expired = token.is_expired()
        status.update(
            {
                "authorized": not expired and token.environment == self.config.environment_name,
                "token_environment": token.environment,
                "issued_at": token.issued_at,
                "expires_at": token.expires_at.isoformat(),
                "expired": expired,
            }
        )
        return status
