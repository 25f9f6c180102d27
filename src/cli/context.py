"""
CLI context and client construction.

The API client is created lazily so that commands which never reach the API
(``--help``, ``auth status``) work without credentials or tokens.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from src.config import ETradeConfig
from src.etrade.client import ETradeClient
from src.etrade.customer import ETradeCustomer
from src.etrade.endpoints import get_endpoint_urls
from src.etrade.http_client import HttpClient
from src.oauth.coordinator import OAuthCoordinator

logger = logging.getLogger(__name__)


def create_client(config: ETradeConfig) -> ETradeClient:
    """
    Build an API client signed with the stored access token.

    Raises:
        ConfigurationError: If consumer credentials are missing
        TokenNotAvailableError: If not authorized
    """
    session = OAuthCoordinator(config).create_session()
    http = HttpClient(session, timeout=config.timeout)
    logger.debug(f"Created {config.environment_name} client")
    return ETradeClient(get_endpoint_urls(config.production), http)


@dataclass
class CLIContext:
    """Context object passed to all CLI commands.

    Attributes:
        config: Configuration settings
        verbose: Verbose output enabled
        pretty: Indent JSON output
        output_file: Write responses to this file instead of stdout
    """

    config: ETradeConfig
    verbose: bool = False
    pretty: bool = False
    output_file: Optional[str] = None
    _client: Optional[ETradeClient] = field(default=None, repr=False)

    def get_client(self) -> ETradeClient:
        """Get the API client, creating it on first use."""
        if self._client is None:
            self._client = create_client(self.config)
        return self._client

    def get_customer(self) -> ETradeCustomer:
        """Get a customer view over the API client."""
        return ETradeCustomer(self.get_client())
