"""
E*TRADE API client module.

This module provides the request layer for E*TRADE's REST API:

- EndpointUrls: URL builder for the sandbox and production hosts
- HttpClient: pass-through over an injected (OAuth1-signed) transport
- ETradeClient: one validated method per API operation, returning raw JSON
- ETradeCustomer: account and alert collections with lookup by id

Authentication is supplied by the transport; see ``src.oauth``.
"""

from .client import ETradeClient
from .customer import ETradeCustomer
from .endpoints import EndpointUrls, get_endpoint_urls
from .exceptions import (
    ETradeAPIError,
    ETradeAuthenticationError,
    ETradeError,
    ETradeNotFoundError,
    ETradeRateLimitError,
    ETradeResponseError,
    ETradeTransportError,
    ETradeValidationError,
)
from .http_client import HttpClient
from .models import AccountInfo, AlertInfo, ETradeAccount, ETradeAlert, PortfolioPosition

__all__ = [
    "ETradeClient",
    "ETradeCustomer",
    "EndpointUrls",
    "get_endpoint_urls",
    "HttpClient",
    "AccountInfo",
    "AlertInfo",
    "ETradeAccount",
    "ETradeAlert",
    "PortfolioPosition",
    "ETradeError",
    "ETradeValidationError",
    "ETradeAPIError",
    "ETradeAuthenticationError",
    "ETradeRateLimitError",
    "ETradeTransportError",
    "ETradeNotFoundError",
    "ETradeResponseError",
]
