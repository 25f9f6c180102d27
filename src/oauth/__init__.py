"""
OAuth 1.0a module for E*TRADE API integration.

E*TRADE signs every API request with OAuth 1.0a (HMAC-SHA1). This module
obtains access tokens through the out-of-band verifier flow, stores them,
and builds signed sessions used as the API client's transport.

Public API:
    TokenData: Access token structure
    TokenStorage: File-based token persistence
    OAuthCoordinator: Authorization, renewal, revocation and session creation

Exceptions:
    ETradeOAuthError: Base exception
    AuthorizationError: Authorization flow error
    TokenNotAvailableError: No valid tokens
    TokenStorageError: Storage operation failed
"""

from .coordinator import OAuthCoordinator
from .exceptions import (
    AuthorizationError,
    ETradeOAuthError,
    TokenNotAvailableError,
    TokenStorageError,
)
from .token_storage import TokenData, TokenStorage

__all__ = [
    "TokenData",
    "TokenStorage",
    "OAuthCoordinator",
    "ETradeOAuthError",
    "AuthorizationError",
    "TokenNotAvailableError",
    "TokenStorageError",
]
