"""
OAuth exception classes for E*TRADE API integration.

This module defines the exception hierarchy for OAuth 1.0a errors,
providing clear error messages and recovery guidance.
"""


class ETradeOAuthError(Exception):
    """Base exception for all E*TRADE OAuth errors."""

    pass


class AuthorizationError(ETradeOAuthError):
    """OAuth authorization flow error (request token, verifier or access token step)."""

    pass


class TokenNotAvailableError(ETradeOAuthError):
    """No valid access token available (need to run ``etrade auth login``)."""

    pass


class TokenStorageError(ETradeOAuthError):
    """Token storage operation failed (file I/O error)."""

    pass
