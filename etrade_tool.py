#!/usr/bin/env python3
"""
E*TRADE Tool - CLI and Module for the E*TRADE REST API.

CLI Usage:
    etrade auth login
    etrade accounts list
    etrade accounts portfolio <accountIdKey> --totals-required
    etrade alerts list --count 25 --category stock
    etrade market quotes AAPL MSFT --detail all
    etrade market optionexpire GOOG --expiry-type weekly
    etrade orders list <accountIdKey> --status open

Module Usage:
    from etrade_tool import ETradeCustomer, OAuthCoordinator, create_client, load_config

    config = load_config()
    customer = ETradeCustomer(create_client(config))
    for account in customer.get_all_accounts():
        print(account, account.get_portfolio_positions())

Every request is signed with an OAuth 1.0a access token obtained through the
out-of-band verifier flow. Tokens expire at midnight US Eastern time and go
idle after two hours without use ('etrade auth renew' reactivates them).
"""

from src.cli.context import create_client
from src.config import ETradeConfig, load_config
from src.etrade import (
    ETradeAccount,
    ETradeAlert,
    ETradeClient,
    ETradeCustomer,
    EndpointUrls,
    HttpClient,
    get_endpoint_urls,
)
from src.oauth import OAuthCoordinator, TokenData, TokenStorage

__all__ = [
    # Client
    "ETradeClient",
    "ETradeCustomer",
    "ETradeAccount",
    "ETradeAlert",
    "EndpointUrls",
    "HttpClient",
    "get_endpoint_urls",
    "create_client",
    # Configuration
    "ETradeConfig",
    "load_config",
    # OAuth
    "OAuthCoordinator",
    "TokenData",
    "TokenStorage",
]


def main() -> None:
    """CLI entry point."""
    from src.cli import cli

    cli()


if __name__ == "__main__":
    main()
