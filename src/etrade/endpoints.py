"""
E*TRADE API endpoint definitions.

Path templates for every endpoint used by the client, and ``EndpointUrls``,
which binds them to the sandbox or production host.

Documentation: https://apisb.etrade.com/docs/api/account/api-account-v1.html
"""

from typing import Union
from urllib.parse import quote

from .constants import Environment

SANDBOX_HOST = "https://apisb.etrade.com"
PRODUCTION_HOST = "https://api.etrade.com"
AUTHORIZE_URL = "https://us.etrade.com/e/t/etws/authorize"

# OAuth Endpoints
OAUTH_REQUEST_TOKEN = "/oauth/request_token"
OAUTH_ACCESS_TOKEN = "/oauth/access_token"
OAUTH_RENEW_ACCESS_TOKEN = "/oauth/renew_access_token"
OAUTH_REVOKE_ACCESS_TOKEN = "/oauth/revoke_access_token"

# Account Endpoints
ACCOUNTS_LIST = "/v1/accounts/list.json"
ACCOUNT_BALANCE = "/v1/accounts/{accountIdKey}/balance.json"
ACCOUNT_TRANSACTIONS = "/v1/accounts/{accountIdKey}/transactions.json"
ACCOUNT_TRANSACTION_DETAILS = "/v1/accounts/{accountIdKey}/transactions/{transactionId}.json"
ACCOUNT_PORTFOLIO = "/v1/accounts/{accountIdKey}/portfolio.json"

# Alert Endpoints
ALERTS = "/v1/user/alerts.json"
ALERT_DETAILS = "/v1/user/alerts/{alertId}.json"

# Market Endpoints
MARKET_QUOTE = "/v1/market/quote/{symbols}.json"
MARKET_LOOKUP = "/v1/market/lookup/{search}.json"
MARKET_OPTION_CHAINS = "/v1/market/optionchains.json"
MARKET_OPTION_EXPIRE_DATE = "/v1/market/optionexpiredate.json"

# Order Endpoints
ORDERS = "/v1/accounts/{accountIdKey}/orders.json"
ORDER_PREVIEW = "/v1/accounts/{accountIdKey}/orders/preview.json"
ORDER_PLACE = "/v1/accounts/{accountIdKey}/orders/place.json"
ORDER_CANCEL = "/v1/accounts/{accountIdKey}/orders/cancel.json"
ORDER_CHANGE_PREVIEW = "/v1/accounts/{accountIdKey}/orders/{orderId}/change/preview.json"
ORDER_CHANGE_PLACE = "/v1/accounts/{accountIdKey}/orders/{orderId}/change/place.json"


def _segment(value: Union[str, int]) -> str:
    """Percent-encode a path segment, leaving comma-separated lists intact."""
    return quote(str(value), safe=",")


class EndpointUrls:
    """
    URL builder bound to one API environment.

    Methods are pure: the same arguments always produce the same URL, and
    no argument is validated (an empty id yields a URL with an empty segment).

    Example:
        urls = get_endpoint_urls(production=False)
        urls.get_account_balances_url("dBZOKt9xDrtRSAOl4MSiiA")
        # https://apisb.etrade.com/v1/accounts/dBZOKt9xDrtRSAOl4MSiiA/balance.json
    """

    __slots__ = ("_environment", "_host")

    def __init__(self, environment: Environment):
        self._environment = environment
        self._host = PRODUCTION_HOST if environment is Environment.PRODUCTION else SANDBOX_HOST

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def host(self) -> str:
        return self._host

    def _url(self, path: str) -> str:
        return f"{self._host}{path}"

    def __repr__(self) -> str:
        return f"EndpointUrls({self._environment.value})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndpointUrls):
            return NotImplemented
        return self._environment is other._environment

    def __hash__(self) -> int:
        return hash(self._environment)

    # OAuth

    def request_token_url(self) -> str:
        return self._url(OAUTH_REQUEST_TOKEN)

    def authorize_application_url(self) -> str:
        return AUTHORIZE_URL

    def access_token_url(self) -> str:
        return self._url(OAUTH_ACCESS_TOKEN)

    def renew_access_token_url(self) -> str:
        return self._url(OAUTH_RENEW_ACCESS_TOKEN)

    def revoke_access_token_url(self) -> str:
        return self._url(OAUTH_REVOKE_ACCESS_TOKEN)

    # Accounts

    def list_accounts_url(self) -> str:
        return self._url(ACCOUNTS_LIST)

    def get_account_balances_url(self, account_id_key: str) -> str:
        return self._url(ACCOUNT_BALANCE.format(accountIdKey=_segment(account_id_key)))

    def list_transactions_url(self, account_id_key: str) -> str:
        return self._url(ACCOUNT_TRANSACTIONS.format(accountIdKey=_segment(account_id_key)))

    def list_transaction_details_url(self, account_id_key: str, transaction_id: str) -> str:
        return self._url(
            ACCOUNT_TRANSACTION_DETAILS.format(
                accountIdKey=_segment(account_id_key),
                transactionId=_segment(transaction_id),
            )
        )

    def view_portfolio_url(self, account_id_key: str) -> str:
        return self._url(ACCOUNT_PORTFOLIO.format(accountIdKey=_segment(account_id_key)))

    # Alerts

    def list_alerts_url(self) -> str:
        return self._url(ALERTS)

    def list_alert_details_url(self, alert_id: Union[str, int]) -> str:
        return self._url(ALERT_DETAILS.format(alertId=_segment(alert_id)))

    def delete_alerts_url(self, alert_ids: str) -> str:
        """Build the delete URL; ``alert_ids`` is already comma-joined."""
        return self._url(ALERT_DETAILS.format(alertId=_segment(alert_ids)))

    # Market

    def get_quotes_url(self, symbols: str) -> str:
        """Build the quote URL; ``symbols`` is already comma-joined."""
        return self._url(MARKET_QUOTE.format(symbols=_segment(symbols)))

    def lookup_product_url(self, search: str) -> str:
        return self._url(MARKET_LOOKUP.format(search=_segment(search)))

    def get_option_chains_url(self) -> str:
        return self._url(MARKET_OPTION_CHAINS)

    def get_option_expire_dates_url(self) -> str:
        return self._url(MARKET_OPTION_EXPIRE_DATE)

    # Orders

    def list_orders_url(self, account_id_key: str) -> str:
        return self._url(ORDERS.format(accountIdKey=_segment(account_id_key)))

    def preview_order_url(self, account_id_key: str) -> str:
        return self._url(ORDER_PREVIEW.format(accountIdKey=_segment(account_id_key)))

    def place_order_url(self, account_id_key: str) -> str:
        return self._url(ORDER_PLACE.format(accountIdKey=_segment(account_id_key)))

    def cancel_order_url(self, account_id_key: str) -> str:
        return self._url(ORDER_CANCEL.format(accountIdKey=_segment(account_id_key)))

    def change_previewed_order_url(self, account_id_key: str, order_id: Union[str, int]) -> str:
        return self._url(
            ORDER_CHANGE_PREVIEW.format(
                accountIdKey=_segment(account_id_key), orderId=_segment(order_id)
            )
        )

    def place_changed_order_url(self, account_id_key: str, order_id: Union[str, int]) -> str:
        return self._url(
            ORDER_CHANGE_PLACE.format(
                accountIdKey=_segment(account_id_key), orderId=_segment(order_id)
            )
        )


def get_endpoint_urls(production: bool) -> EndpointUrls:
    """
    Get the URL builder for the sandbox or production environment.

    Args:
        production: True for the live API, False for the sandbox

    Returns:
        EndpointUrls bound to the selected host
    """
    return EndpointUrls(Environment.PRODUCTION if production else Environment.SANDBOX)
