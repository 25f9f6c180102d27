"""
Customer-level view over the E*TRADE client.

``ETradeCustomer`` fetches whole collections (accounts, alerts) and wraps each
record in a domain object. Lookups by id fetch the full collection and scan
it; the API has no per-id filter for these collections and nothing is cached,
so every call reflects the server's current state.
"""

import logging
from typing import List

from .client import ETradeClient
from .exceptions import ETradeNotFoundError
from .models import ETradeAccount, ETradeAlert
from .parsers import parse_account_list, parse_alert_list

logger = logging.getLogger(__name__)


class ETradeCustomer:
    """
    Accounts and alerts belonging to one authenticated customer.

    Example:
        customer = ETradeCustomer(client, "Jane")
        for account in customer.get_all_accounts():
            print(account.account_id)

        alert = customer.get_alert_by_id(1234)
    """

    def __init__(self, client: ETradeClient, customer_name: str = ""):
        self.client = client
        self.customer_name = customer_name

    def get_all_accounts(self) -> List[ETradeAccount]:
        """
        Fetch every account of the customer.

        Returns:
            List of ETradeAccount objects in response order

        Raises:
            ETradeError: Client and decoding errors propagate unchanged
        """
        logger.info("Fetching accounts")

        body = self.client.list_accounts()
        accounts = [ETradeAccount(self.client, info) for info in parse_account_list(body)]

        logger.info(f"Retrieved {len(accounts)} account(s)")
        return accounts

    def get_account_by_id(self, account_id: str) -> ETradeAccount:
        """
        Find an account by its account id.

        Args:
            account_id: Account id (not the account id key)

        Returns:
            The matching ETradeAccount

        Raises:
            ETradeNotFoundError: If no account has this id
            ETradeError: Client and decoding errors propagate unchanged
        """
        for account in self.get_all_accounts():
            if account.account_id == account_id:
                return account

        raise ETradeNotFoundError(f"account with id {account_id} not found")

    def get_all_alerts(self) -> List[ETradeAlert]:
        """
        Fetch every alert of the customer.

        Returns:
            List of ETradeAlert objects in response order

        Raises:
            ETradeError: Client and decoding errors propagate unchanged
        """
        logger.info("Fetching alerts")

        body = self.client.list_alerts()
        alerts = [ETradeAlert(self.client, info) for info in parse_alert_list(body)]

        logger.info(f"Retrieved {len(alerts)} alert(s)")
        return alerts

    def get_alert_by_id(self, alert_id: int) -> ETradeAlert:
        """
        Find an alert by its numeric id.

        Raises:
            ETradeNotFoundError: If no alert has this id
            ETradeError: Client and decoding errors propagate unchanged
        """
        for alert in self.get_all_alerts():
            if alert.id == alert_id:
                return alert

        raise ETradeNotFoundError(f"alert with id {alert_id} not found")
