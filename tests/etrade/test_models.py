"""Tests for E*TRADE domain models."""

import json
from unittest import mock

import pytest

from src.etrade.client import ETradeClient
from src.etrade.constants import OrderStatus, PortfolioView
from src.etrade.models import AccountInfo, AlertInfo, ETradeAccount, ETradeAlert


@pytest.fixture
def client():
    return mock.Mock(spec=ETradeClient)


@pytest.fixture
def account(client):
    info = AccountInfo(account_id="84010429", account_id_key="KEY", account_desc="Brokerage")
    return ETradeAccount(client, info)


class TestAccountInfo:
    def test_to_dict(self):
        info = AccountInfo(account_id="1", account_id_key="k", account_status="ACTIVE")

        data = info.to_dict()

        assert data["account_id"] == "1"
        assert data["account_status"] == "ACTIVE"
        assert data["closed_date"] == 0

    def test_frozen(self):
        info = AccountInfo(account_id="1", account_id_key="k")

        with pytest.raises(AttributeError):
            info.account_id = "2"


class TestETradeAccount:
    """Tests for ETradeAccount class."""

    def test_properties(self, account, client):
        assert account.account_id == "84010429"
        assert account.account_id_key == "KEY"
        assert account.client is client

    def test_get_balances_uses_key(self, account, client):
        client.get_account_balances.return_value = b"{}"

        assert account.get_balances(real_time_nav=True) == b"{}"
        client.get_account_balances.assert_called_once_with("KEY", True)

    def test_view_portfolio_forwards_options(self, account, client):
        account.view_portfolio(count=10, totals_required=True, view=PortfolioView.QUICK)

        client.view_portfolio.assert_called_once_with(
            "KEY",
            count=10,
            sort_by=None,
            sort_order=None,
            page_number=None,
            market_session=None,
            totals_required=True,
            lots_required=False,
            view=PortfolioView.QUICK,
        )

    def test_get_portfolio_positions(self, account, client):
        client.view_portfolio.return_value = json.dumps(
            {
                "PortfolioResponse": {
                    "AccountPortfolio": [
                        {"Position": [{"positionId": 1, "Product": {"symbol": "IBM"}}]}
                    ]
                }
            }
        ).encode()

        positions = account.get_portfolio_positions()

        assert [p.symbol for p in positions] == ["IBM"]

    def test_list_orders(self, account, client):
        account.list_orders(status=OrderStatus.OPEN, count=5, symbols=["IBM"])

        client.list_orders.assert_called_once_with(
            "KEY",
            marker=None,
            count=5,
            status=OrderStatus.OPEN,
            from_date=None,
            to_date=None,
            symbols=["IBM"],
            security_type=None,
            transaction_type=None,
            market_session=None,
        )

    def test_equality(self, client):
        info = AccountInfo(account_id="1", account_id_key="k")

        assert ETradeAccount(client, info) == ETradeAccount(client, info)
        assert len({ETradeAccount(client, info), ETradeAccount(client, info)}) == 1

    def test_repr(self, account):
        assert repr(account) == "ETradeAccount(84010429 'Brokerage')"


class TestETradeAlert:
    """Tests for ETradeAlert class."""

    def test_get_details(self, client):
        alert = ETradeAlert(client, AlertInfo(id=7, subject="Price alert"))

        alert.get_details(html_tags=True)

        client.list_alert_details.assert_called_once_with(7, True)

    def test_delete(self, client):
        alert = ETradeAlert(client, AlertInfo(id=7))

        alert.delete()

        client.delete_alerts.assert_called_once_with([7])

    def test_to_dict(self):
        assert AlertInfo(id=7, subject="s").to_dict() == {
            "id": 7,
            "create_time": 0,
            "subject": "s",
            "status": "",
        }
