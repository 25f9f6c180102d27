"""Tests for E*TRADE response parsers."""

import json

import pytest

from src.etrade.exceptions import ETradeResponseError
from src.etrade.parsers import (
    decode_json,
    parse_account_list,
    parse_alert_list,
    parse_portfolio_positions,
)


def account_list_body(accounts) -> bytes:
    return json.dumps({"AccountListResponse": {"Accounts": {"Account": accounts}}}).encode()


def portfolio_body(*positions) -> bytes:
    return json.dumps(
        {"PortfolioResponse": {"AccountPortfolio": [{"Position": list(positions)}]}}
    ).encode()


class TestDecodeJson:
    def test_object(self):
        assert decode_json(b'{"a": 1}') == {"a": 1}

    def test_invalid_json(self):
        with pytest.raises(ETradeResponseError, match="not valid JSON"):
            decode_json(b"<html>")

    def test_non_object(self):
        with pytest.raises(ETradeResponseError, match="list"):
            decode_json(b"[1, 2]")


class TestParseAccountList:
    """Tests for parse_account_list function."""

    def test_parses_accounts_in_order(self):
        body = account_list_body(
            [
                {
                    "accountId": "84010429",
                    "accountIdKey": "JIdOIAcSpwR1Jva7RQBraQ",
                    "accountMode": "MARGIN",
                    "accountDesc": "Brokerage",
                    "accountName": "Trading",
                    "accountType": "INDIVIDUAL",
                    "institutionType": "BROKERAGE",
                    "accountStatus": "ACTIVE",
                    "closedDate": 0,
                },
                {"accountId": "84010430", "accountIdKey": "second"},
            ]
        )

        accounts = parse_account_list(body)

        assert [a.account_id for a in accounts] == ["84010429", "84010430"]
        first = accounts[0]
        assert first.account_id_key == "JIdOIAcSpwR1Jva7RQBraQ"
        assert first.account_mode == "MARGIN"
        assert first.account_desc == "Brokerage"
        assert first.account_status == "ACTIVE"
        assert accounts[1].account_type == ""

    def test_single_account_object(self):
        """A lone record serialized as an object is accepted."""
        body = account_list_body({"accountId": "1", "accountIdKey": "k"})

        accounts = parse_account_list(body)

        assert len(accounts) == 1
        assert accounts[0].account_id_key == "k"

    def test_numeric_account_id_becomes_string(self):
        accounts = parse_account_list(account_list_body([{"accountId": 123, "accountIdKey": "k"}]))

        assert accounts[0].account_id == "123"

    def test_empty_accounts(self):
        body = json.dumps({"AccountListResponse": {"Accounts": {}}}).encode()

        assert parse_account_list(body) == []

    def test_account_record_not_object(self):
        with pytest.raises(ETradeResponseError, match="record object"):
            parse_account_list(account_list_body(["x"]))

    def test_invalid_closed_date(self):
        body = account_list_body([{"accountId": "1", "closedDate": "soon"}])

        with pytest.raises(ETradeResponseError, match="closedDate"):
            parse_account_list(body)

    def test_missing_envelope(self):
        with pytest.raises(ETradeResponseError, match="AccountListResponse"):
            parse_account_list(b'{"Something": {}}')


class TestParseAlertList:
    """Tests for parse_alert_list function."""

    def test_parses_alerts(self):
        body = json.dumps(
            {
                "AlertsResponse": {
                    "totalAlerts": 2,
                    "Alert": [
                        {
                            "id": 1234,
                            "createTime": 1677100000,
                            "subject": "Stock alert",
                            "status": "UNREAD",
                        },
                        {"id": "5678", "subject": "Account alert", "status": "READ"},
                    ],
                }
            }
        ).encode()

        alerts = parse_alert_list(body)

        assert [a.id for a in alerts] == [1234, 5678]
        assert alerts[0].create_time == 1677100000
        assert alerts[0].subject == "Stock alert"
        assert alerts[1].status == "READ"

    def test_no_alerts(self):
        assert parse_alert_list(b'{"AlertsResponse": {"totalAlerts": 0}}') == []

    def test_alert_without_id(self):
        body = json.dumps({"AlertsResponse": {"Alert": [{"subject": "x"}]}}).encode()

        with pytest.raises(ETradeResponseError, match="no valid id"):
            parse_alert_list(body)


class TestParsePortfolioPositions:
    """Tests for parse_portfolio_positions function."""

    def test_flattens_account_portfolios(self):
        body = json.dumps(
            {
                "PortfolioResponse": {
                    "AccountPortfolio": [
                        {
                            "accountId": "84010429",
                            "Position": [
                                {
                                    "positionId": 140357348131,
                                    "symbolDescription": "AAPL",
                                    "positionType": "LONG",
                                    "quantity": 100,
                                    "pricePaid": 150.25,
                                    "totalCost": 15025.0,
                                    "marketValue": 17500.0,
                                    "daysGain": 120.0,
                                    "totalGain": 2475.0,
                                    "dateAcquired": 1672531200000,
                                    "Product": {"symbol": "AAPL", "securityType": "EQ"},
                                },
                            ],
                        },
                        {
                            "accountId": "84010430",
                            "Position": {
                                "positionId": 2,
                                "symbolDescription": "MSFT Jan 17 '25 $400 Call",
                                "positionType": "SHORT",
                                "quantity": -1,
                                "Product": {"symbol": "MSFT", "securityType": "OPTN"},
                            },
                        },
                    ]
                }
            }
        ).encode()

        positions = parse_portfolio_positions(body)

        assert len(positions) == 2
        aapl, msft = positions
        assert aapl.symbol == "AAPL"
        assert aapl.security_type == "EQ"
        assert aapl.quantity == 100.0
        assert aapl.total_gain == 2475.0
        assert aapl.date_acquired == 1672531200000
        assert msft.security_type == "OPTN"
        assert msft.position_type == "SHORT"
        assert msft.quantity == -1.0
        assert msft.market_value == 0.0

    def test_empty_portfolio(self):
        assert parse_portfolio_positions(b'{"PortfolioResponse": {}}') == []

    def test_null_product_falls_back_to_description(self):
        body = portfolio_body({"symbolDescription": "AAPL", "quantity": 5, "Product": None})

        position = parse_portfolio_positions(body)[0]

        assert position.symbol == "AAPL"
        assert position.security_type == ""

    def test_product_not_object(self):
        body = portfolio_body({"symbolDescription": "AAPL", "Product": "AAPL"})

        with pytest.raises(ETradeResponseError, match="Product"):
            parse_portfolio_positions(body)

    @pytest.mark.parametrize("field", ["quantity", "pricePaid", "marketValue"])
    def test_null_numeric_field(self, field):
        body = portfolio_body({"symbolDescription": "AAPL", field: None})

        with pytest.raises(ETradeResponseError, match="numeric"):
            parse_portfolio_positions(body)

    def test_position_not_object(self):
        body = portfolio_body("AAPL")

        with pytest.raises(ETradeResponseError, match="record object"):
            parse_portfolio_positions(body)
